"""Structural configuration proposed by the advisory collaborator."""

from __future__ import annotations
from pydantic import BaseModel, Field


class StructuralSuggestion(BaseModel):
    """Initial structural guess; every value may be overridden by the search."""
    posts_per_side: int | None = Field(default=None, ge=2)
    use_middle_purlin: bool = False
    use_king_posts: bool | None = None
    batten_width: float = 0.06
    batten_height: float = 0.08
    stud_depth: float | None = None
