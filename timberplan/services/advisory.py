"""Initial structural guess for the dimension search."""

from __future__ import annotations
import math
from typing import Protocol

from timberplan.models import CrossSections, FrameParameters, StructuralSuggestion

POST_BAY = 3.5              # Target post spacing along the depth
MIDDLE_PURLIN_SPAN = 5.5    # Horizontal rafter span needing a middle purlin
KING_POST_WIDTH = 4.5       # Garden houses wider than this get king posts


class AdvisoryService(Protocol):
    """Anything that proposes a structural configuration for a building."""

    def suggest(self, params: FrameParameters) -> StructuralSuggestion:
        ...


class RuleOfThumbAdvisor:
    """Deterministic carpenter's rules of thumb."""

    def suggest(self, params: FrameParameters) -> StructuralSuggestion:
        if not params.is_carport:
            return StructuralSuggestion(
                use_king_posts=params.width > KING_POST_WIDTH,
                stud_depth=0.12,
            )

        run = params.depth - 2 * params.roof_overhang
        posts = max(2, math.ceil(run / POST_BAY) + 1) if run > 0 else 2
        span = params.width / 2 if params.is_gable else params.width
        return StructuralSuggestion(
            posts_per_side=posts,
            use_middle_purlin=span > MIDDLE_PURLIN_SPAN,
        )


def initial_sections(suggestion: StructuralSuggestion) -> CrossSections:
    """Default sections with the suggested configuration applied."""
    changes: dict[str, object] = {
        "posts_per_side": suggestion.posts_per_side,
        "use_middle_purlin": suggestion.use_middle_purlin,
        "batten_width": suggestion.batten_width,
        "batten_height": suggestion.batten_height,
    }
    if suggestion.use_king_posts is not None:
        changes["use_king_posts"] = suggestion.use_king_posts
    if suggestion.stud_depth is not None:
        changes["stud_depth"] = suggestion.stud_depth
    return CrossSections(**changes)
