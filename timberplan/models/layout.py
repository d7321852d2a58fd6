"""Member layouts along a wall or roof run."""

from __future__ import annotations
from pydantic import BaseModel


class StudLayout(BaseModel):
    """Stud centrelines measured from the start of a run."""
    positions: list[float]
    spacings: list[float]

    @property
    def count(self) -> int:
        return len(self.positions)

    @property
    def max_spacing(self) -> float:
        return max(self.spacings) if self.spacings else 0.0


class RafterLayout(BaseModel):
    """Rafter pairs along the building depth."""
    count: int
    spacing: float          # Centre-to-centre
    positions: list[float]  # Centrelines, measured from the depth midpoint
