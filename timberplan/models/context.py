"""Plan context — accumulates state during one generation pass."""

from __future__ import annotations
from pydantic import BaseModel

from .layout import RafterLayout, StudLayout
from .parameters import FrameParameters
from .parts import Part, PartRegistry


class PlanContext(BaseModel):
    """
    Holds all state during a single plan generation pass.

    The analyzer adds layouts (rafters, posts, studs).
    Rules add generated parts.
    The generator orchestrates the flow.
    """
    # Input
    params: FrameParameters

    # Analysis results (populated by the analyzer)
    rafters: RafterLayout | None = None
    post_positions: list[float] = []
    gable_studs: StudLayout | None = None
    side_studs: StudLayout | None = None

    # Output (populated by rules)
    parts: PartRegistry = PartRegistry()

    def add_parts(self, parts: list[Part]) -> None:
        for part in parts:
            self.parts.insert(part)
