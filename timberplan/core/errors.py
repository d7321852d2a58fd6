"""Planner error types.

Degenerate geometry (e.g. a brace bay too small to solve) is not an error:
the kernel reports it on the result and the part is left out. Cuts longer
than the batten stock are collected on ``CuttingPlan.rejected``.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from timberplan.core.search import SearchResult


class PlanError(Exception):
    """Base class for planner failures."""


class ConstructionError(PlanError):
    """Input describes a physically impossible frame (non-positive span)."""


class OptimizationExhausted(PlanError):
    """Dimension search used its iteration limit without passing statics."""

    def __init__(self, result: SearchResult) -> None:
        self.result = result
        failing = ", ".join(result.failing) or "none"
        super().__init__(
            f"no passing cross-sections after {result.iterations} iterations "
            f"(still failing: {failing})"
        )
