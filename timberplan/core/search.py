"""Dimension search — grows cross-sections until every statics check passes."""

from __future__ import annotations
import logging
from enum import Enum
from pydantic import BaseModel

from timberplan.config import Settings, get_settings
from timberplan.core.errors import OptimizationExhausted
from timberplan.core.generator import PlanGenerator
from timberplan.core.statics import StaticsEngine
from timberplan.models import CrossSections, FrameParameters, Part

logger = logging.getLogger(__name__)


class SearchState(str, Enum):
    """Terminal outcome of a search."""
    CONVERGED = "converged"
    EXHAUSTED = "exhausted"


class SearchResult(BaseModel):
    """Outcome of a search; ``history`` lists the sections tried, in order."""
    state: SearchState
    iterations: int
    parameters: FrameParameters
    parts: list[Part] = []
    history: list[CrossSections] = []
    failing: list[str] = []


def next_standard(current: float, standards: list[float]) -> float:
    """First standard size above ``current`` (1mm tolerance), else 2cm more."""
    for value in standards:
        if value > current + 0.001:
            return value
    return current + 0.02


def failure_category(key: str) -> str | None:
    """Which section dimension a failing part key grows."""
    if key.startswith("rafter"):
        return "rafter_height"
    if key.startswith("middle_purlin"):
        return "middle_purlin_height"
    if key == "cross_member":
        return "tie_beam_height"
    if any(token in key for token in ("plate", "purlin", "beam", "ceiling_joist")):
        return "beam_height"
    return None


def enlarge_sections(
    sections: CrossSections,
    failed_keys: list[str],
    settings: Settings | None = None,
) -> CrossSections:
    """Bump each failing category once to its next standard height.

    Beams are widened to the next standard width when they get more than
    ``max_slenderness`` times higher than wide, up to ``max_beam_width``.
    """
    settings = settings or get_settings()
    fields = {c for c in map(failure_category, failed_keys) if c is not None}
    changes = {
        field: next_standard(getattr(sections, field), settings.standard_heights)
        for field in sorted(fields)
    }

    beam_width = sections.beam_width
    beam_height = changes.get("beam_height", sections.beam_height)
    if beam_height > beam_width * settings.max_slenderness and beam_width < settings.max_beam_width:
        changes["beam_width"] = min(
            next_standard(beam_width, settings.standard_widths),
            settings.max_beam_width,
        )
    return sections.model_copy(update=changes)


class DimensionSearch:
    """
    Iterates generate -> check -> enlarge.

    Each iteration regenerates the full part list from fresh parameters,
    so no state leaks between attempts. After convergence the posts take
    the final beam width.
    """

    def __init__(
        self,
        generator: PlanGenerator,
        engine: StaticsEngine | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.generator = generator
        self.engine = engine or StaticsEngine(self.settings)

    def check(self, params: FrameParameters) -> tuple[list[Part], list[str]]:
        """Generate and evaluate one candidate; returns parts and failing keys."""
        parts = self.engine.evaluate(self.generator.generate(params), params)
        failing = [p.key for p in parts if p.statics is not None and not p.statics.passed]
        return parts, failing

    def run(self, params: FrameParameters) -> SearchResult:
        current = params
        history: list[CrossSections] = []
        parts: list[Part] = []
        failing: list[str] = []

        attempted = current
        for iteration in range(1, self.settings.max_iterations + 1):
            attempted = current
            history.append(current.sections)
            parts, failing = self.check(current)
            logger.debug("Iteration %d: %d parts, failing %s", iteration, len(parts), failing or "none")

            if not failing:
                final = current.with_sections(post=current.sections.beam_width)
                parts, failing = self.check(final)
                logger.info(
                    "Statics converged after %d iterations (beam %.2fx%.2fm, rafter %.2fx%.2fm)",
                    iteration, final.sections.beam_width, final.sections.beam_height,
                    final.sections.rafter_width, final.sections.rafter_height,
                )
                return SearchResult(
                    state=SearchState.CONVERGED,
                    iterations=iteration,
                    parameters=final,
                    parts=parts,
                    history=history,
                    failing=failing,
                )

            current = current.with_sections(enlarge_sections(current.sections, failing, self.settings))

        result = SearchResult(
            state=SearchState.EXHAUSTED,
            iterations=self.settings.max_iterations,
            parameters=attempted,
            parts=parts,
            history=history,
            failing=failing,
        )
        logger.warning("Statics search exhausted after %d iterations, failing: %s", result.iterations, failing)
        raise OptimizationExhausted(result)
