"""High-level plan service — facade for the API layer."""

from __future__ import annotations
import logging
from collections.abc import Mapping
from pydantic import BaseModel

from timberplan.config import Settings, get_settings
from timberplan.core.generator import PlanGenerator
from timberplan.core.registry import RuleRegistry, create_default_registry
from timberplan.core.search import DimensionSearch
from timberplan.core.statics import StaticsEngine
from timberplan.core.summary import summarize
from timberplan.models import FrameParameters, Part, SummaryInfo
from timberplan.services.advisory import AdvisoryService, RuleOfThumbAdvisor, initial_sections
from timberplan.services.inputs import build_parameters

logger = logging.getLogger(__name__)


class ConstructionPlan(BaseModel):
    """Final plan: converged parameters, parts with statics, and totals."""
    parameters: FrameParameters
    parts: list[Part]
    summary: SummaryInfo
    iterations: int


class PlanService:
    """Parses input, asks the advisor, runs the search, summarizes the result."""

    def __init__(
        self,
        registry: RuleRegistry | None = None,
        advisor: AdvisoryService | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.registry = registry or create_default_registry()
        self.advisor = advisor or RuleOfThumbAdvisor()
        self.generator = PlanGenerator(self.registry)
        self.statics = StaticsEngine(self.settings)
        self.search = DimensionSearch(self.generator, self.statics, self.settings)

    def generate(self, raw: Mapping[str, object]) -> ConstructionPlan:
        return self.generate_for(build_parameters(raw))

    def generate_for(self, params: FrameParameters) -> ConstructionPlan:
        suggestion = self.advisor.suggest(params)
        seeded = params.with_sections(initial_sections(suggestion))
        logger.info(
            "Planning %s %.2fx%.2fx%.2fm, %s roof %.1f°",
            seeded.building_type.value, seeded.width, seeded.depth, seeded.wall_height,
            seeded.roof_type.value, seeded.roof_pitch,
        )

        result = self.search.run(seeded)
        summary = summarize(result.parts, result.parameters, self.settings)
        return ConstructionPlan(
            parameters=result.parameters,
            parts=result.parts,
            summary=summary,
            iterations=result.iterations,
        )

    def list_rules(self) -> list[dict[str, str]]:
        return [
            {"id": r.get_id(), "name": r.get_name()}
            for r in self.registry.list_rules()
        ]
