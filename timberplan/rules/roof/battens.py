"""Roof battens, cut from stock bars.

Rows run along the building depth at a fixed spacing up each roof slope.
Each row is split over rafter centrelines and all pieces are packed onto
stock bars by the cutting optimizer.
"""

from __future__ import annotations
import logging
import math

from timberplan.annotation.dimensions import box_drawing
from timberplan.config import Settings, get_settings
from timberplan.core.cutting import describe_plan, optimize_cuts, row_cuts
from timberplan.models import Part, PlanContext
from timberplan.rules.base import FramingRule

logger = logging.getLogger(__name__)


class BattenRule(FramingRule):
    """One ``counter_batten`` part carrying the cutting plan."""

    priority = 200
    dependencies = [
        "carport.gable_frame",
        "carport.shed_frame",
        "garden_house.gable_roof",
    ]

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()

    def get_id(self) -> str:
        return "roof.battens"

    def get_name(self) -> str:
        return "Roof Battens"

    def applies(self, context: PlanContext) -> bool:
        s = context.params.sections
        return s.batten_width > 0 and s.batten_height > 0

    def generate(self, context: PlanContext) -> list[Part]:
        params = context.params
        s = params.sections
        rafter = context.parts.find("rafter")
        if rafter is None or not rafter.length or rafter.length <= 0.1:
            return []

        slopes = 2 if params.is_gable else 1
        rows = math.ceil(rafter.length / self.settings.batten_spacing) * slopes
        row_length = params.depth if params.is_carport else params.depth + 2 * params.roof_overhang
        stock = self.settings.stock_length

        pieces = row_cuts(row_length, stock, context.rafters.positions)
        plan = optimize_cuts(pieces * rows, stock, self.settings.kerf)
        if plan.stock_count == 0:
            logger.warning("No batten fits a %.2fm stock bar, skipping battens", stock)
            return []

        description = (
            f"Traglatten {round(s.batten_width * 1000)}x{round(s.batten_height * 1000)}mm "
            f"({plan.stock_count} x {stock:g}m Stangen)"
        )
        text = describe_plan(plan)
        if text:
            description += f"\n\n{text}"

        return [Part(
            key="counter_batten",
            quantity=plan.stock_count,
            description=description,
            width=s.batten_width,
            height=s.batten_height,
            length=stock,
            drawing=box_drawing(stock, s.batten_height, s.batten_width),
            cutting_plan=plan,
        )]
