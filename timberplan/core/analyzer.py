"""Layout analysis — rafter, post and stud positions for one building."""

from __future__ import annotations
import logging

from timberplan.core.errors import ConstructionError
from timberplan.geometry.layout import post_positions, rafter_layout, stud_layout
from timberplan.models import SILL_HEIGHT, STUD_SPACING, PlanContext

logger = logging.getLogger(__name__)


class FrameAnalyzer:
    """Computes member layouts and rejects frames with non-positive spans."""

    def analyze(self, context: PlanContext) -> None:
        """Run all analysis passes and populate the context."""
        params = context.params
        s = params.sections
        context.rafters = rafter_layout(params.depth, s.rafter_width)

        if params.is_carport:
            self._check_carport(context)
            context.post_positions = post_positions(params.depth, params.roof_overhang, s.post_count)
        else:
            self._check_garden_house(context)
            gable_length = params.width - 2 * s.stud_depth
            context.gable_studs = stud_layout(gable_length, s.stud_thickness, STUD_SPACING)
            context.side_studs = stud_layout(params.depth, s.stud_thickness, STUD_SPACING)

        logger.debug(
            "Analyzed %s %.2fx%.2fm: %d rafters, %d posts per side",
            params.building_type.value, params.width, params.depth,
            context.rafters.count, len(context.post_positions),
        )

    def _check_carport(self, context: PlanContext) -> None:
        params = context.params
        s = params.sections
        if params.wall_height - s.beam_height <= 0:
            raise ConstructionError(
                f"post height is not positive: wall height {params.wall_height:.2f}m, "
                f"beam height {s.beam_height:.2f}m"
            )
        if params.width - s.post <= 0:
            raise ConstructionError(
                f"tie beam length is not positive: width {params.width:.2f}m, post {s.post:.2f}m"
            )

    def _check_garden_house(self, context: PlanContext) -> None:
        params = context.params
        s = params.sections
        wall_height = params.wall_height - SILL_HEIGHT - s.top_plate_height
        if wall_height <= 0:
            raise ConstructionError(
                f"stud height is not positive: wall height {params.wall_height:.2f}m "
                f"leaves {wall_height:.2f}m between sill and top plate"
            )
        gable_length = params.width - 2 * s.stud_depth
        if gable_length < 2 * s.stud_thickness:
            raise ConstructionError(
                f"gable wall of {gable_length:.2f}m cannot hold two studs"
            )
