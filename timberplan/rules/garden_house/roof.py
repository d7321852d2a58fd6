"""Garden house gable roof on the stud walls.

The rafters sit on the side top plates and the ridge beam. The ridge beam
is carried by gable posts at both ends and, with king posts, by ceiling
joists at every rafter.
"""

from __future__ import annotations
import math

from timberplan.annotation.dimensions import box_drawing
from timberplan.annotation.parts import annotate_rafter
from timberplan.geometry.rafters import MIN_KING_POST, gable_rafter_profile, king_post_height
from timberplan.models import Part, PartRegistry, PlanContext
from timberplan.rules.base import FramingRule, describe


class GardenHouseGableRoofRule(FramingRule):
    """Ceiling joists, king posts, ridge beam, gable posts and rafters."""

    priority = 100
    dependencies = ["garden_house.walls"]

    def get_id(self) -> str:
        return "garden_house.gable_roof"

    def get_name(self) -> str:
        return "Garden House Gable Roof"

    def applies(self, context: PlanContext) -> bool:
        return not context.params.is_carport and context.params.is_gable

    def generate(self, context: PlanContext) -> list[Part]:
        params = context.params
        s = params.sections
        W, D, H = params.width, params.depth, params.wall_height
        overhang = params.roof_overhang
        tpw, tph = s.top_plate_width, s.top_plate_height
        rafters = context.rafters
        parts = PartRegistry()

        if s.use_king_posts:
            joist_length = W - 2 * tpw
            parts.add(
                "ceiling_joist", describe("Deckenträger/Zange", s.rafter_width, tph, joist_length),
                rafters.count,
                width=s.rafter_width, height=tph, length=joist_length,
                drawing=box_drawing(joist_length, tph, s.rafter_width),
            )

        ridge_length = D + 2 * overhang
        parts.add(
            "ridge_beam", describe("Firstpfette", s.beam_width, s.beam_height, ridge_length), 1,
            width=s.beam_width, height=s.beam_height, length=ridge_length,
            drawing=box_drawing(ridge_length, s.beam_height, s.beam_width),
        )

        plate_inner = W / 2 - tpw
        post_height = king_post_height(
            plate_inner, H, s.beam_width, s.beam_height, s.rafter_height, params.roof_pitch,
        )
        if s.use_king_posts and post_height > MIN_KING_POST:
            parts.add(
                "king_post", describe("First-Stütze", s.rafter_width, s.beam_width, post_height),
                rafters.count,
                width=s.rafter_width, height=s.beam_width, length=post_height,
                drawing=box_drawing(post_height, s.beam_width, s.rafter_width),
            )
        if post_height > MIN_KING_POST:
            parts.add(
                "gable_post", describe("Giebel-Stützpfosten", s.stud_depth, s.stud_thickness, post_height), 2,
                width=s.stud_depth, height=s.stud_thickness, length=post_height,
                drawing=box_drawing(post_height, s.stud_depth, s.stud_thickness),
            )

        # Extra rafters carry the ridge and plate overhangs
        profile = gable_rafter_profile(
            plate_inner, W / 2, H, s.beam_width, s.rafter_height, overhang, params.roof_pitch,
        )
        count = rafters.count
        if rafters.spacing > 0:
            count += max(0, math.ceil(2 * overhang / rafters.spacing) - 2)
        parts.add(
            "rafter", describe("Sparren", s.rafter_width, s.rafter_height, profile.total_length), count * 2,
            width=s.rafter_width, height=s.rafter_height, length=profile.total_length,
            drawing=annotate_rafter(profile, s.rafter_width, s.rafter_height),
        )
        return parts.to_list()
