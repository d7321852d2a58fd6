"""Carport with gable roof — post-and-beam frame.

Posts carry side plates (eaves purlins) along the depth; tie beams join
opposite posts and carry king posts under the ridge beam. Head braces
stiffen every post/beam joint. Rafters rest on side plate, optional
middle purlins and ridge beam.
"""

from __future__ import annotations

from timberplan.annotation.dimensions import box_drawing, rafter_markings
from timberplan.annotation.parts import annotate_rafter, post_drawing
from timberplan.geometry.braces import head_brace_leg
from timberplan.geometry.rafters import (
    MIN_KING_POST, gable_middle_purlin_seat, gable_rafter_profile, king_post_height,
)
from timberplan.models import Part, PartRegistry, PlanContext
from timberplan.rules.base import FramingRule, describe
from timberplan.rules.carport.common import add_head_brace


class CarportGableFrameRule(FramingRule):
    """Posts, plates, tie beams, ridge structure, head braces and rafters."""

    priority = 50

    def get_id(self) -> str:
        return "carport.gable_frame"

    def get_name(self) -> str:
        return "Carport Gable Frame"

    def applies(self, context: PlanContext) -> bool:
        return context.params.is_carport and context.params.is_gable

    def generate(self, context: PlanContext) -> list[Part]:
        params = context.params
        s = params.sections
        W, D, H = params.width, params.depth, params.wall_height
        n = len(context.post_positions)
        parts = PartRegistry()

        # Posts
        post_height = H - s.beam_height
        post_leg = head_brace_leg(post_height - 0.1)
        parts.add(
            "post", describe("Pfosten", s.post, s.post, post_height), n * 2,
            width=s.post, height=s.post, length=post_height,
            drawing=post_drawing(post_height, s.post, post_leg),
        )

        # Side plates, marked at every rafter
        markers, dims = rafter_markings(context.rafters, D)
        beam_long, beam_short = max(s.beam_height, s.beam_width), min(s.beam_height, s.beam_width)
        parts.add(
            "side_plate", describe("Längspfetten", s.beam_width, s.beam_height, D), 2,
            width=s.beam_width, height=s.beam_height, length=D,
            drawing=box_drawing(D, beam_long, beam_short, dims, markers),
        )

        # Tie beams between opposite posts
        tie_length = W - s.post
        parts.add(
            "tie_beam", describe("Zangen/Querhölzer", s.beam_width, s.beam_height, tie_length), n,
            width=s.beam_width, height=s.beam_height, length=tie_length,
            drawing=box_drawing(tie_length, beam_long, beam_short),
        )

        # Ridge beam on king posts wherever they fit
        plate_inner = W / 2 - s.beam_width / 2
        king_height = king_post_height(
            plate_inner, H, s.beam_width, s.beam_height, s.rafter_height, params.roof_pitch,
        )
        if king_height > MIN_KING_POST:
            king_leg = min(0.7, max(0.1, king_height - 0.05))
            parts.add(
                "king_post", describe("First-Stütze", s.post, s.post, king_height), n,
                width=s.post, height=s.post, length=king_height,
                drawing=post_drawing(king_height, s.post, king_leg),
            )
            add_head_brace(parts, "brace_king", "Kopfband First-Stütze", king_leg, s.brace, 2)

        parts.add(
            "ridge_beam", describe("Firstpfette", s.beam_width, s.beam_height, D), 1,
            width=s.beam_width, height=s.beam_height, length=D,
            drawing=box_drawing(D, beam_long, beam_short, dims, markers),
        )

        # Middle purlins on support posts standing on the tie beams
        seat = None
        purlin = s.middle_purlin
        if purlin is not None:
            seat = gable_middle_purlin_seat(
                plate_inner, H, s.beam_width, purlin.width, purlin.height, params.roof_pitch,
            )
            parts.add(
                "middle_purlin", describe("Mittelpfette", purlin.width, purlin.height, D), 2,
                width=purlin.width, height=purlin.height, length=D,
                drawing=box_drawing(
                    D, max(purlin.width, purlin.height), min(purlin.width, purlin.height), dims, markers,
                ),
            )
            support_height = seat.seat_y - purlin.height - H
            if support_height > 0.01:
                parts.add(
                    "support_post", describe("Mittelpfetten-Stütze", s.post, s.post, support_height), n * 2,
                    width=s.post, height=s.post, length=support_height,
                    drawing=box_drawing(support_height, s.post, s.post),
                )

        # Head braces: across at the two end frames, along at all four corners
        main_leg = head_brace_leg(
            post_height - s.beam_height - 0.1,
            tie_length / 2 - s.post / 2 - 0.1,
        )
        add_head_brace(parts, "brace_main_trans", "Kopfband Pfosten (quer)", main_leg, s.brace, 4)
        add_head_brace(parts, "brace_main_long", "Kopfband Pfosten (längs)", main_leg, s.brace, 4)

        # Rafters, one pair per rafter position
        profile = gable_rafter_profile(
            plate_inner, W / 2 + s.beam_width / 2, H, s.beam_width,
            s.rafter_height, params.roof_overhang, params.roof_pitch, seat,
        )
        parts.add(
            "rafter", describe("Sparren", s.rafter_width, s.rafter_height, profile.total_length),
            context.rafters.count * 2,
            width=s.rafter_width, height=s.rafter_height, length=profile.total_length,
            drawing=annotate_rafter(profile, s.rafter_width, s.rafter_height),
        )
        return parts.to_list()
