"""Carport with shed (or flat) roof — one high and one low post row.

The rafters fall from the high purlin to the low purlin. Cross members
join the low post row to the high side at low purlin level and carry the
optional middle purlin support posts.
"""

from __future__ import annotations

from timberplan.annotation.dimensions import box_drawing, rafter_markings
from timberplan.annotation.parts import annotate_rafter, post_drawing
from timberplan.core.errors import ConstructionError
from timberplan.geometry.braces import head_brace_leg
from timberplan.geometry.rafters import ShedLine, shed_middle_purlin_seat, shed_rafter_profile
from timberplan.models import Part, PartRegistry, PlanContext
from timberplan.rules.base import FramingRule, describe
from timberplan.rules.carport.common import add_head_brace


class CarportShedFrameRule(FramingRule):
    """High/low posts and purlins, cross members, head braces and sloped rafters."""

    priority = 50

    def get_id(self) -> str:
        return "carport.shed_frame"

    def get_name(self) -> str:
        return "Carport Shed Frame"

    def applies(self, context: PlanContext) -> bool:
        return context.params.is_carport and not context.params.is_gable

    def generate(self, context: PlanContext) -> list[Part]:
        params = context.params
        s = params.sections
        W, D, H = params.width, params.depth, params.wall_height
        n = len(context.post_positions)
        parts = PartRegistry()

        line = ShedLine(
            high_post_x=-W / 2, low_post_x=W / 2,
            beam_width=s.beam_width, high_seat_y=H, pitch=params.roof_pitch,
        )
        low_seat = line.low_seat_y
        high_post_height = H - s.beam_height
        low_post_height = low_seat - s.beam_height
        if low_post_height <= 0:
            raise ConstructionError(
                f"low post height is not positive ({low_post_height:.2f}m): "
                f"roof pitch {params.roof_pitch:.1f}° drops below the ground over {W:.2f}m"
            )

        # Middle purlin on support posts standing on the cross members
        seat = None
        purlin = s.middle_purlin
        markers, dims = rafter_markings(context.rafters, D)
        if purlin is not None:
            seat = shed_middle_purlin_seat(line, purlin.width, purlin.height)
            parts.add(
                "middle_purlin_pult", describe("Mittelpfette", purlin.width, purlin.height, D), 1,
                width=purlin.width, height=purlin.height, length=D,
                drawing=box_drawing(
                    D, max(purlin.width, purlin.height), min(purlin.width, purlin.height), dims, markers,
                ),
            )
            support_height = seat.seat_y - purlin.height - low_seat
            if support_height > 0.01:
                parts.add(
                    "support_post_pult", describe("Mittelpfetten-Stütze", s.post, s.post, support_height), n,
                    width=s.post, height=s.post, length=support_height,
                    drawing=box_drawing(support_height, s.post, s.post),
                )

        # Posts
        low_leg = head_brace_leg(low_post_height - s.beam_height - 0.1)
        high_leg = head_brace_leg(high_post_height - s.beam_height - 0.1)
        parts.add(
            "post_high", describe("Pfosten Hoch", s.post, s.post, high_post_height), n,
            width=s.post, height=s.post, length=high_post_height,
            drawing=post_drawing(high_post_height, s.post, high_leg),
        )
        parts.add(
            "post_low", describe("Pfosten Tief", s.post, s.post, low_post_height), n,
            width=s.post, height=s.post, length=low_post_height,
            drawing=post_drawing(low_post_height, s.post, low_leg),
        )

        # Head braces: along at both end posts, across on the low side
        add_head_brace(parts, "brace_high_long", "Kopfband (hoch, längs)", high_leg, s.brace, 2)
        add_head_brace(parts, "brace_low_long", "Kopfband (tief, längs)", low_leg, s.brace, 2)
        add_head_brace(parts, "brace_low_trans", "Kopfband (tief, quer)", low_leg, s.brace, n)

        # Purlins
        beam_long, beam_short = max(s.beam_height, s.beam_width), min(s.beam_height, s.beam_width)
        for key, name in (("purlin_high", "Pfetten Hoch"), ("purlin_low", "Pfetten Tief")):
            parts.add(
                key, describe(name, s.beam_width, s.beam_height, D), 1,
                width=s.beam_width, height=s.beam_height, length=D,
                drawing=box_drawing(D, beam_long, beam_short, dims, markers),
            )

        cross_length = W - s.post
        parts.add(
            "cross_member", describe("Zangen", s.beam_width, s.tie_beam_height, cross_length), n,
            width=s.beam_width, height=s.tie_beam_height, length=cross_length,
            drawing=box_drawing(
                cross_length, max(s.beam_width, s.tie_beam_height), min(s.beam_width, s.tie_beam_height),
            ),
        )

        profile = shed_rafter_profile(line, s.rafter_height, params.roof_overhang, seat)
        parts.add(
            "rafter_sloped", describe("Sparren", s.rafter_width, s.rafter_height, profile.total_length),
            context.rafters.count,
            width=s.rafter_width, height=s.rafter_height, length=profile.total_length,
            drawing=annotate_rafter(profile, s.rafter_width, s.rafter_height),
        )
        return parts.to_list()
