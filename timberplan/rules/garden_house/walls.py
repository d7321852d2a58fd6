"""Garden house stud walls.

Side walls run the full depth; gable walls fit between them. Each wall is
sill + studs + top plate, braced diagonally in its first and last bay.
"""

from __future__ import annotations

from timberplan.annotation.dimensions import box_drawing, stud_markings
from timberplan.annotation.parts import annotate_brace
from timberplan.geometry.braces import solve_brace
from timberplan.models import SILL_HEIGHT, Part, PartRegistry, PlanContext, StudLayout
from timberplan.rules.base import FramingRule, describe


class GardenHouseWallsRule(FramingRule):
    """Sills, studs, wall braces and top plates for all four walls."""

    priority = 50

    def get_id(self) -> str:
        return "garden_house.walls"

    def get_name(self) -> str:
        return "Garden House Stud Walls"

    def applies(self, context: PlanContext) -> bool:
        return not context.params.is_carport

    def generate(self, context: PlanContext) -> list[Part]:
        params = context.params
        s = params.sections
        D, overhang = params.depth, params.roof_overhang
        t, depth = s.stud_thickness, s.stud_depth
        gable, side = context.gable_studs, context.side_studs
        gable_length = params.width - 2 * depth
        wall_height = params.wall_height - SILL_HEIGHT - s.top_plate_height
        parts = PartRegistry()

        # Studs
        stud = dict(
            width=depth, height=t, length=wall_height,
            drawing=box_drawing(wall_height, depth, t),
        )
        stud_desc = describe("Ständer", depth, t, wall_height)
        parts.add("stud_gable", stud_desc, gable.count * 2, **stud)
        parts.add("stud_side", stud_desc, side.count * 2, **stud)

        # Sills, marked at every stud
        markers, dims = stud_markings(side, SILL_HEIGHT)
        parts.add(
            "sill_d", describe("Schwelle Längsseite", depth, SILL_HEIGHT, D), 2,
            width=depth, height=SILL_HEIGHT, length=D,
            drawing=box_drawing(D, SILL_HEIGHT, depth, dims, markers),
        )
        markers, dims = stud_markings(gable, SILL_HEIGHT)
        parts.add(
            "sill_w", describe("Schwelle Stirnseite", depth, SILL_HEIGHT, gable_length), 2,
            width=depth, height=SILL_HEIGHT, length=gable_length,
            drawing=box_drawing(gable_length, SILL_HEIGHT, depth, dims, markers),
        )

        # Wall braces in the end bays
        self._braces(parts, gable, "gable", "Giebelwand", wall_height, t, depth)
        self._braces(parts, side, "side", "Längswand", wall_height, t, depth)

        # Top plates; the side plates run out under the roof overhang
        tpw, tph = s.top_plate_width, s.top_plate_height
        side_plate_length = D + 2 * overhang
        markers, dims = stud_markings(side, tph, overhang)
        parts.add(
            "top_plate_d", describe("Fusspfette Längsseite", tpw, tph, side_plate_length), 2,
            width=tpw, height=tph, length=side_plate_length,
            drawing=box_drawing(side_plate_length, tph, tpw, dims, markers),
        )
        markers, dims = stud_markings(gable, tph)
        parts.add(
            "top_plate_w", describe("Rähm Stirnseite", tpw, tph, gable_length), 2,
            width=tpw, height=tph, length=gable_length,
            drawing=box_drawing(gable_length, tph, tpw, dims, markers),
        )
        return parts.to_list()

    @staticmethod
    def _braces(
        parts: PartRegistry,
        layout: StudLayout,
        wall: str,
        wall_name: str,
        wall_height: float,
        thickness: float,
        depth: float,
    ) -> None:
        """One brace per wall in the first and (if different) last bay."""
        bays = [("bay1", "Feld 1", layout.spacings[:1])]
        if len(layout.spacings) > 1:
            bays.append(("bay_last", "letztes Feld", layout.spacings[-1:]))

        for tag, label, spacing in bays:
            if not spacing:
                continue
            bay = spacing[0] - thickness
            if bay <= thickness * 0.5:
                continue
            solution = solve_brace(wall_height, bay, thickness)
            if solution.degenerate:
                continue
            parts.add(
                f"brace_{wall}_{tag}_{round(bay * 1000)}",
                describe(f"Strebe {wall_name} ({label})", depth, thickness, solution.tip_length), 2,
                width=depth, height=thickness, length=solution.tip_length,
                drawing=annotate_brace(solution, depth),
            )
