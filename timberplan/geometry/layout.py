"""Member layouts — studs along walls, rafters and posts along the depth."""

from __future__ import annotations
import math

from timberplan.core.errors import ConstructionError
from timberplan.models import RafterLayout, StudLayout


RAFTER_TARGET_SPACING = 0.8  # Upper bound for rafter centre-to-centre


def stud_layout(total_length: float, thickness: float, spacing: float) -> StudLayout:
    """Greedy stud layout with the last stud snapped to the far end.

    Studs start at ``thickness / 2`` and step by ``spacing`` while the next
    stud stays at least half a spacing short of the end stud. The last bay
    absorbs the remainder.
    """
    if spacing <= 0:
        raise ConstructionError(f"stud spacing must be positive, got {spacing}")

    if total_length < thickness * 2:
        positions = [thickness / 2, total_length - thickness / 2]
        return StudLayout(positions=positions, spacings=[total_length - thickness])

    positions = [thickness / 2]
    current = thickness / 2
    end = total_length - thickness / 2
    while current + spacing < end - spacing / 2:
        current += spacing
        positions.append(current)
    positions.append(end)

    spacings = [b - a for a, b in zip(positions, positions[1:])]
    return StudLayout(positions=positions, spacings=spacings)


def rafter_layout(depth: float, rafter_width: float) -> RafterLayout:
    """Rafters at most ~80cm apart, outer faces flush with the depth ends."""
    count = max(2, math.floor(depth / RAFTER_TARGET_SPACING) + 1)
    spacing = (depth - rafter_width) / (count - 1)
    first = -depth / 2 + rafter_width / 2
    return RafterLayout(
        count=count,
        spacing=spacing,
        positions=[first + i * spacing for i in range(count)],
    )


def post_positions(depth: float, overhang: float, count: int) -> list[float]:
    """Evenly spaced post centrelines between the roof overhangs."""
    run = depth - 2 * overhang
    if run <= 0:
        raise ConstructionError(
            f"depth {depth:.2f}m leaves no room for posts with {overhang:.2f}m overhang"
        )
    count = max(2, count)
    return [-run / 2 + i * run / (count - 1) for i in range(count)]


def post_spacing(depth: float, overhang: float, count: int | None) -> float:
    run = depth - 2 * overhang
    if count and count > 1:
        return run / (count - 1)
    return run
