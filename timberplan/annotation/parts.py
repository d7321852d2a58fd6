"""Cut drawings for rafters, braces and posts."""

from __future__ import annotations
import math

from timberplan.geometry.braces import BraceSolution, MiteredBrace
from timberplan.geometry.rafters import RafterProfile
from timberplan.models import DrawingInfo, Marker, Point2D, ReferenceLine, Vector2D

from .dimensions import DrawingFrame, aligned, angular, cm, deg, linear, rectangle

CUT_LINE_LENGTH = 0.6
BRACE_LINE_LENGTH = 0.35


def annotate_rafter(profile: RafterProfile, rafter_width: float, rafter_height: float) -> DrawingInfo:
    """Rafter drawing laid along its top edge with every cut called out.

    Plumb cuts (ridge notch, tail, heel) are labelled ``90 - pitch``, the
    seat cut ``pitch`` and the heel corner 90 degrees.
    """
    frame = DrawingFrame(profile.key("ridge_top"), profile.key("tail_top"))
    rot = frame.rotation
    plumb = 90.0 - profile.pitch
    up = Vector2D(x=0.0, y=-1.0)
    plumb_up = Vector2D(x=math.sin(rot), y=-math.cos(rot))
    seat_up = Vector2D(x=math.cos(rot), y=math.sin(rot))

    dimensions = []
    references: list[ReferenceLine] = []

    def cut_angle(corner: str, label: str, v1: Vector2D, v2: Vector2D, radius: float = 45) -> None:
        dim, refs = angular(frame.apply(profile.key(corner)), v1, v2, radius, label, CUT_LINE_LENGTH)
        dimensions.append(dim)
        references.extend(refs)

    cut_angle("ridge_notch_outer_top", deg(plumb), up, plumb_up, radius=70)
    cut_angle("tail_top", deg(plumb), Vector2D(x=0.0, y=1.0), Vector2D(x=-plumb_up.x, y=-plumb_up.y), radius=70)
    cut_angle("heel_top", deg(plumb), up, plumb_up)
    cut_angle("seat_inner", deg(profile.pitch), Vector2D(x=1.0, y=0.0), seat_up)
    cut_angle("heel_top", deg(90.0), plumb_up, seat_up)

    def notch(a: str, b: str, offset: float, label: str | None = None) -> None:
        dimensions.append(aligned(frame.apply(profile.key(a)), frame.apply(profile.key(b)), offset, label))

    inner = profile.key("ridge_notch_inner")
    outer_top = profile.key("ridge_notch_outer_top")
    outer_bottom = profile.key("ridge_notch_outer_bottom")
    notch("ridge_notch_inner", "ridge_notch_outer_top", 40, cm(abs(outer_top.x - inner.x)))
    notch("ridge_notch_outer_top", "ridge_notch_outer_bottom", 40, cm(abs(outer_top.y - outer_bottom.y)))
    notch("seat_inner", "heel_top", 40)
    notch("heel_top", "heel_bottom", -40)

    if "purlin_seat_start" in profile.key_points:
        notch("purlin_seat_start", "purlin_seat_end", 40)
        notch("purlin_seat_end", "purlin_plumb_end_bottom", -40)

    dimensions.append(linear(
        frame.apply(profile.key("ridge_top")),
        frame.apply(profile.key("tail_bottom")),
        -110,
        f"Länge: {cm(profile.total_length)}",
    ))

    drawing = DrawingInfo(
        points=frame.apply_all(profile.points),
        depth=rafter_width,
        dimensions=dimensions,
        reference_lines=references,
    )
    box = drawing.bbox
    drawing.dimensions.append(linear(
        Point2D(x=box.min_x, y=box.min_y),
        Point2D(x=box.min_x, y=box.max_y),
        -55,
        cm(rafter_height),
        "vertical",
    ))
    return drawing


def annotate_brace(solution: BraceSolution, depth: float) -> DrawingInfo:
    """Parallelogram wall brace with both saw angles measured from vertical."""
    if solution.degenerate:
        return DrawingInfo(points=[], depth=depth)

    p1, p2, p3, p4 = solution.points
    width = solution.thickness
    label = deg(90.0 - solution.angle_deg)
    up = Vector2D(x=0.0, y=-1.0)

    dimensions = [
        linear(Point2D(x=0.0, y=width), p3, 45, f"Länge: {cm(solution.tip_length)}"),
        linear(p1, p4, -40, cm(width), "vertical"),
    ]
    references: list[ReferenceLine] = []
    for corner, toward in ((p4, p1), (p3, p2)):
        dim, refs = angular(
            corner, up, Vector2D(x=toward.x - corner.x, y=toward.y - corner.y),
            40, label, BRACE_LINE_LENGTH,
        )
        dimensions.append(dim)
        references.extend(refs)

    return DrawingInfo(
        points=solution.points,
        depth=depth,
        dimensions=dimensions,
        reference_lines=references,
    )


def annotate_mitered_brace(brace: MiteredBrace) -> DrawingInfo:
    size, outer = brace.size, brace.outer_length
    left = Point2D(x=0.0, y=size)
    right = Point2D(x=outer, y=size)

    dimensions = [
        linear(left, right, 45, f"Länge: {cm(outer)}"),
        linear(right, Point2D(x=outer, y=0.0), 45, cm(size), "vertical"),
    ]
    references = [
        ReferenceLine(p1=left, p2=Point2D(x=0.0, y=0.0), style="dashed"),
        ReferenceLine(p1=left, p2=Point2D(x=size, y=0.0), style="dashed"),
        ReferenceLine(p1=right, p2=Point2D(x=outer, y=0.0), style="dashed"),
        ReferenceLine(p1=right, p2=Point2D(x=outer - size, y=0.0), style="dashed"),
    ]
    for corner, dx in ((left, 1.0), (right, -1.0)):
        dim, _ = angular(corner, Vector2D(x=0.0, y=-1.0), Vector2D(x=dx, y=-1.0), 25, deg(45.0), 1.0)
        dimensions.append(dim)

    return DrawingInfo(
        points=brace.points,
        depth=size,
        dimensions=dimensions,
        reference_lines=references,
    )


def post_drawing(height: float, size: float, brace_leg: float) -> DrawingInfo:
    """Post laid horizontally, scribed where the head brace meets it."""
    mark = height - brace_leg
    return DrawingInfo(
        points=rectangle(height, size),
        depth=size,
        dimensions=[
            linear(Point2D(x=0.0, y=size), Point2D(x=height, y=size), 80, cm(height)),
            linear(Point2D(x=mark, y=size), Point2D(x=height, y=size), 50, cm(brace_leg)),
            linear(Point2D(x=0.0, y=0.0), Point2D(x=0.0, y=size), -40, cm(size), "vertical"),
        ],
        markers=[Marker(position=mark, orientation="vertical", text="Anriss Kopfb.")],
    )
