"""Dimension primitives and the drawing-local frame.

Drawings use screen orientation: +x along the part, +y down. Labels are
pre-formatted (centimetres, degrees) with one decimal.
"""

from __future__ import annotations
import math

from timberplan.models import (
    AngularDimension, DrawingInfo, LinearDimension, Marker, Point2D,
    RafterLayout, ReferenceLine, StudLayout, Vector2D,
)


def cm(value: float) -> str:
    """Meters as a centimetre label, e.g. ``12.5cm``."""
    return f"{value * 100:.1f}cm"


def deg(value: float) -> str:
    return f"{value:.1f}°"


class DrawingFrame:
    """Rigid transform into a part's drawing frame.

    ``pivot`` becomes the origin and the direction ``pivot -> toward``
    becomes +x. The y axis is flipped so the part hangs below its top edge.
    """

    def __init__(self, pivot: Point2D, toward: Point2D):
        self.pivot = pivot
        self.edge_angle = math.atan2(toward.y - pivot.y, toward.x - pivot.x)
        self.rotation = -self.edge_angle
        self._cos = math.cos(self.rotation)
        self._sin = math.sin(self.rotation)

    def apply(self, p: Point2D) -> Point2D:
        dx, dy = p.x - self.pivot.x, p.y - self.pivot.y
        x = dx * self._cos - dy * self._sin
        y = dx * self._sin + dy * self._cos
        return Point2D(x=x, y=-y)

    def apply_all(self, points: list[Point2D]) -> list[Point2D]:
        return [self.apply(p) for p in points]


def linear(
    p1: Point2D,
    p2: Point2D,
    offset: float,
    label: str,
    orientation: str = "horizontal",
) -> LinearDimension:
    return LinearDimension(type=f"linear_{orientation}", p1=p1, p2=p2, offset=offset, label=label)


def aligned(p1: Point2D, p2: Point2D, offset: float, label: str | None = None) -> LinearDimension:
    """Dimension along the segment; label defaults to its length."""
    if label is None:
        label = cm(p1.distance_to(p2))
    return LinearDimension(type="linear_aligned", p1=p1, p2=p2, offset=offset, label=label)


def _signed_sweep(a: float, b: float) -> float:
    """Smaller signed angle from direction ``a`` to ``b`` (degrees)."""
    sweep = math.degrees(b - a)
    while sweep <= -180.0:
        sweep += 360.0
    while sweep > 180.0:
        sweep -= 360.0
    return sweep


def angular(
    center: Point2D,
    v1: Vector2D,
    v2: Vector2D,
    radius: float,
    label: str,
    line_length: float = 0.6,
) -> tuple[AngularDimension, list[ReferenceLine]]:
    """Angle call-out between two rays from ``center``.

    Returns the dimension plus the two dashed reference lines drawn along
    the rays. Zero-length directions collapse onto the centre.
    """
    d1, d2 = v1.normalized(), v2.normalized()
    end1 = center.offset(d1, line_length)
    end2 = center.offset(d2, line_length)
    start = d1.angle()
    dim = AngularDimension(
        center=center,
        p1=end1,
        p2=end2,
        radius=radius,
        label=label,
        start_angle=math.degrees(start),
        sweep=_signed_sweep(start, d2.angle()),
    )
    refs = [
        ReferenceLine(p1=center, p2=end1, style="dashed"),
        ReferenceLine(p1=center, p2=end2, style="dashed"),
    ]
    return dim, refs


def rectangle(length: float, height: float) -> list[Point2D]:
    return [
        Point2D(x=0.0, y=0.0),
        Point2D(x=length, y=0.0),
        Point2D(x=length, y=height),
        Point2D(x=0.0, y=height),
    ]


def box_drawing(
    length: float,
    height: float,
    depth: float,
    dimensions: list[LinearDimension] | None = None,
    markers: list[Marker] | None = None,
) -> DrawingInfo:
    """Rectangular part with overall length and height dimensions."""
    dims = [
        linear(Point2D(x=0.0, y=height), Point2D(x=length, y=height), 40, cm(length)),
        linear(Point2D(x=0.0, y=0.0), Point2D(x=0.0, y=height), -40, cm(height), "vertical"),
    ]
    return DrawingInfo(
        points=rectangle(length, height),
        depth=depth,
        dimensions=dims + list(dimensions or []),
        markers=list(markers or []),
    )


def stud_markings(
    layout: StudLayout,
    beam_height: float,
    x_offset: float = 0.0,
) -> tuple[list[Marker], list[LinearDimension]]:
    """Stud scribe marks and bay dimensions for a sill or wall plate."""
    markers = [
        Marker(position=x_offset + pos, orientation="vertical", text="Ständer")
        for pos in layout.positions
    ]
    dims = []
    for i, spacing in enumerate(layout.spacings):
        dims.append(linear(
            Point2D(x=x_offset + layout.positions[i], y=beam_height),
            Point2D(x=x_offset + layout.positions[i + 1], y=beam_height),
            70,
            cm(spacing),
        ))
    return markers, dims


def rafter_markings(layout: RafterLayout, depth: float) -> tuple[list[Marker], list[LinearDimension]]:
    """Rafter centre marks for purlins; dimensions the first rafter and the spacing."""
    centres = [pos + depth / 2 for pos in layout.positions]
    markers = [Marker(position=c, orientation="vertical", text="Mitte Sparren") for c in centres]
    dims = []
    if centres:
        first = centres[0]
        dims.append(linear(Point2D(x=0.0, y=0.0), Point2D(x=first, y=0.0), 50, cm(first)))
        if len(centres) > 1:
            dims.append(linear(
                Point2D(x=first, y=0.0),
                Point2D(x=first + layout.spacing, y=0.0),
                70,
                f"Abstand: {cm(layout.spacing)}",
            ))
    return markers, dims
