"""2D cut-drawing models — profiles and their dimension overlays."""

from __future__ import annotations
from typing import Annotated, Literal, Union
from pydantic import BaseModel, Field, computed_field

from .geometry import BoundingBox, Point2D


class LinearDimension(BaseModel):
    """Distance between two points, drawn at ``offset`` from them.

    Positive offsets go above/right, negative below/left. ``linear_aligned``
    measures along the segment and offsets perpendicular to it.
    """
    type: Literal["linear_horizontal", "linear_vertical", "linear_aligned"]
    p1: Point2D
    p2: Point2D
    offset: float
    label: str = ""


class AngularDimension(BaseModel):
    """Arc between two rays from ``center`` (degrees for angles)."""
    type: Literal["angular"] = "angular"
    center: Point2D
    p1: Point2D
    p2: Point2D
    radius: float
    label: str
    start_angle: float = 0.0   # Direction of the first ray
    sweep: float = 0.0         # Smaller signed angle from ray 1 to ray 2


Dimension = Annotated[Union[LinearDimension, AngularDimension], Field(discriminator="type")]


class Marker(BaseModel):
    """Scribe mark along a part's length (e.g. stud or rafter centreline)."""
    position: float
    orientation: Literal["vertical", "horizontal"] = "vertical"
    text: str = ""


class ReferenceLine(BaseModel):
    p1: Point2D
    p2: Point2D
    style: Literal["solid", "dashed"] = "solid"


class DrawingInfo(BaseModel):
    """Closed cut profile of a part plus its annotations.

    ``depth`` is the extrusion perpendicular to the profile plane. All
    overlays share the coordinate frame of ``points``.
    """
    points: list[Point2D]
    depth: float
    dimensions: list[Dimension] = []
    markers: list[Marker] = []
    reference_lines: list[ReferenceLine] = []

    @computed_field  # type: ignore[prop-decorator]
    @property
    def bbox(self) -> BoundingBox:
        return BoundingBox.from_points(self.points)
