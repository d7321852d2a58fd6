"""Geometric primitives used throughout the planner."""

from __future__ import annotations
import math
from pydantic import BaseModel


class Point2D(BaseModel):
    """Point in a part's profile plane (x along the part, y across it)."""
    x: float
    y: float

    def distance_to(self, other: Point2D) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def offset(self, direction: Vector2D, distance: float) -> Point2D:
        return Point2D(
            x=self.x + direction.x * distance,
            y=self.y + direction.y * distance,
        )


class Vector2D(BaseModel):
    """2D direction vector."""
    x: float
    y: float

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def normalized(self) -> Vector2D:
        ln = self.length()
        if ln < 1e-10:
            return Vector2D(x=0.0, y=0.0)
        return Vector2D(x=self.x / ln, y=self.y / ln)

    def angle(self) -> float:
        """Direction angle in radians, counterclockwise from +x."""
        return math.atan2(self.y, self.x)


class BoundingBox(BaseModel):
    """Axis-aligned bounds of a point set."""
    min_x: float = 0.0
    max_x: float = 0.0
    min_y: float = 0.0
    max_y: float = 0.0

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @classmethod
    def from_points(cls, points: list[Point2D]) -> BoundingBox:
        if not points:
            return cls()
        return cls(
            min_x=min(p.x for p in points),
            max_x=max(p.x for p in points),
            min_y=min(p.y for p in points),
            max_y=max(p.y for p in points),
        )


def dedupe_points(points: list[Point2D], eps: float = 1e-6) -> list[Point2D]:
    """Drop points that repeat their predecessor within ``eps``."""
    result: list[Point2D] = []
    for p in points:
        if result and p.distance_to(result[-1]) <= eps:
            continue
        result.append(p)
    return result
