"""Diagonal brace solving.

Two brace kinds exist: wall braces (Streben) that fit snugly into a stud
bay, cut as a parallelogram, and 45-degree head braces (Kopfbänder) between
posts and beams.
"""

from __future__ import annotations
import logging
import math
from pydantic import BaseModel

from timberplan.models import Point2D

logger = logging.getLogger(__name__)

MIN_BAY = 1e-4          # Bays below 0.1mm cannot be solved
MIN_BRACE_LEG = 0.1


class BraceSolution(BaseModel):
    """A wall brace fitted into a rectangular bay.

    ``angle`` is measured from horizontal, ``cut_angle`` is the saw angle
    from vertical (both radians). ``outer_length`` is the long edge of the
    parallelogram, ``tip_length`` the point-to-point length of the stock.
    """
    bay_height: float
    bay_width: float
    thickness: float
    angle: float = 0.0
    cut_angle: float = 0.0
    outer_length: float = 0.0
    tip_length: float = 0.0
    points: list[Point2D] = []
    degenerate: bool = False

    @property
    def angle_deg(self) -> float:
        return math.degrees(self.angle)

    @property
    def cut_angle_deg(self) -> float:
        return math.degrees(self.cut_angle)


class MiteredBrace(BaseModel):
    """45-degree head brace; ``leg`` is the run along post and beam."""
    leg: float
    size: float
    outer_length: float
    points: list[Point2D]


def _degenerate(height: float, width: float, thickness: float, reason: str) -> BraceSolution:
    logger.debug(
        "Brace bay %.3fx%.3fm (thickness %.3fm) not solvable: %s",
        height, width, thickness, reason,
    )
    return BraceSolution(bay_height=height, bay_width=width, thickness=thickness, degenerate=True)


def solve_brace(bay_height: float, bay_width: float, thickness: float) -> BraceSolution:
    """Fit a brace of ``thickness`` diagonally into a bay of ``bay_height`` x ``bay_width``.

    The brace is mitered against the framing at both ends, so both end cuts
    share the angle ``90deg - alpha`` from vertical with

        alpha = asin((B*D + sqrt(B^2 D^2 + C*E)) / C),  C = H^2 + B^2,  E = H^2 - D^2

    Unsolvable bays (too small, brace at least as thick as the bay is high,
    negative discriminant) return a zero-length degenerate solution.
    """
    H, B, D = bay_height, bay_width, thickness

    if H < MIN_BAY or B < MIN_BAY:
        return _degenerate(H, B, D, "bay too small")
    if D < 0 or D >= H:
        return _degenerate(H, B, D, "brace thickness not below bay height")

    C = H * H + B * B
    E = H * H - D * D
    discriminant = B * B * D * D + C * E
    if discriminant < 0 or C < 1e-9:
        return _degenerate(H, B, D, "no real fitting angle")

    ratio = (B * D + math.sqrt(discriminant)) / C
    angle = math.asin(max(-1.0, min(1.0, ratio)))
    cut_angle = math.pi / 2 - angle

    cos_cut = math.cos(cut_angle)
    if abs(cos_cut) < 1e-9:
        return _degenerate(H, B, D, "cut angle undefined")
    tan_cut = math.tan(cut_angle)

    edge = H / cos_cut
    shift = D * tan_cut
    points = [
        Point2D(x=0.0, y=0.0),
        Point2D(x=edge, y=0.0),
        Point2D(x=edge + shift, y=D),
        Point2D(x=shift, y=D),
    ]
    return BraceSolution(
        bay_height=H,
        bay_width=B,
        thickness=D,
        angle=angle,
        cut_angle=cut_angle,
        outer_length=edge,
        tip_length=math.hypot(edge + shift, D),
        points=points,
    )


def mitered_brace(leg: float, size: float) -> MiteredBrace:
    """45-degree head brace with both ends mitered; short legs clamp to 10cm."""
    if leg <= 0.01:
        leg = MIN_BRACE_LEG
    outer = math.sqrt(2) * leg
    points = [
        Point2D(x=size, y=0.0),
        Point2D(x=outer - size, y=0.0),
        Point2D(x=outer, y=size),
        Point2D(x=0.0, y=size),
    ]
    return MiteredBrace(leg=leg, size=size, outer_length=outer, points=points)


def head_brace_leg(available: float, *limits: float) -> float:
    """Head-brace leg: at most 70cm, at least 10cm, within each available run."""
    leg = min(0.7, max(MIN_BRACE_LEG, available))
    for limit in limits:
        leg = min(leg, max(MIN_BRACE_LEG, limit))
    return leg
