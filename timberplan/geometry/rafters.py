"""Rafter cut profiles with birdsmouth seat and purlin notches.

Profiles are computed in building section coordinates: x across the
building width, y up. Every purlin the rafter rests on gets the same notch:
a plumb cut up from the underside and a level seat on the purlin top.
"""

from __future__ import annotations
import math
from pydantic import BaseModel

from timberplan.models import Point2D, dedupe_points

MIN_KING_POST = 0.1     # Shorter gaps get no king post


class PurlinSeat(BaseModel):
    """A purlin under the rafter: centre x, section and top elevation."""
    center_x: float
    width: float
    height: float
    seat_y: float

    @property
    def uphill_x(self) -> float:
        return self.center_x - self.width / 2

    @property
    def downhill_x(self) -> float:
        return self.center_x + self.width / 2


class RafterProfile(BaseModel):
    """Closed rafter outline plus the named corners used for annotation."""
    points: list[Point2D]
    key_points: dict[str, Point2D]
    pitch: float            # Degrees
    total_length: float

    def key(self, name: str) -> Point2D:
        return self.key_points[name]


def _purlin_notch(seat: PurlinSeat, underside) -> dict[str, Point2D]:
    start_x, end_x = seat.uphill_x, seat.downhill_x
    return {
        "purlin_plumb_start_bottom": Point2D(x=start_x, y=underside(start_x)),
        "purlin_seat_start": Point2D(x=start_x, y=seat.seat_y),
        "purlin_seat_end": Point2D(x=end_x, y=seat.seat_y),
        "purlin_plumb_end_bottom": Point2D(x=end_x, y=underside(end_x)),
    }


def _walk(keys: dict[str, Point2D], tail: list[str]) -> list[Point2D]:
    """Boundary walk from the ridge top down the top edge and back along the underside."""
    names = ["ridge_top", "tail_top", "tail_bottom", "heel_bottom", "heel_top", "seat_inner"]
    if "purlin_seat_start" in keys:
        names += [
            "purlin_plumb_end_bottom", "purlin_seat_end",
            "purlin_seat_start", "purlin_plumb_start_bottom",
        ]
    names += ["ridge_notch_outer_bottom", "ridge_notch_outer_top", "ridge_notch_inner"] + tail
    return dedupe_points([keys[n] for n in names])


def gable_rafter_profile(
    plate_inner_x: float,
    plate_outer_x: float,
    plate_top: float,
    ridge_beam_width: float,
    rafter_height: float,
    overhang: float,
    pitch: float,
    middle_purlin: PurlinSeat | None = None,
) -> RafterProfile:
    """Right-hand rafter of a gable roof, ridge centreline at x = 0.

    The underside runs through the plate's inner top edge at ``pitch``. The
    rafter is seated on the plate (birdsmouth) and notched a third of its
    height over the ridge beam, so its top edge stays continuous.
    """
    rad = math.radians(pitch)
    tan_a, cos_a = math.tan(rad), math.cos(rad)
    slope_height = rafter_height / cos_a
    ridge_half = ridge_beam_width / 2
    tail_x = plate_outer_x + overhang

    def underside(x: float) -> float:
        return -tan_a * (abs(x) - plate_inner_x) + plate_top

    def top(x: float) -> float:
        return underside(x) + slope_height

    ridge_seat_y = underside(ridge_half) + rafter_height / 3

    keys = {
        "ridge_top": Point2D(x=0.0, y=top(0.0)),
        "tail_top": Point2D(x=tail_x, y=top(tail_x)),
        "tail_bottom": Point2D(x=tail_x, y=underside(tail_x)),
        "heel_bottom": Point2D(x=plate_outer_x, y=underside(plate_outer_x)),
        "heel_top": Point2D(x=plate_outer_x, y=plate_top),
        "seat_inner": Point2D(x=plate_inner_x, y=plate_top),
        "ridge_notch_outer_bottom": Point2D(x=ridge_half, y=underside(ridge_half)),
        "ridge_notch_outer_top": Point2D(x=ridge_half, y=ridge_seat_y),
        "ridge_notch_inner": Point2D(x=0.0, y=ridge_seat_y),
    }
    if middle_purlin is not None:
        keys.update(_purlin_notch(middle_purlin, underside))

    return RafterProfile(
        points=_walk(keys, []),
        key_points=keys,
        pitch=pitch,
        total_length=keys["ridge_top"].distance_to(keys["tail_bottom"]),
    )


def gable_middle_purlin_seat(
    plate_inner_x: float,
    plate_top: float,
    ridge_beam_width: float,
    purlin_width: float,
    purlin_height: float,
    pitch: float,
) -> PurlinSeat:
    """Middle purlin halfway between ridge beam and wall plate, seated at its uphill corner."""
    tan_a = math.tan(math.radians(pitch))
    ridge_half = ridge_beam_width / 2
    center_x = ridge_half + (plate_inner_x - ridge_half) / 2
    uphill = center_x - purlin_width / 2
    seat_y = -tan_a * (uphill - plate_inner_x) + plate_top
    return PurlinSeat(center_x=center_x, width=purlin_width, height=purlin_height, seat_y=seat_y)


def gable_ridge_seat(
    plate_inner_x: float,
    plate_top: float,
    ridge_beam_width: float,
    rafter_height: float,
    pitch: float,
) -> float:
    """Top elevation of the ridge beam (the ridge notch seat)."""
    tan_a = math.tan(math.radians(pitch))
    return -tan_a * (ridge_beam_width / 2 - plate_inner_x) + plate_top + rafter_height / 3


def king_post_height(
    plate_inner_x: float,
    plate_top: float,
    ridge_beam_width: float,
    ridge_beam_height: float,
    rafter_height: float,
    pitch: float,
) -> float:
    """Clear height between the plate top and the ridge beam underside."""
    seat = gable_ridge_seat(plate_inner_x, plate_top, ridge_beam_width, rafter_height, pitch)
    return seat - ridge_beam_height - plate_top


class ShedLine(BaseModel):
    """Underside line of a shed rafter seated on the high purlin."""
    high_post_x: float
    low_post_x: float
    beam_width: float
    high_seat_y: float
    pitch: float

    @property
    def slope(self) -> float:
        return -math.tan(math.radians(self.pitch))

    def underside(self, x: float) -> float:
        high_outer = self.high_post_x - self.beam_width / 2
        return self.slope * (x - high_outer) + self.high_seat_y

    @property
    def low_seat_y(self) -> float:
        return self.underside(self.low_post_x - self.beam_width / 2)


def shed_rafter_profile(
    line: ShedLine,
    rafter_height: float,
    overhang: float,
    middle_purlin: PurlinSeat | None = None,
) -> RafterProfile:
    """Single-slope rafter from the high purlin (left) down to the low purlin (right).

    The low purlin gets the birdsmouth, the high purlin the same plumb/seat
    notch as a ridge beam, and both ends overhang by ``overhang``.
    """
    cos_a = math.cos(math.radians(line.pitch))
    slope_height = rafter_height / cos_a
    bw = line.beam_width
    high_outer, high_inner = line.high_post_x - bw / 2, line.high_post_x + bw / 2
    low_inner, low_outer = line.low_post_x - bw / 2, line.low_post_x + bw / 2
    head_x, tail_x = high_outer - overhang, low_outer + overhang
    low_seat_y = line.low_seat_y

    def top(x: float) -> float:
        return line.underside(x) + slope_height

    keys = {
        "ridge_top": Point2D(x=head_x, y=top(head_x)),
        "tail_top": Point2D(x=tail_x, y=top(tail_x)),
        "tail_bottom": Point2D(x=tail_x, y=line.underside(tail_x)),
        "heel_bottom": Point2D(x=low_outer, y=line.underside(low_outer)),
        "heel_top": Point2D(x=low_outer, y=low_seat_y),
        "seat_inner": Point2D(x=low_inner, y=low_seat_y),
        "ridge_notch_outer_bottom": Point2D(x=high_inner, y=line.underside(high_inner)),
        "ridge_notch_outer_top": Point2D(x=high_inner, y=line.high_seat_y),
        "ridge_notch_inner": Point2D(x=high_outer, y=line.high_seat_y),
        "head_bottom": Point2D(x=head_x, y=line.underside(head_x)),
    }
    if middle_purlin is not None:
        keys.update(_purlin_notch(middle_purlin, line.underside))

    return RafterProfile(
        points=_walk(keys, ["head_bottom"]),
        key_points=keys,
        pitch=line.pitch,
        total_length=keys["ridge_top"].distance_to(keys["tail_bottom"]),
    )


def shed_middle_purlin_seat(line: ShedLine, purlin_width: float, purlin_height: float) -> PurlinSeat:
    """Middle purlin at mid-width, seated at its uphill corner."""
    center_x = (line.high_post_x + line.low_post_x) / 2
    seat_y = line.underside(center_x - purlin_width / 2)
    return PurlinSeat(center_x=center_x, width=purlin_width, height=purlin_height, seat_y=seat_y)
