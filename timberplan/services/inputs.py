"""Raw request values to frame parameters."""

from __future__ import annotations
import logging
import math
from collections.abc import Mapping

from timberplan.models import BuildingType, FrameParameters, RoofType

logger = logging.getLogger(__name__)

DEFAULTS = {
    "width": 5.0,
    "depth": 6.0,
    "height": 3.0,
    "roof_overhang": 0.5,
    "roof_pitch": 15.0,
    "altitude": 600.0,
}


def parse_number(value: object, default: float) -> float:
    """Lenient float parsing for form input.

    Numbers and numeric strings (``"2,5"`` allowed) are accepted; absent,
    empty, boolean or non-numeric values fall back to ``default``.
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip().replace(",", ".")
        try:
            number = float(text)
        except ValueError:
            logger.debug("Not a number: %r, using %s", value, default)
            return default
    else:
        return default
    if math.isnan(number) or math.isinf(number):
        return default
    return number


def build_parameters(raw: Mapping[str, object]) -> FrameParameters:
    """Seed parameters from a raw request; sections keep their defaults.

    Invalid roof/building combinations raise ``pydantic.ValidationError``.
    """
    def number(key: str) -> float:
        return parse_number(raw.get(key), DEFAULTS[key])

    return FrameParameters(
        width=number("width"),
        depth=number("depth"),
        wall_height=number("height"),
        roof_type=raw.get("roof_type") or RoofType.GABLE,
        roof_pitch=number("roof_pitch"),
        roof_overhang=number("roof_overhang"),
        altitude=number("altitude"),
        building_type=raw.get("building_type") or BuildingType.CARPORT,
    )
