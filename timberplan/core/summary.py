"""Plan totals, re-derived from the printed part descriptions."""

from __future__ import annotations
import re

from timberplan.config import Settings, get_settings
from timberplan.core.statics import snow_load
from timberplan.models import FrameParameters, Part, SummaryInfo

SECTION_RE = re.compile(r"(\d+\.\d+)x(\d+\.\d+)cm, Länge: (\d+\.\d+)cm")
BATTEN_RE = re.compile(r"(\d+)x(\d+)mm")


def part_volume(part: Part) -> float:
    """Timber volume of all pieces of ``part`` as printed on the parts list.

    Battens read ``WxHmm`` and count whole stock bars; every other part reads
    ``WxHcm, Länge: Lcm``. Unparseable descriptions fall back to the part's
    own dimensions.
    """
    if part.cutting_plan is not None:
        match = BATTEN_RE.search(part.description)
        if not match:
            return part.nominal_volume
        w, h = int(match.group(1)) / 1000, int(match.group(2)) / 1000
        return w * h * part.cutting_plan.stock_length * part.cutting_plan.stock_count

    match = SECTION_RE.search(" ".join(part.description.split()))
    if not match:
        return part.nominal_volume
    w, h, length = (float(g) / 100 for g in match.groups())
    return w * h * length * part.quantity


def summarize(parts: list[Part], params: FrameParameters, settings: Settings | None = None) -> SummaryInfo:
    settings = settings or get_settings()
    volume = sum(part_volume(p) for p in parts)
    weight = volume * settings.wood_mass_density * settings.gravity
    snow = snow_load(params.altitude) * params.width * params.depth
    return SummaryInfo(
        timber_volume=volume,
        timber_weight=weight,
        snow_load=snow,
        total_load=weight + snow,
    )
