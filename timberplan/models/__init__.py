from .geometry import Point2D, Vector2D, BoundingBox, dedupe_points
from .parameters import (
    RoofType, BuildingType, Section, CrossSections, FrameParameters,
    STUD_THICKNESS, STUD_SPACING, SILL_HEIGHT,
)
from .drawing import (
    Dimension, LinearDimension, AngularDimension, Marker, ReferenceLine, DrawingInfo,
)
from .parts import (
    Part, PartRegistry, StaticsResult, CuttingPlan, CuttingBin, SummaryInfo,
)
from .layout import StudLayout, RafterLayout
from .advisory import StructuralSuggestion
from .context import PlanContext

__all__ = [
    "Point2D", "Vector2D", "BoundingBox", "dedupe_points",
    "RoofType", "BuildingType", "Section", "CrossSections", "FrameParameters",
    "STUD_THICKNESS", "STUD_SPACING", "SILL_HEIGHT",
    "Dimension", "LinearDimension", "AngularDimension", "Marker", "ReferenceLine", "DrawingInfo",
    "Part", "PartRegistry", "StaticsResult", "CuttingPlan", "CuttingBin", "SummaryInfo",
    "StudLayout", "RafterLayout",
    "StructuralSuggestion",
    "PlanContext",
]
