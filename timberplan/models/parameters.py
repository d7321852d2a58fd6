"""Frame parameters — the immutable input of one generation pass."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, ConfigDict, model_validator


# Fixed garden-house wall constants
STUD_THICKNESS = 0.055      # Stud narrow face (55mm)
STUD_SPACING = 0.625        # Stud centre-to-centre target
SILL_HEIGHT = 0.08          # Sill (Schwelle) height
MIN_TOP_PLATE_WIDTH = 0.10
MIN_TOP_PLATE_HEIGHT = 0.12


class RoofType(str, Enum):
    GABLE = "gable"
    SHED = "shed"
    FLAT = "flat"

    @classmethod
    def _missing_(cls, value: object) -> RoofType | None:
        aliases = {
            "satteldach": cls.GABLE,
            "pultdach": cls.SHED,
            "flachdach": cls.FLAT,
        }
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if member.value == key:
                    return member
            return aliases.get(key)
        return None


class BuildingType(str, Enum):
    CARPORT = "carport"
    GARDEN_HOUSE = "garden_house"

    @classmethod
    def _missing_(cls, value: object) -> BuildingType | None:
        aliases = {
            "gartenhaus": cls.GARDEN_HOUSE,
            "sauna": cls.GARDEN_HOUSE,
            "schopf": cls.GARDEN_HOUSE,
            "garden house": cls.GARDEN_HOUSE,
        }
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if member.value == key:
                    return member
            return aliases.get(key)
        return None


class Section(BaseModel):
    """Rectangular cross-section in meters."""
    model_config = ConfigDict(frozen=True)

    width: float
    height: float


class CrossSections(BaseModel):
    """Member cross-sections plus the structural configuration flags."""
    model_config = ConfigDict(frozen=True)

    post: float = 0.12
    beam_width: float = 0.12
    beam_height: float = 0.12
    tie_beam_height: float = 0.14
    rafter_width: float = 0.08
    rafter_height: float = 0.16
    brace: float = 0.10
    batten_width: float = 0.06
    batten_height: float = 0.08
    stud_depth: float = 0.12
    stud_thickness: float = STUD_THICKNESS
    middle_purlin_width: float = 0.12
    middle_purlin_height: float = 0.16
    use_middle_purlin: bool = False
    use_king_posts: bool = True
    posts_per_side: int | None = None

    @property
    def middle_purlin(self) -> Section | None:
        if not self.use_middle_purlin:
            return None
        if self.middle_purlin_width <= 0 or self.middle_purlin_height <= 0:
            return None
        return Section(width=self.middle_purlin_width, height=self.middle_purlin_height)

    @property
    def top_plate_width(self) -> float:
        """Garden-house wall plate width (beam width, at least 10cm)."""
        return self.beam_width if self.beam_width > 0.08 else MIN_TOP_PLATE_WIDTH

    @property
    def top_plate_height(self) -> float:
        """Garden-house wall plate height (beam height, at least 12cm)."""
        return self.beam_height if self.beam_height > 0.1 else MIN_TOP_PLATE_HEIGHT

    @property
    def post_count(self) -> int:
        return max(2, self.posts_per_side or 2)


class FrameParameters(BaseModel):
    """Building dimensions and cross-sections for one generation pass.

    Frozen: the dimension search derives a fresh copy per iteration via
    ``with_sections`` instead of mutating.
    """
    model_config = ConfigDict(frozen=True)

    width: float = 5.0          # Outer width W (meters)
    depth: float = 6.0          # Outer depth D (meters)
    wall_height: float = 3.0    # Height to plate top H (meters)
    roof_type: RoofType = RoofType.GABLE
    roof_pitch: float = 15.0    # Degrees
    roof_overhang: float = 0.5  # Meters
    altitude: float = 600.0     # Meters above sea level
    building_type: BuildingType = BuildingType.CARPORT
    sections: CrossSections = CrossSections()

    @model_validator(mode="after")
    def _check_combination(self) -> FrameParameters:
        if self.building_type == BuildingType.GARDEN_HOUSE and self.roof_type != RoofType.GABLE:
            raise ValueError("garden house frames support gable roofs only")
        if not 0 <= self.roof_pitch < 90:
            raise ValueError(f"roof pitch must be within [0, 90) degrees, got {self.roof_pitch}")
        return self

    @property
    def is_gable(self) -> bool:
        return self.roof_type == RoofType.GABLE

    @property
    def is_carport(self) -> bool:
        return self.building_type == BuildingType.CARPORT

    def with_sections(self, sections: CrossSections | None = None, **changes: object) -> FrameParameters:
        """Copy with replaced (or partially updated) cross-sections."""
        base = sections or self.sections
        if changes:
            base = base.model_copy(update=changes)
        return self.model_copy(update={"sections": base})
