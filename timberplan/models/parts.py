"""Bill-of-parts output models."""

from __future__ import annotations
import math
from pydantic import BaseModel, Field

from .drawing import DrawingInfo


class StaticsResult(BaseModel):
    """Deflection check of one load-bearing part."""
    span: float                     # Meters
    load: float                     # Distributed load q (N/m)
    point_load: float | None = None # Concentrated load P (N)
    max_deflection: float           # Meters
    allowed_deflection: float       # Meters
    passed: bool
    inertia: float                  # Second moment of area (m^4)
    e_modulus: float                # N/m^2
    formula: str
    formula_description: str

    @property
    def utilization(self) -> float:
        if self.allowed_deflection <= 0 or math.isinf(self.allowed_deflection):
            return 0.0
        return self.max_deflection / self.allowed_deflection


class CuttingBin(BaseModel):
    """One stock-cutting pattern, repeated ``count`` times."""
    cuts: list[float]
    count: int = 1


class CuttingPlan(BaseModel):
    stock_length: float
    kerf: float
    bins: list[CuttingBin] = []
    rejected: list[float] = []      # Cuts longer than the stock

    @property
    def stock_count(self) -> int:
        return sum(b.count for b in self.bins)


class Part(BaseModel):
    """A distinct part of the bill of materials.

    Parts sharing a ``key`` are geometrically identical and merge by
    quantity. ``width``/``height``/``length`` are the nominal stock
    dimensions the description is written from.
    """
    key: str
    quantity: int = Field(default=1, ge=1)
    description: str
    width: float | None = None
    height: float | None = None
    length: float | None = None
    drawing: DrawingInfo | None = None
    statics: StaticsResult | None = None
    cutting_plan: CuttingPlan | None = None

    @property
    def nominal_volume(self) -> float:
        """Volume of all pieces in m^3, zero when dimensions are unknown."""
        if self.cutting_plan is not None and self.width and self.height:
            return self.width * self.height * self.cutting_plan.stock_length * self.cutting_plan.stock_count
        if self.width and self.height and self.length:
            return self.width * self.height * self.length * self.quantity
        return 0.0


class PartRegistry(BaseModel):
    """Parts of one generation pass keyed by identity.

    Inserting a part whose key already exists adds its quantity to the
    stored part; the first description and drawing win.
    """
    parts: dict[str, Part] = {}

    def insert(self, part: Part) -> None:
        existing = self.parts.get(part.key)
        if existing is None:
            self.parts[part.key] = part.model_copy()
        else:
            existing.quantity += part.quantity

    def add(
        self,
        key: str,
        description: str,
        quantity: int = 1,
        **fields: object,
    ) -> None:
        """Build and insert a part; non-positive quantities are ignored."""
        if quantity <= 0:
            return
        self.insert(Part(key=key, description=description, quantity=quantity, **fields))

    def get(self, key: str) -> Part | None:
        return self.parts.get(key)

    def find(self, prefix: str) -> Part | None:
        """First part whose key starts with ``prefix``."""
        for key, part in self.parts.items():
            if key.startswith(prefix):
                return part
        return None

    def to_list(self) -> list[Part]:
        return list(self.parts.values())

    def __contains__(self, key: object) -> bool:
        return key in self.parts

    def __len__(self) -> int:
        return len(self.parts)


class SummaryInfo(BaseModel):
    """Aggregate totals of a plan."""
    timber_volume: float = 0.0  # m^3
    timber_weight: float = 0.0  # N
    snow_load: float = 0.0      # N, projected roof area
    total_load: float = 0.0     # N
