"""API request/response schemas."""

from __future__ import annotations
from pydantic import BaseModel

from timberplan.models import FrameParameters, Part, SummaryInfo


class PlanRequest(BaseModel):
    """Request body for the /plan endpoint.

    Numbers may arrive as form strings; absent or unparseable values fall
    back to defaults when the parameters are built.
    """
    width: float | str | None = None
    depth: float | str | None = None
    height: float | str | None = None
    roof_type: str | None = None
    roof_pitch: float | str | None = None
    roof_overhang: float | str | None = None
    altitude: float | str | None = None
    building_type: str | None = None


class PlanResponse(BaseModel):
    """Response from the /plan endpoint."""
    parameters: FrameParameters
    parts: list[Part]
    summary: SummaryInfo
    iterations: int
    rule_count: int


class RuleInfo(BaseModel):
    id: str
    name: str
