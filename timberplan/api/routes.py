"""FastAPI route definitions."""

from __future__ import annotations

from fastapi import APIRouter

from timberplan.services.plan_service import PlanService
from timberplan.api.schemas import PlanRequest, PlanResponse, RuleInfo

router = APIRouter()

# Shared service instance
_service = PlanService()


@router.post("/plan", response_model=PlanResponse)
async def generate_plan(request: PlanRequest) -> PlanResponse:
    """Generate a dimensioned construction plan."""
    plan = _service.generate(request.model_dump(exclude_none=True))

    return PlanResponse(
        parameters=plan.parameters,
        parts=plan.parts,
        summary=plan.summary,
        iterations=plan.iterations,
        rule_count=len(_service.list_rules()),
    )


@router.get("/rules", response_model=list[RuleInfo])
async def list_rules() -> list[RuleInfo]:
    """List all registered plan rules."""
    return [RuleInfo(**r) for r in _service.list_rules()]


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
