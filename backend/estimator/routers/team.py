"""Team member API routes."""
from fastapi import APIRouter

from estimator.engine.calculator import CalculationEngine
from estimator.schemas.team import (
    CompensationConversionRequest,
    EmployeeAssignmentRequest,
    TeamMember,
    TeamMemberInput,
)

router = APIRouter(prefix="/team", tags=["team"])


@router.post("/normalize", response_model=TeamMember)
async def normalize_member(data: TeamMemberInput):
    engine = CalculationEngine()
    return engine.with_normalized_cost(data)


@router.post("/convert-compensation", response_model=TeamMember)
async def convert_compensation(data: CompensationConversionRequest):
    """Switch hourly/monthly rate; the full-time monthly cost is unchanged."""
    engine = CalculationEngine()
    converted = engine.convert_compensation_type(data.member, data.new_type)
    return engine.with_normalized_cost(converted)


@router.post("/from-employee", response_model=TeamMember)
async def member_from_employee(data: EmployeeAssignmentRequest):
    """Copy role and rate from a directory entry into a new roster member."""
    engine = CalculationEngine()
    member = engine.member_from_employee(data.employee, data.allocation_percentage)
    return engine.with_normalized_cost(member)
