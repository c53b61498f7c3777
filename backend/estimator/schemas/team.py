"""Team member schemas."""
from decimal import Decimal

from pydantic import Field

from estimator.models.team import CompensationType
from estimator.schemas.base import Money, SchemaBase


class TeamMemberInput(SchemaBase):
    name: str | None = None
    role: str = Field(default="", max_length=100)
    compensation_type: CompensationType = CompensationType.HOURLY
    cost_value: Decimal = Field(default=Decimal(0), ge=0)
    allocation_percentage: Decimal = Field(default=Decimal(100), ge=0, le=100)


class TeamMember(TeamMemberInput):
    """Roster entry with its derived full-time-equivalent monthly cost."""

    normalized_monthly_cost: Money


class CompensationConversionRequest(SchemaBase):
    member: TeamMemberInput
    new_type: CompensationType


class EmployeeRecord(SchemaBase):
    """Company directory entry a roster member can be copied from."""

    name: str = Field(..., min_length=1, max_length=255)
    role: str = Field(default="", max_length=100)
    compensation_type: CompensationType
    rate: Decimal = Field(..., ge=0)


class EmployeeAssignmentRequest(SchemaBase):
    employee: EmployeeRecord
    allocation_percentage: Decimal = Field(default=Decimal(100), ge=0, le=100)
