"""Project schemas."""
from decimal import Decimal

from pydantic import AliasChoices, Field

from estimator.schemas.base import SchemaBase
from estimator.schemas.feature import FeatureInput
from estimator.schemas.team import TeamMemberInput


class FixedCostInput(SchemaBase):
    """Recurring vendor or infrastructure cost."""

    name: str | None = None
    monthly_cost: Decimal = Field(
        default=Decimal(0),
        ge=0,
        validation_alias=AliasChoices("monthlyCost", "monthly_cost", "cost"),
    )


class ProjectInput(SchemaBase):
    project_name: str | None = Field(default=None, max_length=255)
    duration_months: int = Field(..., ge=1)
    team_members: list[TeamMemberInput] = []
    features: list[FeatureInput] = []
    fixed_costs: list[FixedCostInput] = []
