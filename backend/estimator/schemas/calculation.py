"""Calculation result schemas."""
from decimal import Decimal

from pydantic import Field

from estimator.models.estimation import BudgetStatus, RiskLevel, Scenario
from estimator.schemas.base import Money, Quantity, SchemaBase
from estimator.schemas.team import TeamMember


class BurnRate(SchemaBase):
    labor: Money
    fixed: Money
    total: Money


class CapacityAnalysis(SchemaBase):
    capacity_hours: Quantity
    demand_hours: Quantity
    utilization_percent: Quantity
    risk_level: RiskLevel
    suggested_duration_months: int | None = None
    total_story_points: int = 0


class ScenarioProjection(SchemaBase):
    optimistic: Money
    realistic: Money
    pessimistic: Money

    def cost_for(self, scenario: Scenario) -> Decimal:
        return {
            Scenario.OPTIMISTIC: self.optimistic,
            Scenario.REALISTIC: self.realistic,
            Scenario.PESSIMISTIC: self.pessimistic,
        }[scenario]


class BreakdownPercentages(SchemaBase):
    labor: int
    tools: int
    risk_buffer: int


class BudgetBreakdown(SchemaBase):
    scenario: Scenario
    labor: Money
    tools: Money
    risk_buffer: Money
    total: Money
    percentages: BreakdownPercentages
    risk_buffer_negative: bool


class ScenarioResult(SchemaBase):
    scenario: Scenario
    total_cost: Money
    labor_cost: Money
    tools_cost: Money
    risk_buffer_cost: Money
    monthly_cost: Money
    risk_buffer_negative: bool


class RoleCostSummary(SchemaBase):
    role: str
    member_count: int
    total_cost: Money


class RealityCheck(SchemaBase):
    """Deterministic scope-vs-timeline advisory."""

    risk_level: RiskLevel
    utilization_percent: Quantity
    total_story_points: int
    feature_count: int
    duration_months: int
    suggested_duration_months: int | None
    extension_months: int
    recommend_time_buffer: bool
    has_high_complexity: bool


class BudgetHealthRequest(SchemaBase):
    budget: Decimal = Field(..., ge=0)
    spent: Decimal = Field(default=Decimal(0), ge=0)


class BudgetHealth(SchemaBase):
    usage_percent: int
    remaining: Money
    status: BudgetStatus


class ProjectEstimate(SchemaBase):
    project_name: str | None
    duration_months: int
    currency: str
    team: list[TeamMember]
    burn_rate: BurnRate
    capacity: CapacityAnalysis
    scenarios: ScenarioProjection
    scenario_results: list[ScenarioResult]
    team_composition: list[RoleCostSummary]
    reality_check: RealityCheck
