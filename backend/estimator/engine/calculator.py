"""Centralized calculation engine - all formulas deterministic, Decimal only. Rates are per month."""
from decimal import ROUND_CEILING, Decimal
from typing import Iterable

from estimator.config import get_settings
from estimator.logging_config import get_logger
from estimator.models.estimation import RiskLevel, Scenario
from estimator.models.team import CompensationType
from estimator.schemas.base import round_half_up
from estimator.schemas.calculation import (
    BreakdownPercentages,
    BudgetBreakdown,
    BurnRate,
    CapacityAnalysis,
    RoleCostSummary,
    ScenarioProjection,
    ScenarioResult,
)
from estimator.schemas.feature import FeatureInput
from estimator.schemas.project import FixedCostInput
from estimator.schemas.team import EmployeeRecord, TeamMember, TeamMemberInput

logger = get_logger("engine.calculator")

# 1 month = 20 working days x 8 hours
HOURS_PER_MONTH = 160
HOURS_PER_STORY_POINT = 8

# Realistic = base / 0.8 productive time; pessimistic = base + 30% contingency
SCENARIO_MULTIPLIERS: dict[Scenario, Decimal] = {
    Scenario.OPTIMISTIC: Decimal("1.00"),
    Scenario.REALISTIC: Decimal("1.25"),
    Scenario.PESSIMISTIC: Decimal("1.30"),
}
TOOLS_RATIO = Decimal("0.10")

HIGH_RISK_UTILIZATION = Decimal(85)
OVERLOADED_UTILIZATION = Decimal(100)


def clamp_allocation(value: Decimal | int | float) -> Decimal:
    """Clamp an allocation percentage into [0, 100] for callers that clamp instead of rejecting."""
    return min(max(Decimal(str(value)), Decimal(0)), Decimal(100))


def _fraction(allocation_percentage: Decimal) -> Decimal:
    return Decimal(allocation_percentage) / Decimal(100)


class CalculationEngine:
    """Deterministic estimation engine. Input allocation is assumed to be within [0, 100]."""

    def __init__(self) -> None:
        self.settings = get_settings()

    # --- Compensation -----------------------------------------------------

    def full_monthly_cost(self, member: TeamMemberInput) -> Decimal:
        """Cost of the member at 100% allocation."""
        if member.compensation_type == CompensationType.MONTHLY:
            return Decimal(member.cost_value)
        return Decimal(member.cost_value) * HOURS_PER_MONTH

    def normalize_monthly_cost(self, member: TeamMemberInput) -> Decimal:
        """Normalized monthly cost = full monthly cost × allocation %."""
        return self.full_monthly_cost(member) * _fraction(member.allocation_percentage)

    def with_normalized_cost(self, member: TeamMemberInput) -> TeamMember:
        """Derived roster entry; recomputed from source fields, never cached."""
        data = member.model_dump(exclude={"normalized_monthly_cost"})
        return TeamMember(**data, normalized_monthly_cost=self.normalize_monthly_cost(member))

    def convert_compensation_type(
        self,
        member: TeamMemberInput,
        new_type: CompensationType,
    ) -> TeamMemberInput:
        """Unit conversion between hourly and monthly rate, preserving full-time monthly cost."""
        if member.compensation_type == new_type:
            return member
        if new_type == CompensationType.HOURLY:
            cost_value = Decimal(member.cost_value) / HOURS_PER_MONTH
        else:
            cost_value = Decimal(member.cost_value) * HOURS_PER_MONTH
        return member.model_copy(update={"compensation_type": new_type, "cost_value": cost_value})

    def member_from_employee(
        self,
        employee: EmployeeRecord,
        allocation_percentage: Decimal = Decimal(100),
    ) -> TeamMemberInput:
        """Roster entry copied from a company directory record."""
        return TeamMemberInput(
            name=employee.name,
            role=employee.role,
            compensation_type=employee.compensation_type,
            cost_value=employee.rate,
            allocation_percentage=allocation_percentage,
        )

    # --- Burn rate --------------------------------------------------------

    def compute_burn_rate(
        self,
        members: Iterable[TeamMemberInput],
        fixed_costs: Iterable[FixedCostInput] = (),
    ) -> BurnRate:
        """Monthly burn = Σ normalized labor + Σ fixed/vendor monthly costs."""
        labor = sum((self.normalize_monthly_cost(m) for m in members), Decimal(0))
        fixed = sum((Decimal(c.monthly_cost) for c in fixed_costs), Decimal(0))
        return BurnRate(labor=labor, fixed=fixed, total=labor + fixed)

    # --- Capacity ---------------------------------------------------------

    def capacity_hours(self, members: Iterable[TeamMemberInput], duration_months: int) -> Decimal:
        """Available hours = Σ 160 × allocation × duration."""
        return sum(
            (HOURS_PER_MONTH * _fraction(m.allocation_percentage) * duration_months for m in members),
            Decimal(0),
        )

    def demand_hours(self, features: Iterable[FeatureInput]) -> Decimal:
        """Required hours = Σ story points × 8."""
        return Decimal(sum(f.story_points for f in features) * HOURS_PER_STORY_POINT)

    def utilization_percent(self, demand_hours: Decimal, capacity_hours: Decimal) -> Decimal:
        """Demand / capacity × 100; 0 when no capacity is assigned."""
        if capacity_hours <= 0:
            return Decimal(0)
        return demand_hours / capacity_hours * Decimal(100)

    def classify_risk(self, utilization_percent: Decimal) -> RiskLevel:
        if utilization_percent > OVERLOADED_UTILIZATION:
            return RiskLevel.OVERLOADED
        if utilization_percent > HIGH_RISK_UTILIZATION:
            return RiskLevel.HIGH_RISK
        return RiskLevel.NORMAL

    def suggested_duration_months(
        self,
        demand_hours: Decimal,
        capacity_hours: Decimal,
        duration_months: int,
    ) -> int:
        """Duration that brings utilization to 100% with the current team."""
        if capacity_hours <= 0:
            return duration_months
        monthly_capacity = capacity_hours / Decimal(duration_months)
        return int((demand_hours / monthly_capacity).to_integral_value(rounding=ROUND_CEILING))

    def analyze_capacity(
        self,
        members: list[TeamMemberInput],
        features: list[FeatureInput],
        duration_months: int,
    ) -> CapacityAnalysis:
        capacity = self.capacity_hours(members, duration_months)
        demand = self.demand_hours(features)
        utilization = self.utilization_percent(demand, capacity)
        risk = self.classify_risk(utilization)
        suggested = None
        if risk != RiskLevel.NORMAL:
            suggested = self.suggested_duration_months(demand, capacity, duration_months)
        if risk == RiskLevel.OVERLOADED:
            logger.warning(
                "capacity_overloaded",
                extra={
                    "utilization_percent": utilization,
                    "duration_months": duration_months,
                    "suggested_duration_months": suggested,
                },
            )
        return CapacityAnalysis(
            capacity_hours=capacity,
            demand_hours=demand,
            utilization_percent=utilization,
            risk_level=risk,
            suggested_duration_months=suggested,
            total_story_points=sum(f.story_points for f in features),
        )

    # --- Scenarios --------------------------------------------------------

    def base_cost(self, burn_rate: BurnRate, duration_months: int) -> Decimal:
        return burn_rate.total * duration_months

    def project_scenarios(self, burn_rate: BurnRate, duration_months: int) -> ScenarioProjection:
        """Three-point projection: base × 1.00 / 1.25 / 1.30."""
        base = self.base_cost(burn_rate, duration_months)
        return ScenarioProjection(
            optimistic=base * SCENARIO_MULTIPLIERS[Scenario.OPTIMISTIC],
            realistic=base * SCENARIO_MULTIPLIERS[Scenario.REALISTIC],
            pessimistic=base * SCENARIO_MULTIPLIERS[Scenario.PESSIMISTIC],
        )

    def _percentage(self, component: Decimal, total: Decimal) -> int:
        if total == 0:
            return 0
        return int(round_half_up(component / total * Decimal(100), 0))

    def breakdown(
        self,
        scenario: Scenario,
        burn_rate: BurnRate,
        duration_months: int,
    ) -> BudgetBreakdown:
        """
        Budget split for a scenario: labor, tools (10% of labor) and the remaining risk buffer.
        A negative risk buffer is flagged, not clamped.
        """
        total = self.project_scenarios(burn_rate, duration_months).cost_for(scenario)
        labor = burn_rate.labor * duration_months
        tools = labor * TOOLS_RATIO
        risk_buffer = total - labor - tools
        negative = risk_buffer < 0
        if negative:
            logger.warning(
                "risk_buffer_negative",
                extra={"scenario": scenario, "risk_buffer": risk_buffer, "total_cost": total},
            )
        return BudgetBreakdown(
            scenario=scenario,
            labor=labor,
            tools=tools,
            risk_buffer=risk_buffer,
            total=total,
            percentages=BreakdownPercentages(
                labor=self._percentage(labor, total),
                tools=self._percentage(tools, total),
                risk_buffer=self._percentage(risk_buffer, total),
            ),
            risk_buffer_negative=negative,
        )

    def scenario_results(self, burn_rate: BurnRate, duration_months: int) -> list[ScenarioResult]:
        results = []
        for scenario, multiplier in SCENARIO_MULTIPLIERS.items():
            b = self.breakdown(scenario, burn_rate, duration_months)
            results.append(
                ScenarioResult(
                    scenario=scenario,
                    total_cost=b.total,
                    labor_cost=b.labor,
                    tools_cost=b.tools,
                    risk_buffer_cost=b.risk_buffer,
                    monthly_cost=burn_rate.total * multiplier,
                    risk_buffer_negative=b.risk_buffer_negative,
                )
            )
        return results

    # --- Team composition -------------------------------------------------

    def summarize_by_role(
        self,
        members: Iterable[TeamMemberInput],
        duration_months: int,
    ) -> list[RoleCostSummary]:
        """Total project cost per role, in order of first appearance. Roles match exactly."""
        groups: dict[str, tuple[int, Decimal]] = {}
        for m in members:
            count, cost = groups.get(m.role, (0, Decimal(0)))
            groups[m.role] = (count + 1, cost + self.normalize_monthly_cost(m) * duration_months)
        return [
            RoleCostSummary(role=role, member_count=count, total_cost=cost)
            for role, (count, cost) in groups.items()
        ]
