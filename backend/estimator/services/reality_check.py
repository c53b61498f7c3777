"""Reality check and budget guardian advisories, derived from the estimation formulas."""
from decimal import Decimal

from estimator.config import get_settings
from estimator.engine.calculator import CalculationEngine
from estimator.logging_config import get_logger
from estimator.models.estimation import BudgetStatus, RiskLevel
from estimator.models.feature import Complexity
from estimator.schemas.base import round_half_up
from estimator.schemas.calculation import BudgetHealth, CapacityAnalysis, RealityCheck
from estimator.schemas.project import ProjectInput

logger = get_logger("services.reality_check")


def build_reality_check(
    project: ProjectInput,
    capacity: CapacityAnalysis | None = None,
    engine: CalculationEngine | None = None,
) -> RealityCheck:
    """Scope-vs-timeline advisory. Pass a precomputed capacity analysis to avoid recomputing it."""
    if capacity is None:
        engine = engine or CalculationEngine()
        capacity = engine.analyze_capacity(project.team_members, project.features, project.duration_months)
    extension = 0
    if capacity.risk_level == RiskLevel.OVERLOADED and capacity.suggested_duration_months is not None:
        extension = max(capacity.suggested_duration_months - project.duration_months, 0)
    return RealityCheck(
        risk_level=capacity.risk_level,
        utilization_percent=capacity.utilization_percent,
        total_story_points=capacity.total_story_points,
        feature_count=len(project.features),
        duration_months=project.duration_months,
        suggested_duration_months=capacity.suggested_duration_months,
        extension_months=extension,
        recommend_time_buffer=capacity.risk_level == RiskLevel.HIGH_RISK,
        has_high_complexity=any(f.complexity == Complexity.HIGH for f in project.features),
    )


def assess_budget(budget: Decimal, spent: Decimal) -> BudgetHealth:
    """Budget usage % = spent / budget × 100 (half-up); status from configured thresholds."""
    settings = get_settings()
    budget = Decimal(budget)
    spent = Decimal(spent)
    if budget > 0:
        usage = int(round_half_up(spent / budget * Decimal(100), 0))
    else:
        usage = 0
    if usage > settings.budget_critical_threshold:
        status = BudgetStatus.CRITICAL
    elif usage > settings.budget_warning_threshold:
        status = BudgetStatus.WARNING
    else:
        status = BudgetStatus.ON_TRACK
    if status != BudgetStatus.ON_TRACK:
        logger.info("budget_threshold_exceeded", extra={"usage_percent": usage, "status": status})
    return BudgetHealth(usage_percent=usage, remaining=budget - spent, status=status)
