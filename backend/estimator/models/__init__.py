"""Domain enums."""
from estimator.models.estimation import BudgetStatus, RiskLevel, Scenario
from estimator.models.feature import STORY_POINT_SCALE, Complexity
from estimator.models.team import CompensationType

__all__ = [
    "BudgetStatus",
    "CompensationType",
    "Complexity",
    "RiskLevel",
    "STORY_POINT_SCALE",
    "Scenario",
]
