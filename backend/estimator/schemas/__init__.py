"""Pydantic schemas."""
from estimator.schemas.team import (
    CompensationConversionRequest,
    EmployeeAssignmentRequest,
    EmployeeRecord,
    TeamMember,
    TeamMemberInput,
)
from estimator.schemas.feature import FeatureInput
from estimator.schemas.project import FixedCostInput, ProjectInput
from estimator.schemas.calculation import (
    BreakdownPercentages,
    BudgetBreakdown,
    BudgetHealth,
    BudgetHealthRequest,
    BurnRate,
    CapacityAnalysis,
    ProjectEstimate,
    RealityCheck,
    RoleCostSummary,
    ScenarioProjection,
    ScenarioResult,
)

__all__ = [
    "CompensationConversionRequest",
    "EmployeeAssignmentRequest",
    "EmployeeRecord",
    "TeamMember",
    "TeamMemberInput",
    "FeatureInput",
    "FixedCostInput",
    "ProjectInput",
    "BreakdownPercentages",
    "BudgetBreakdown",
    "BudgetHealth",
    "BudgetHealthRequest",
    "BurnRate",
    "CapacityAnalysis",
    "ProjectEstimate",
    "RealityCheck",
    "RoleCostSummary",
    "ScenarioProjection",
    "ScenarioResult",
]
