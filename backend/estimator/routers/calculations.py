"""Calculation API routes. Stateless: every request carries the full project snapshot."""
from fastapi import APIRouter

from estimator.engine.calculator import CalculationEngine
from estimator.models.estimation import Scenario
from estimator.schemas.calculation import (
    BudgetBreakdown,
    BudgetHealth,
    BudgetHealthRequest,
    BurnRate,
    CapacityAnalysis,
    ProjectEstimate,
    RealityCheck,
    RoleCostSummary,
    ScenarioResult,
)
from estimator.schemas.project import ProjectInput
from estimator.services.estimation_service import estimate_project
from estimator.services.reality_check import assess_budget, build_reality_check

router = APIRouter(prefix="/estimates", tags=["calculations"])


@router.post("", response_model=ProjectEstimate)
async def get_estimate(data: ProjectInput):
    """Burn rate, capacity, scenarios, role costs and reality check in one response."""
    return estimate_project(data)


@router.post("/burn-rate", response_model=BurnRate)
async def get_burn_rate(data: ProjectInput):
    engine = CalculationEngine()
    return engine.compute_burn_rate(data.team_members, data.fixed_costs)


@router.post("/capacity", response_model=CapacityAnalysis)
async def get_capacity(data: ProjectInput):
    engine = CalculationEngine()
    return engine.analyze_capacity(data.team_members, data.features, data.duration_months)


@router.post("/scenarios", response_model=list[ScenarioResult])
async def get_scenarios(data: ProjectInput):
    engine = CalculationEngine()
    burn_rate = engine.compute_burn_rate(data.team_members, data.fixed_costs)
    return engine.scenario_results(burn_rate, data.duration_months)


@router.post("/scenarios/{scenario}/breakdown", response_model=BudgetBreakdown)
async def get_breakdown(scenario: Scenario, data: ProjectInput):
    engine = CalculationEngine()
    burn_rate = engine.compute_burn_rate(data.team_members, data.fixed_costs)
    return engine.breakdown(scenario, burn_rate, data.duration_months)


@router.post("/team-composition", response_model=list[RoleCostSummary])
async def get_team_composition(data: ProjectInput):
    engine = CalculationEngine()
    return engine.summarize_by_role(data.team_members, data.duration_months)


@router.post("/reality-check", response_model=RealityCheck)
async def get_reality_check(data: ProjectInput):
    return build_reality_check(data)


@router.post("/budget-health", response_model=BudgetHealth)
async def get_budget_health(data: BudgetHealthRequest):
    return assess_budget(data.budget, data.spent)
