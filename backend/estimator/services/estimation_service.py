"""Full project estimate: runs every calculation over one project snapshot."""
from estimator.engine.calculator import CalculationEngine
from estimator.logging_config import get_logger
from estimator.schemas.calculation import ProjectEstimate
from estimator.schemas.project import ProjectInput
from estimator.services.reality_check import build_reality_check

logger = get_logger("services.estimation")


def estimate_project(project: ProjectInput, engine: CalculationEngine | None = None) -> ProjectEstimate:
    engine = engine or CalculationEngine()
    members = project.team_members
    duration = project.duration_months

    burn_rate = engine.compute_burn_rate(members, project.fixed_costs)
    capacity = engine.analyze_capacity(members, project.features, duration)
    logger.debug(
        "project_estimated",
        extra={
            "project_name": project.project_name,
            "monthly_burn_rate": burn_rate.total,
            "risk_level": capacity.risk_level,
        },
    )
    return ProjectEstimate(
        project_name=project.project_name,
        duration_months=duration,
        currency=engine.settings.currency,
        team=[engine.with_normalized_cost(m) for m in members],
        burn_rate=burn_rate,
        capacity=capacity,
        scenarios=engine.project_scenarios(burn_rate, duration),
        scenario_results=engine.scenario_results(burn_rate, duration),
        team_composition=engine.summarize_by_role(members, duration),
        reality_check=build_reality_check(project, capacity=capacity),
    )
