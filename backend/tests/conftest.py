"""
Pytest fixtures for the estimator test suite.

Provides:
- A calculation engine with default settings
- Roster, feature and project builders
- Logging and settings-cache isolation between tests
"""

from decimal import Decimal

import pytest

from estimator.config import get_settings
from estimator.engine.calculator import CalculationEngine
from estimator.logging_config import reset_logging
from estimator.models.feature import Complexity
from estimator.models.team import CompensationType
from estimator.schemas.feature import FeatureInput
from estimator.schemas.project import FixedCostInput, ProjectInput
from estimator.schemas.team import TeamMemberInput


@pytest.fixture(autouse=True)
def _isolate_globals():
    get_settings.cache_clear()
    yield
    reset_logging()
    get_settings.cache_clear()


@pytest.fixture
def engine() -> CalculationEngine:
    return CalculationEngine()


def hourly(rate, allocation=100, role="Backend Developer", name=None) -> TeamMemberInput:
    return TeamMemberInput(
        name=name,
        role=role,
        compensation_type=CompensationType.HOURLY,
        cost_value=Decimal(str(rate)),
        allocation_percentage=Decimal(str(allocation)),
    )


def monthly(salary, allocation=100, role="Project Manager", name=None) -> TeamMemberInput:
    return TeamMemberInput(
        name=name,
        role=role,
        compensation_type=CompensationType.MONTHLY,
        cost_value=Decimal(str(salary)),
        allocation_percentage=Decimal(str(allocation)),
    )


def features_totaling(story_points: int, complexity=Complexity.MEDIUM) -> list[FeatureInput]:
    """Features of 13 SP plus a remainder decomposed over the point scale."""
    result = []
    remaining = story_points
    for size in (13, 8, 5, 3, 2, 1):
        while remaining >= size:
            result.append(FeatureInput(name=f"Feature {len(result) + 1}", complexity=complexity, story_points=size))
            remaining -= size
    return result


@pytest.fixture
def reference_team() -> list[TeamMemberInput]:
    """€90/h full time plus €6,000/mo at 60%."""
    return [
        hourly(90, 100, role="Backend Developer", name="Sarah Chen"),
        monthly(6000, 60, role="Project Manager", name="Mike Ross"),
    ]


@pytest.fixture
def three_developers() -> list[TeamMemberInput]:
    """480 capacity hours per month."""
    return [hourly(60, 100, role="Frontend Developer") for _ in range(3)]


@pytest.fixture
def sample_project(reference_team) -> ProjectInput:
    return ProjectInput(
        project_name="E-Commerce Platform Redesign",
        duration_months=6,
        team_members=reference_team,
        features=[
            FeatureInput(name="User Authentication System", complexity=Complexity.HIGH, story_points=13),
            FeatureInput(name="Product Catalog", complexity=Complexity.MEDIUM, story_points=8),
            FeatureInput(name="Payment Gateway Integration", complexity=Complexity.HIGH, story_points=13),
            FeatureInput(name="Admin Dashboard", complexity=Complexity.MEDIUM, story_points=5),
        ],
        fixed_costs=[
            FixedCostInput(name="AWS Infrastructure", monthly_cost=Decimal(2500)),
            FixedCostInput(name="SaaS Licenses", monthly_cost=Decimal(800)),
        ],
    )
