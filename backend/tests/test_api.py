"""HTTP tests for the stateless estimation API."""

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from estimator.main import app


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def payload():
    return {
        "projectName": "E-Commerce Platform Redesign",
        "durationMonths": 1,
        "teamMembers": [
            {"name": "Sarah Chen", "role": "Backend Developer", "compensationType": "hourly", "costValue": 90, "allocationPercentage": 100},
            {"name": "Mike Ross", "role": "Project Manager", "compensationType": "monthly", "costValue": 6000, "allocationPercentage": 60},
        ],
        "features": [
            {"name": "User Authentication System", "complexity": "High", "storyPoints": 13},
            {"name": "Product Catalog", "complexity": "Medium", "storyPoints": 8},
        ],
        "fixedCosts": [],
    }


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_full_estimate(client, payload):
    response = client.post("/estimates", json=payload)
    assert response.status_code == 200
    body = response.json()
    assert Decimal(body["burnRate"]["labor"]) == Decimal(18000)
    assert Decimal(body["scenarios"]["realistic"]) == Decimal(22500)
    assert Decimal(body["scenarios"]["pessimistic"]) == Decimal(23400)
    assert Decimal(body["team"][0]["normalizedMonthlyCost"]) == Decimal(14400)
    assert body["capacity"]["riskLevel"] == "Normal"
    assert body["realityCheck"]["totalStoryPoints"] == 21
    assert body["currency"] == "EUR"


def test_burn_rate(client, payload):
    payload["fixedCosts"] = [{"name": "AWS Infrastructure", "monthlyCost": 2500}, {"name": "SaaS Licenses", "cost": 800}]
    body = client.post("/estimates/burn-rate", json=payload).json()
    assert body == {"labor": "18000.00", "fixed": "3300.00", "total": "21300.00"}


def test_capacity_overloaded(client, payload):
    payload["features"] = [{"storyPoints": 13} for _ in range(30)]
    body = client.post("/estimates/capacity", json=payload).json()
    assert body["riskLevel"] == "Overloaded"
    assert body["suggestedDurationMonths"] > payload["durationMonths"]


def test_scenarios(client, payload):
    body = client.post("/estimates/scenarios", json=payload).json()
    assert [s["scenario"] for s in body] == ["Optimistic", "Realistic", "Pessimistic"]
    assert body[0]["riskBufferNegative"] is True


def test_breakdown(client, payload):
    body = client.post("/estimates/scenarios/Realistic/breakdown", json=payload).json()
    assert Decimal(body["tools"]) == Decimal(1800)
    assert Decimal(body["riskBuffer"]) == Decimal(2700)
    assert body["percentages"] == {"labor": 80, "tools": 8, "riskBuffer": 12}


def test_breakdown_unknown_scenario(client, payload):
    response = client.post("/estimates/scenarios/Hopeful/breakdown", json=payload)
    assert response.status_code == 422


def test_team_composition(client, payload):
    body = client.post("/estimates/team-composition", json=payload).json()
    assert [(r["role"], r["memberCount"]) for r in body] == [("Backend Developer", 1), ("Project Manager", 1)]


def test_reality_check(client, payload):
    body = client.post("/estimates/reality-check", json=payload).json()
    assert body["featureCount"] == 2
    assert body["hasHighComplexity"] is True


def test_budget_health(client):
    body = client.post("/estimates/budget-health", json={"budget": 85000, "spent": 80000}).json()
    assert body["usagePercent"] == 94
    assert body["status"] == "critical"


@pytest.mark.parametrize(
    "field, value",
    [("allocationPercentage", 120), ("costValue", -5), ("compensationType", "daily")],
)
def test_invalid_member_rejected(client, payload, field, value):
    payload["teamMembers"][0][field] = value
    response = client.post("/estimates", json=payload)
    assert response.status_code == 422


def test_huge_cost_value_is_served(client, payload):
    payload["teamMembers"] = [
        {"role": "Contractor", "compensationType": "hourly", "costValue": 1e30, "allocationPercentage": 100}
    ]
    response = client.post("/estimates/burn-rate", json=payload)
    assert response.status_code == 200
    assert Decimal(response.json()["labor"]) == Decimal("1.6e32")


def test_huge_duration_is_served(client, payload):
    payload["durationMonths"] = 10**27
    response = client.post("/estimates/scenarios", json=payload)
    assert response.status_code == 200
    costs = [Decimal(s["totalCost"]) for s in response.json()]
    assert costs[0] < costs[1] < costs[2]
    assert client.post("/estimates", json=payload).status_code == 200


def test_invalid_story_points_rejected(client, payload):
    payload["features"][0]["storyPoints"] = 4
    assert client.post("/estimates", json=payload).status_code == 422


def test_convert_compensation(client):
    response = client.post(
        "/team/convert-compensation",
        json={
            "member": {"role": "Designer", "compensationType": "monthly", "costValue": 5500, "allocationPercentage": 100},
            "newType": "hourly",
        },
    )
    body = response.json()
    assert body["compensationType"] == "hourly"
    assert Decimal(body["costValue"]) == Decimal("34.375")
    assert Decimal(body["normalizedMonthlyCost"]) == Decimal(5500)


def test_normalize_member(client):
    body = client.post(
        "/team/normalize",
        json={"role": "PM", "compensationType": "monthly", "costValue": 6000, "allocationPercentage": 60},
    ).json()
    assert body["normalizedMonthlyCost"] == "3600.00"


def test_member_from_employee(client):
    body = client.post(
        "/team/from-employee",
        json={
            "employee": {"name": "Emma Wilson", "role": "UI/UX Designer", "compensationType": "hourly", "rate": 70},
            "allocationPercentage": 50,
        },
    ).json()
    assert body["name"] == "Emma Wilson"
    assert body["normalizedMonthlyCost"] == "5600.00"
