"""Estimation outcome enums."""
from enum import Enum as PyEnum


class Scenario(str, PyEnum):
    OPTIMISTIC = "Optimistic"
    REALISTIC = "Realistic"
    PESSIMISTIC = "Pessimistic"


class RiskLevel(str, PyEnum):
    NORMAL = "Normal"
    HIGH_RISK = "HighRisk"
    OVERLOADED = "Overloaded"


class BudgetStatus(str, PyEnum):
    ON_TRACK = "on_track"
    WARNING = "warning"
    CRITICAL = "critical"
