"""Team member enums."""
from enum import Enum as PyEnum


class CompensationType(str, PyEnum):
    HOURLY = "hourly"
    MONTHLY = "monthly"
