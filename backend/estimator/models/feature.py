"""Feature scope enums and story point scale."""
from enum import Enum as PyEnum


class Complexity(str, PyEnum):
    """Descriptive only; not used in cost math."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


# Fibonacci-like planning poker scale
STORY_POINT_SCALE: tuple[int, ...] = (1, 2, 3, 5, 8, 13)
