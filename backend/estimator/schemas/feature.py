"""Feature schemas."""
from pydantic import Field, field_validator

from estimator.models.feature import STORY_POINT_SCALE, Complexity
from estimator.schemas.base import SchemaBase


class FeatureInput(SchemaBase):
    name: str | None = Field(default=None, max_length=255)
    complexity: Complexity = Complexity.MEDIUM
    story_points: int = 1

    @field_validator("story_points")
    @classmethod
    def _on_scale(cls, v: int) -> int:
        if v not in STORY_POINT_SCALE:
            raise ValueError(f"story points must be one of {list(STORY_POINT_SCALE)}")
        return v
