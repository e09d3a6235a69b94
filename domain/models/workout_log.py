"""
Workout log models for the /log endpoint.

WorkoutInput is decoded from the request body and WorkoutResult is the
response payload. Neither is persisted.
"""

from datetime import datetime, timedelta
from typing import Any, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_serializer,
    field_validator,
)


# Bounds of a signed 64-bit integer
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# Integral floats below this are written without a fractional part
PLAIN_NUMBER_LIMIT = 1e21


def format_rfc3339(moment: datetime) -> str:
    """
    Format a datetime as RFC3339 with second precision.

    Naive datetimes are treated as local time. A zero UTC offset is
    written as "Z".

    Examples:
        >>> from datetime import timezone
        >>> format_rfc3339(datetime(2024, 1, 2, 15, 4, 5, tzinfo=timezone.utc))
        '2024-01-02T15:04:05Z'
    """
    if moment.tzinfo is None:
        moment = moment.astimezone()
    if moment.utcoffset() == timedelta(0):
        return moment.strftime("%Y-%m-%dT%H:%M:%SZ")
    return moment.isoformat(timespec="seconds")


class WorkoutInput(BaseModel):
    """
    A single logged set as sent by the client.

    Missing or null fields fall back to their zero value so that the
    use case can report them with a field-specific message. Type
    mismatches are rejected by strict validation.
    """

    model_config = ConfigDict(strict=True, extra="ignore")

    exercise: str = Field(default="", description="Exercise name")
    reps: int = Field(
        default=0,
        ge=INT64_MIN,
        le=INT64_MAX,
        description="Number of reps completed",
    )
    weight: float = Field(default=0.0, description="Weight lifted in kg")

    @field_validator("exercise", "reps", "weight", mode="before")
    @classmethod
    def null_as_zero_value(cls, v: Any, info: ValidationInfo) -> Any:
        """Treat an explicit null like a missing field."""
        if v is None:
            return cls.model_fields[info.field_name].default
        return v


class WorkoutResult(BaseModel):
    """XP awarded for a logged set, echoing the input."""

    exercise: str
    reps: int
    weight: float
    xp_gained: int
    timestamp: str = Field(..., description="RFC3339 time the result was built")

    @classmethod
    def from_input(
        cls,
        workout: WorkoutInput,
        xp_gained: int,
        logged_at: Optional[datetime] = None,
    ) -> "WorkoutResult":
        """
        Build a result for a validated workout.

        Args:
            workout: The validated input
            xp_gained: XP computed for the set
            logged_at: Time to stamp on the result (defaults to now, local time)

        Returns:
            WorkoutResult ready to be serialized
        """
        if logged_at is None:
            logged_at = datetime.now().astimezone()
        return cls(
            exercise=workout.exercise,
            reps=workout.reps,
            weight=workout.weight,
            xp_gained=xp_gained,
            timestamp=format_rfc3339(logged_at),
        )

    @field_serializer("weight")
    def serialize_weight(self, weight: float) -> Union[int, float]:
        """Write whole-number weights as JSON integers (100, not 100.0)."""
        if weight.is_integer() and abs(weight) < PLAIN_NUMBER_LIMIT:
            return int(weight)
        return weight
