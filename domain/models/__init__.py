"""
Domain models for the Workout XP API.

These models represent the core business concepts:
- WorkoutInput: A logged set as sent by the client (exercise, reps, weight)
- WorkoutResult: The scored set returned to the client

Usage:
    >>> from domain.models import WorkoutInput, WorkoutResult

    >>> workout = WorkoutInput(exercise="squat", reps=10, weight=100.0)
    >>> result = WorkoutResult.from_input(workout, xp_gained=100)
    >>> result.model_dump_json()
"""

from domain.models.workout_log import (
    INT64_MAX,
    INT64_MIN,
    WorkoutInput,
    WorkoutResult,
    format_rfc3339,
)

__all__ = [
    "INT64_MAX",
    "INT64_MIN",
    "WorkoutInput",
    "WorkoutResult",
    "format_rfc3339",
]
