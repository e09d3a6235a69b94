"""
Domain layer for the Workout XP API.

This package contains pure domain models that are independent of
infrastructure concerns (HTTP, configuration, logging setup).
"""

from domain.models import (
    WorkoutInput,
    WorkoutResult,
    format_rfc3339,
)

__all__ = [
    "WorkoutInput",
    "WorkoutResult",
    "format_rfc3339",
]
