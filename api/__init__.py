"""
API package for the Workout XP API.

This package contains:
- deps.py: FastAPI dependency providers for DI
- responses.py: Plain-text error responses
- routers/: API route handlers
"""

# Re-export dependency providers for convenient access
from api.deps import get_log_workout_use_case

__all__ = [
    # Use cases
    "get_log_workout_use_case",
]
