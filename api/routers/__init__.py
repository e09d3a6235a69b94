"""
Router package for the Workout XP API.

This package contains all API routers organized by domain:
- workouts: Workout logging and XP scoring (/log)
"""

from api.routers.workouts import router as workouts_router

__all__ = [
    "workouts_router",
]
