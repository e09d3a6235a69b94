"""
FastAPI Dependency Providers for the Workout XP API.

This module provides FastAPI dependency injection functions so routers never
build their collaborators directly, and tests can swap them out.

Architecture:
- Use cases are stateless and shared per-process

Usage in routers:
    from api.deps import get_log_workout_use_case
    from application.use_cases import LogWorkoutUseCase

    @router.post("/log")
    async def log_workout(
        use_case: LogWorkoutUseCase = Depends(get_log_workout_use_case),
    ):
        ...

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_log_workout_use_case] = lambda: FakeUseCase()
"""

from functools import lru_cache

from application.use_cases import LogWorkoutUseCase


# =============================================================================
# Use Case Providers
# =============================================================================


@lru_cache
def get_log_workout_use_case() -> LogWorkoutUseCase:
    """
    Get the LogWorkout use case.

    The use case holds no state, so a single instance is shared.

    Returns:
        LogWorkoutUseCase: Use case for scoring logged workouts
    """
    return LogWorkoutUseCase()
