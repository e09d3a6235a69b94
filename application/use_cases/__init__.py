"""
Application Use Cases for the Workout XP API.

Use cases orchestrate domain objects and return domain models, not API
responses. Routers translate their results and exceptions to HTTP.

Usage:
    from application.use_cases import LogWorkoutUseCase

    use_case = LogWorkoutUseCase()
    result = use_case.execute(b'{"exercise": "squat", "reps": 10, "weight": 100}')
    result.xp_gained  # 100
"""

from application.use_cases.log_workout import LogWorkoutUseCase

__all__ = [
    "LogWorkoutUseCase",
]
