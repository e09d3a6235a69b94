"""
Workouts router for logging sets and awarding XP.

This router contains endpoints for:
- /log - Score a single logged set

Errors are returned as plain text, not JSON. Both success and error
bodies end with a newline. Decode details are logged and never sent
back to the client.
"""

import logging

from fastapi import APIRouter, Depends, Request, Response
from pydantic_core import PydanticSerializationError

from api.deps import get_log_workout_use_case
from api.responses import plain_text_error
from application.exceptions import InvalidWorkoutPayload, WorkoutValidationError
from application.use_cases import LogWorkoutUseCase

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Workouts"],
)


@router.post(
    "/log",
    responses={
        200: {"description": "XP awarded for the set"},
        400: {"description": "Invalid JSON input or a failed field check"},
        405: {"description": "Method Not Allowed"},
        500: {"description": "Response could not be encoded"},
    },
)
async def log_workout(
    request: Request,
    use_case: LogWorkoutUseCase = Depends(get_log_workout_use_case),
):
    """
    Log a set and return the XP it earned.

    Request format:
        {"exercise": "squat", "reps": 10, "weight": 100}

    Returns:
        {"exercise", "reps", "weight", "xp_gained", "timestamp"}
    """
    body = await request.body()

    try:
        result = use_case.execute(body)
    except InvalidWorkoutPayload as e:
        logger.warning("Failed to decode request: %s", e)
        return plain_text_error("Invalid JSON input", status_code=400)
    except WorkoutValidationError as e:
        return plain_text_error(e.message, status_code=400)

    try:
        content = result.model_dump_json() + "\n"
    except PydanticSerializationError as e:
        logger.error("Failed to encode response: %s", e)
        return plain_text_error("Internal Server Error", status_code=500)

    logger.info(
        "Logged workout: %s - %d reps @ %.1f kg = %d XP",
        result.exercise, result.reps, result.weight, result.xp_gained,
    )
    return Response(content=content, media_type="application/json")
