"""
Log Workout Use Case.

This use case turns a raw /log request body into a scored WorkoutResult:
decode, validate, score, stamp.
"""
import json
import logging
import math
from datetime import datetime
from typing import Optional

from pydantic import ValidationError

from application.exceptions import InvalidWorkoutPayload, WorkoutValidationError
from backend.core.xp import calculate_xp
from domain.models.workout_log import WorkoutInput, WorkoutResult

logger = logging.getLogger(__name__)

JSON_WHITESPACE = " \t\n\r"


def _parse_finite_float(literal: str) -> float:
    value = float(literal)
    if not math.isfinite(value):
        raise ValueError(f"number {literal} is out of float64 range")
    return value


def _reject_constant(name: str):
    raise ValueError(f"invalid JSON literal {name}")


_decoder = json.JSONDecoder(
    parse_float=_parse_finite_float,
    parse_constant=_reject_constant,
)


def _match_fields(payload: dict) -> dict:
    """Map object keys onto WorkoutInput fields, exact match first."""
    fields = WorkoutInput.model_fields
    folded = {name.casefold(): name for name in fields}

    matched = {}
    for key, value in payload.items():
        name = key if key in fields else folded.get(key.casefold())
        # Unknown keys are ignored; null leaves the field as it was
        if name is None or value is None:
            continue
        matched[name] = value
    return matched


class LogWorkoutUseCase:
    """
    Use case for scoring a logged workout.

    Stateless: one instance can serve any number of concurrent requests.
    """

    def decode(self, body: bytes) -> WorkoutInput:
        """
        Decode a request body into a WorkoutInput.

        Only the first JSON value in the body is read; anything after it is
        ignored. Object keys match field names exactly or, failing that,
        case-insensitively. Null values leave a field unset, and a
        top-level null decodes to an empty workout, which validation then
        rejects.

        Args:
            body: Raw request body

        Returns:
            Decoded (not yet validated) workout

        Raises:
            InvalidWorkoutPayload: If the body is not a JSON object with
                correctly typed fields
        """
        text = body.decode("utf-8", errors="replace")
        start = len(text) - len(text.lstrip(JSON_WHITESPACE))
        try:
            payload, _ = _decoder.raw_decode(text, start)
        except (ValueError, RecursionError) as e:
            raise InvalidWorkoutPayload(str(e)) from e

        if payload is None:
            payload = {}
        if not isinstance(payload, dict):
            raise InvalidWorkoutPayload(
                f"cannot decode JSON {type(payload).__name__} into a workout object"
            )

        try:
            return WorkoutInput.model_validate(_match_fields(payload))
        except ValidationError as e:
            details = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
                for err in e.errors()
            )
            raise InvalidWorkoutPayload(details) from e
        except OverflowError as e:
            raise InvalidWorkoutPayload(str(e)) from e

    def validate(self, workout: WorkoutInput) -> None:
        """
        Check a decoded workout. The first failing rule wins.

        Raises:
            WorkoutValidationError: With the client-facing message
        """
        if workout.exercise == "":
            raise WorkoutValidationError("Exercise name is required")
        if workout.reps <= 0:
            raise WorkoutValidationError("Reps must be greater than 0")
        if workout.weight <= 0:
            raise WorkoutValidationError("Weight must be greater than 0")

    def execute(
        self,
        body: bytes,
        logged_at: Optional[datetime] = None,
    ) -> WorkoutResult:
        """
        Decode, validate and score a workout.

        Args:
            body: Raw request body
            logged_at: Optional timestamp override (defaults to now)

        Returns:
            WorkoutResult with the XP gained

        Raises:
            InvalidWorkoutPayload: If the body cannot be decoded
            WorkoutValidationError: If a field fails validation
        """
        workout = self.decode(body)
        self.validate(workout)

        xp_gained = calculate_xp(workout.reps, workout.weight)
        logger.debug(
            "Scored %s: %d reps x %s = %d XP",
            workout.exercise, workout.reps, workout.weight, xp_gained,
        )

        return WorkoutResult.from_input(workout, xp_gained, logged_at=logged_at)
