"""
Application-layer exceptions.

These exceptions are raised by the use cases and translated to HTTP
responses by the routers.
"""


class InvalidWorkoutPayload(Exception):
    """Request body could not be decoded into a workout.

    Raised for malformed JSON, a non-object top-level value, or fields of
    the wrong type. The message carries the decode detail and is meant for
    server logs only.
    """

    pass


class WorkoutValidationError(Exception):
    """Raised when a decoded workout fails validation."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
