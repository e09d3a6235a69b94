"""
XP scoring for logged workouts.

This module holds the pure scoring functions used by the /log endpoint:
- Volume multiplier by rep band (low, medium, high)
- XP gained for a single set
"""
import logging
import math

from domain.models.workout_log import INT64_MAX, INT64_MIN

logger = logging.getLogger(__name__)


# =============================================================================
# Scoring Constants
# =============================================================================

HIGH_REP_THRESHOLD = 12
LOW_REP_THRESHOLD = 5

HIGH_REP_MULTIPLIER = 0.8
LOW_REP_MULTIPLIER = 1.2
DEFAULT_MULTIPLIER = 1.0

XP_SCALE = 0.1


# =============================================================================
# Scoring Formulas
# =============================================================================


def calculate_volume_multiplier(reps: int) -> float:
    """
    Get the volume multiplier for a rep count.

    High-rep sets (more than 12) are discounted, low-rep sets (fewer than 5)
    are rewarded, everything in between scores at face value.

    Args:
        reps: Number of reps completed

    Returns:
        Multiplier applied to the base XP
    """
    if reps > HIGH_REP_THRESHOLD:
        return HIGH_REP_MULTIPLIER
    if reps < LOW_REP_THRESHOLD:
        return LOW_REP_MULTIPLIER
    return DEFAULT_MULTIPLIER


def calculate_xp(reps: int, weight: float) -> int:
    """
    Calculate XP gained for a set.

    Formula: XP = int(reps * weight * multiplier * 0.1)

    The result is truncated toward zero, not rounded. A result that does
    not fit in a signed 64-bit integer (including an overflow to infinity)
    scores INT64_MIN, the value an out-of-range float-to-int64 conversion
    produces on amd64.

    Args:
        reps: Number of reps completed
        weight: Weight lifted

    Returns:
        XP gained as an integer
    """
    base_xp = float(reps) * weight
    volume_multiplier = calculate_volume_multiplier(reps)
    xp = base_xp * volume_multiplier * XP_SCALE
    if not math.isfinite(xp) or not (INT64_MIN <= xp < INT64_MAX + 1):
        logger.warning("XP out of int64 range for %d reps x %s", reps, weight)
        return INT64_MIN
    return int(xp)
