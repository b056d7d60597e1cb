"""One-rep-max estimation (Brzycki formula)."""

MIN_REPS = 1
MAX_REPS = 36


class RepRangeError(ValueError):
    """Raised when a rep count falls outside the formula's valid range."""


def is_estimable(reps: int) -> bool:
    """Whether a set with this many reps can be turned into a 1RM estimate."""
    return MIN_REPS <= reps <= MAX_REPS


def estimated_one_rep_max(weight: float, reps: int) -> float:
    """Estimate the one-rep max for a set.

    A single is already a maximum and is returned as-is. Anything else goes
    through Brzycki: ``weight * 36 / (37 - reps)``.

    Args:
        weight: Weight lifted (lbs)
        reps: Repetitions performed, 1 to 36

    Returns:
        Estimated 1RM in the same unit as ``weight``

    Raises:
        RepRangeError: If reps is outside 1-36 (the formula divides by zero
            at 37 and goes negative beyond it)
    """
    if not is_estimable(reps):
        raise RepRangeError(
            f"Cannot estimate 1RM from {reps} reps (valid range {MIN_REPS}-{MAX_REPS})"
        )
    if reps == 1:
        return weight
    return weight * 36 / (37 - reps)
