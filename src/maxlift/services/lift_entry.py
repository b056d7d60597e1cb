"""Logging a new lift from raw form input."""

import logging
import math
from datetime import datetime
from typing import Iterable

from ..db.base import LiftStore
from ..models.lift_record import LiftRecord

logger = logging.getLogger(__name__)

COMMON_EXERCISES = [
    "Back Squat",
    "Back Pause Squat",
    "Front Squat",
    "Bench Press",
    "Deadlift",
]


def exercise_suggestions(records: Iterable[LiftRecord]) -> list[str]:
    """Common barbell lifts plus every exercise already logged, sorted."""
    historical = {r.exercise_name for r in records if r.exercise_name}
    return sorted(set(COMMON_EXERCISES) | historical)


def parse_lift_entry(
    exercise_name: str,
    weight_text: str,
    reps_text: str,
    notes: str = "",
    date: datetime | None = None,
) -> LiftRecord | None:
    """Build a record from form strings.

    Returns None when the name is blank or weight/reps don't parse as
    non-negative numbers; the form stays open for correction.
    """
    exercise_name = exercise_name.strip()
    if not exercise_name:
        return None

    try:
        weight = float(weight_text.strip())
        reps = int(reps_text.strip())
    except ValueError:
        return None

    if not math.isfinite(weight) or weight < 0 or reps < 0:
        return None

    date = date or datetime.now()
    if date.tzinfo is not None:
        date = date.astimezone().replace(tzinfo=None)

    return LiftRecord(
        exercise_name=exercise_name,
        weight=weight,
        reps=reps,
        notes=notes,
        date=date,
    )


async def log_lift(
    store: LiftStore,
    exercise_name: str,
    weight_text: str,
    reps_text: str,
    notes: str = "",
    date: datetime | None = None,
) -> LiftRecord | None:
    """Parse form input and insert the record. None if the input is invalid."""
    record = parse_lift_entry(exercise_name, weight_text, reps_text, notes, date)
    if record is None:
        return None

    await store.insert(record)
    logger.debug("Logged %s", record.get_summary())
    return record
