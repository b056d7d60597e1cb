"""Personal record aggregation per exercise."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Iterable

from ..models.lift_record import LiftRecord
from .history import group_lifts
from .one_rep_max import estimated_one_rep_max, is_estimable

REP_TARGETS = (1, 2, 3, 5)
LOOKBACK_CHOICES = (0, 1, 2, 3, 5, 7, 10)


class OneRepMaxSource(str, Enum):
    """Where a headline one-rep max came from."""

    ACTUAL = "actual"  # an observed single
    ESTIMATED = "estimated"  # Brzycki over multi-rep sets


@dataclass
class ExerciseRecords:
    """Personal records for one exercise."""

    exercise_name: str
    rep_maxes: dict[int, LiftRecord | None] = field(default_factory=dict)
    one_rep_max: float = 0.0
    one_rep_max_source: OneRepMaxSource | None = None
    chart_one_rep_max: float = 0.0

    @property
    def is_estimated(self) -> bool:
        return self.one_rep_max_source == OneRepMaxSource.ESTIMATED

    def get_one_rep_max_display(self) -> str:
        """Headline value as shown in the PR list."""
        if self.one_rep_max <= 0:
            return "-- lbs"
        suffix = " (est.)" if self.is_estimated else ""
        return f"{int(self.one_rep_max)}{suffix} lbs"

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "exercise_name": self.exercise_name,
            "rep_maxes": {
                str(reps): lift.to_dict() if lift else None
                for reps, lift in self.rep_maxes.items()
            },
            "one_rep_max": self.one_rep_max,
            "one_rep_max_source": (
                self.one_rep_max_source.value if self.one_rep_max_source else None
            ),
            "chart_one_rep_max": self.chart_one_rep_max,
        }


def years_before(moment: datetime, years: int) -> datetime:
    """Same calendar date ``years`` earlier (Feb 29 falls back to Feb 28)."""
    try:
        return moment.replace(year=moment.year - years)
    except ValueError:
        return moment.replace(year=moment.year - years, day=28)


def filter_by_lookback(
    records: Iterable[LiftRecord],
    lookback_years: int = 0,
    now: datetime | None = None,
) -> list[LiftRecord]:
    """Keep records inside the lookback window; 0 keeps everything.

    Placeholder records are dropped either way.
    """
    if lookback_years < 0:
        raise ValueError(f"Lookback must be non-negative, got {lookback_years}")

    kept = [r for r in records if not r.is_placeholder]
    if lookback_years == 0:
        return kept

    cutoff = years_before(now or datetime.now(), lookback_years)
    return [r for r in kept if r.date >= cutoff]


def best_lift_for_reps(
    records: Iterable[LiftRecord], target_reps: int
) -> LiftRecord | None:
    """Heaviest lift done for exactly ``target_reps``.

    A 3-rep set says nothing certain about a 5-rep max, so there is no
    estimate fallback.
    """
    matches = [r for r in records if r.reps == target_reps]
    if not matches:
        return None
    return max(matches, key=lambda r: r.weight)


def max_estimated_one_rep_max(records: Iterable[LiftRecord]) -> float | None:
    """Largest Brzycki estimate over records with estimable rep counts."""
    estimates = [
        estimated_one_rep_max(r.weight, r.reps) for r in records if is_estimable(r.reps)
    ]
    return max(estimates) if estimates else None


def best_one_rep_max(
    records: Iterable[LiftRecord],
) -> tuple[float, OneRepMaxSource | None]:
    """Headline 1RM for one exercise's records.

    Returns:
        (value, source). An actual single wins over any estimate; with no
        usable records the result is (0.0, None).
    """
    records = list(records)

    singles = [r.weight for r in records if r.reps == 1]
    if singles:
        return max(singles), OneRepMaxSource.ACTUAL

    estimate = max_estimated_one_rep_max(records)
    if estimate is not None:
        return estimate, OneRepMaxSource.ESTIMATED

    return 0.0, None


def _summarize(exercise_name: str, records: list[LiftRecord]) -> ExerciseRecords:
    one_rep_max, source = best_one_rep_max(records)
    return ExerciseRecords(
        exercise_name=exercise_name,
        rep_maxes={reps: best_lift_for_reps(records, reps) for reps in REP_TARGETS},
        one_rep_max=one_rep_max,
        one_rep_max_source=source,
        chart_one_rep_max=max_estimated_one_rep_max(records) or 0.0,
    )


def summarize_personal_records(
    records: Iterable[LiftRecord],
    lookback_years: int = 0,
    now: datetime | None = None,
) -> list[ExerciseRecords]:
    """Personal records for every exercise, alphabetically.

    Args:
        records: Current snapshot of the store
        lookback_years: Only consider lifts from the past N years (0 = all time)
        now: Reference time for the lookback window

    Returns:
        One ExerciseRecords per distinct exercise name in the window
    """
    relevant = filter_by_lookback(records, lookback_years, now)
    return [
        _summarize(name, lifts) for name, lifts in group_lifts(relevant).items()
    ]


def summarize_exercise(
    records: Iterable[LiftRecord],
    exercise_name: str,
    lookback_years: int = 0,
    now: datetime | None = None,
) -> ExerciseRecords | None:
    """Personal records for a single exercise, or None if it has no lifts."""
    relevant = [
        r
        for r in filter_by_lookback(records, lookback_years, now)
        if r.exercise_name == exercise_name
    ]
    if not relevant:
        return None
    return _summarize(exercise_name, relevant)
