"""Lift record data model."""

import math
from dataclasses import dataclass, field
from datetime import datetime
from uuid import uuid4


def new_lift_id() -> str:
    """Generate a fresh record identifier."""
    return str(uuid4())


@dataclass(frozen=True)
class LiftRecord:
    """A single logged set: one exercise, one weight, one rep count.

    Weight is in pounds. A record with zero weight and zero reps is a
    placeholder left behind by older clients and carries no training meaning.
    """

    exercise_name: str
    weight: float
    reps: int
    date: datetime = field(default_factory=datetime.now)
    notes: str = ""
    id: str = field(default_factory=new_lift_id)

    def __post_init__(self):
        if not math.isfinite(self.weight):
            raise ValueError(f"Weight must be a finite number, got {self.weight}")
        if self.weight < 0:
            raise ValueError(f"Weight must be non-negative, got {self.weight}")
        if self.reps < 0:
            raise ValueError(f"Reps must be non-negative, got {self.reps}")

    @property
    def is_placeholder(self) -> bool:
        """True for the zero-weight, zero-rep template records."""
        return self.weight == 0 and self.reps == 0

    @property
    def estimated_one_rep_max(self) -> float | None:
        """Estimated 1RM for this set, or None when reps are out of range."""
        from ..services.one_rep_max import estimated_one_rep_max, is_estimable

        if not is_estimable(self.reps):
            return None
        return estimated_one_rep_max(self.weight, self.reps)

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "id": self.id,
            "date": self.date.isoformat(),
            "exercise_name": self.exercise_name,
            "weight": self.weight,
            "reps": self.reps,
            "notes": self.notes,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "LiftRecord":
        """Create from dictionary."""
        kwargs = {}
        if data.get("id"):
            kwargs["id"] = data["id"]
        return cls(
            exercise_name=data["exercise_name"],
            weight=float(data["weight"]),
            reps=int(data["reps"]),
            date=datetime.fromisoformat(data["date"]),
            notes=data.get("notes") or "",
            **kwargs,
        )

    def get_summary(self) -> str:
        """One-line human-readable description."""
        return (
            f"{self.date.strftime('%Y-%m-%d')}  {self.exercise_name}: "
            f"{self.weight:g} lbs x {self.reps}"
        )
