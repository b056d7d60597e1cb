"""JSON import/export of lift records.

The document is a JSON array of objects with exactly these keys::

    {"date": "2025-11-27T18:30:00", "exerciseName": "Back Squat",
     "weight": 225.0, "reps": 5, "notes": ""}

Record identifiers are never exported; imported lifts get fresh ones.
"""

import json
import logging
import math
from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterable

from ..db.base import LiftStore
from ..models.lift_record import LiftRecord

logger = logging.getLogger(__name__)

EXPORT_FIELDS = ("date", "exerciseName", "weight", "reps", "notes")


class LiftImportError(ValueError):
    """Raised when an import document cannot be read or stored."""


@dataclass(frozen=True)
class LiftExport:
    """Serializable shape of a lift (no identifier)."""

    date: datetime
    exercise_name: str
    weight: float
    reps: int
    notes: str = ""

    @classmethod
    def from_record(cls, record: LiftRecord) -> "LiftExport":
        return cls(
            date=record.date,
            exercise_name=record.exercise_name,
            weight=record.weight,
            reps=record.reps,
            notes=record.notes,
        )

    def to_record(self) -> LiftRecord:
        """Build a brand-new record from this shape."""
        return LiftRecord(
            date=self.date,
            exercise_name=self.exercise_name,
            weight=self.weight,
            reps=self.reps,
            notes=self.notes,
        )

    def to_dict(self) -> dict:
        """Convert to the document's object shape."""
        return {
            "date": self.date.isoformat(),
            "exerciseName": self.exercise_name,
            "weight": self.weight,
            "reps": self.reps,
            "notes": self.notes,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "LiftExport":
        """Parse one document object.

        Raises:
            ValueError: On a missing key or a value of the wrong type
        """
        if not isinstance(data, dict):
            raise ValueError(f"expected an object, got {type(data).__name__}")

        missing = [key for key in EXPORT_FIELDS if key not in data]
        if missing:
            raise ValueError(f"missing field(s): {', '.join(missing)}")

        exercise_name = data["exerciseName"]
        if not isinstance(exercise_name, str):
            raise ValueError("'exerciseName' must be a string")

        notes = data["notes"]
        if not isinstance(notes, str):
            raise ValueError("'notes' must be a string")

        weight = data["weight"]
        if isinstance(weight, bool) or not isinstance(weight, (int, float)):
            raise ValueError(f"'weight' must be a number, got {weight!r}")
        if not math.isfinite(weight):
            raise ValueError(f"'weight' must be a finite number, got {weight!r}")
        if weight < 0:
            raise ValueError(f"'weight' must be non-negative, got {weight}")

        reps = data["reps"]
        if isinstance(reps, float) and reps.is_integer():
            reps = int(reps)
        if isinstance(reps, bool) or not isinstance(reps, int):
            raise ValueError(f"'reps' must be an integer, got {reps!r}")
        if reps < 0:
            raise ValueError(f"'reps' must be non-negative, got {reps}")

        return cls(
            date=parse_export_date(data["date"]),
            exercise_name=exercise_name,
            weight=float(weight),
            reps=reps,
            notes=notes,
        )


def parse_export_date(value) -> datetime:
    """Parse an ISO 8601 timestamp into a naive local datetime."""
    if not isinstance(value, str):
        raise ValueError(f"'date' must be an ISO 8601 string, got {value!r}")
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        raise ValueError(f"cannot parse date {value!r}") from None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def export_lifts(records: Iterable[LiftRecord]) -> str:
    """Serialize the whole snapshot into one JSON document."""
    payload = [LiftExport.from_record(r).to_dict() for r in records]
    return json.dumps(payload, indent=2, allow_nan=False)


def decode_lifts(document: str | bytes) -> list[LiftExport]:
    """Parse and validate an import document without touching the store.

    Raises:
        LiftImportError: If the document is not valid JSON, is not an array,
            or any entry is malformed
    """
    try:
        payload = json.loads(document)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise LiftImportError(f"Error importing: file is not valid JSON ({e})") from e

    if not isinstance(payload, list):
        raise LiftImportError("Error importing: expected a JSON array of lifts")

    lifts = []
    for index, entry in enumerate(payload):
        try:
            lifts.append(LiftExport.from_dict(entry))
        except ValueError as e:
            raise LiftImportError(f"Error importing: entry {index}: {e}") from e
    return lifts


async def import_lifts(store: LiftStore, document: str | bytes) -> int:
    """Import a document into the store.

    Everything is validated before the first insert. If an insert fails part
    way, the lifts already added by this call are removed again.

    Returns:
        Number of lifts imported
    """
    new_records = [lift.to_record() for lift in decode_lifts(document)]

    inserted: list[LiftRecord] = []
    try:
        for record in new_records:
            await store.insert(record)
            inserted.append(record)
    except Exception as e:
        logger.warning(
            "Import failed after %d of %d lifts, rolling back",
            len(inserted),
            len(new_records),
        )
        for record in inserted:
            await store.delete(record)
        raise LiftImportError(f"Error importing: could not store lifts ({e})") from e

    logger.info("Imported %d lift(s)", len(inserted))
    return len(inserted)


def import_success_message(count: int) -> str:
    """Message shown after a successful import."""
    return f"Successfully imported {count} lifts."


def backup_filename(today: date | None = None) -> str:
    """Default export filename, e.g. MaxLift_Backup_11-27-2025.json."""
    today = today or date.today()
    return f"MaxLift_Backup_{today.strftime('%m-%d-%Y')}.json"
