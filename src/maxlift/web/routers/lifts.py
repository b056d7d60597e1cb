"""Lift logging and history routes."""

from datetime import datetime

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from ...db.repositories import LiftRecordRepository
from ...services.history import build_history_view, delete_from_view
from ...services.lift_entry import exercise_suggestions, log_lift

router = APIRouter(prefix="/lifts", tags=["lifts"])


class LiftEntry(BaseModel):
    """Raw form input for a new lift."""

    exercise_name: str
    weight: str | float
    reps: str | int
    notes: str = ""
    date: datetime | None = None


class HistoryDeletion(BaseModel):
    """Rows to delete, as 0-based positions in the described view."""

    positions: list[int]
    search: str = ""
    group: bool = False


@router.get("")
async def list_lifts(search: str = "", group: bool = False):
    """History view, most recent first."""
    repo = LiftRecordRepository()
    view = build_history_view(await repo.all(), search_text=search, group_by_exercise=group)
    return view.to_dict()


@router.post("", status_code=201)
async def create_lift(entry: LiftEntry):
    """Log a new lift."""
    record = await log_lift(
        LiftRecordRepository(),
        entry.exercise_name,
        str(entry.weight),
        str(entry.reps),
        entry.notes,
        entry.date,
    )
    if record is None:
        raise HTTPException(
            status_code=422,
            detail="Need an exercise name, a non-negative weight and a whole number of reps",
        )
    return record.to_dict()


@router.delete("")
async def delete_lifts(deletion: HistoryDeletion):
    """Delete rows of a history view."""
    repo = LiftRecordRepository()
    view = build_history_view(
        await repo.all(), search_text=deletion.search, group_by_exercise=deletion.group
    )
    try:
        result = await delete_from_view(repo, view, deletion.positions)
    except IndexError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"deleted": [r.to_dict() for r in result.deleted]}


@router.get("/suggestions")
async def suggestions():
    """Exercise names to offer when logging."""
    return exercise_suggestions(await LiftRecordRepository().all())
