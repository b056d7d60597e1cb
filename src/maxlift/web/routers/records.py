"""Personal record and reference chart routes."""

from fastapi import APIRouter, HTTPException, Query

from ...db.repositories import LiftRecordRepository, SettingsRepository
from ...services.percentage_chart import build_percentage_chart
from ...services.personal_records import summarize_exercise, summarize_personal_records

router = APIRouter(tags=["records"])


async def _lookback(lookback: int | None) -> int:
    if lookback is not None:
        return lookback
    return await SettingsRepository().get_pr_lookback_years()


@router.get("/records")
async def list_records(lookback: int | None = Query(None, ge=0)):
    """Personal records for every exercise."""
    years = await _lookback(lookback)
    summaries = summarize_personal_records(await LiftRecordRepository().all(), years)
    return {"lookback_years": years, "exercises": [s.to_dict() for s in summaries]}


@router.get("/records/{exercise_name}")
async def exercise_records(
    exercise_name: str,
    lookback: int | None = Query(None, ge=0),
    basis: int = 1,
):
    """Rep maxes and reference chart for one exercise."""
    years = await _lookback(lookback)
    summary = summarize_exercise(await LiftRecordRepository().all(), exercise_name, years)
    if summary is None:
        raise HTTPException(status_code=404, detail=f"No lifts logged for '{exercise_name}'")

    try:
        chart = build_percentage_chart(summary.chart_one_rep_max, basis)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    data = summary.to_dict()
    data["chart"] = [row.to_dict() for row in chart]
    return data


@router.get("/chart")
async def percentage_chart(one_rep_max: float = Query(..., ge=0), basis: int = 1):
    """Percentage chart for an arbitrary one-rep max."""
    try:
        rows = build_percentage_chart(one_rep_max, basis)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return [row.to_dict() for row in rows]
