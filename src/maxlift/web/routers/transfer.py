"""Import/export routes."""

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import Response

from ...db.repositories import LiftRecordRepository
from ...services.import_export import (
    LiftImportError,
    backup_filename,
    export_lifts,
    import_lifts,
    import_success_message,
)

router = APIRouter(tags=["transfer"])


@router.get("/export")
async def export():
    """Download every lift as a JSON document."""
    content = export_lifts(await LiftRecordRepository().all())
    return Response(
        content=content,
        media_type="application/json",
        headers={"Content-Disposition": f'attachment; filename="{backup_filename()}"'},
    )


@router.post("/import")
async def import_document(request: Request):
    """Import a JSON document sent as the request body."""
    document = await request.body()
    try:
        count = await import_lifts(LiftRecordRepository(), document)
    except LiftImportError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return {"imported": count, "message": import_success_message(count)}
