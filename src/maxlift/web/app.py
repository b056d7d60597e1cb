"""FastAPI application for the maxlift JSON API."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from ..db.engine import get_db_path, init_db
from ..db.repositories import LiftRecordRepository
from ..services.maintenance import purge_placeholder_records
from .routers import lifts, records, transfer

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: make sure the schema exists and sweep placeholder lifts."""
    db_path = get_db_path()
    await init_db(db_path)
    removed = await purge_placeholder_records(LiftRecordRepository(db_path))
    logger.debug("Startup sweep removed %d placeholder lift(s)", len(removed))
    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="maxlift",
        description="Personal lift log with PRs and percentage charts",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.include_router(lifts.router)
    app.include_router(records.router)
    app.include_router(transfer.router)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": "0.1.0"}

    return app
