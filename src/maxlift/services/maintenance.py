"""Store maintenance: startup placeholder sweep and full reset."""

import logging

from ..db.base import LiftStore
from ..models.lift_record import LiftRecord

logger = logging.getLogger(__name__)


async def purge_placeholder_records(store: LiftStore) -> list[LiftRecord]:
    """Delete every zero-weight, zero-rep record.

    Run once at process start, before anything reads the store.

    Returns:
        The records that were removed
    """
    placeholders = [r for r in await store.all() if r.is_placeholder]
    for record in placeholders:
        await store.delete(record)

    if placeholders:
        logger.info("Removed %d placeholder lift(s)", len(placeholders))
    return placeholders


async def delete_all_records(store: LiftStore) -> int:
    """Delete every record in the store. Returns the number removed."""
    records = await store.all()
    for record in records:
        await store.delete(record)
    logger.info("Deleted all %d lift(s)", len(records))
    return len(records)
