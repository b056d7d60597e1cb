"""Data access layer for maxlift."""

import logging
from datetime import datetime
from pathlib import Path

import aiosqlite

from ..models.lift_record import LiftRecord
from .engine import get_db_path

logger = logging.getLogger(__name__)


class LiftRecordRepository:
    """SQLite-backed lift store."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def all(self) -> list[LiftRecord]:
        """Every stored record, most recent first."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM lift_records ORDER BY date DESC"
            )
            rows = await cursor.fetchall()
            return [self._row_to_record(row) for row in rows]

    async def insert(self, record: LiftRecord) -> None:
        """Store a new record."""
        data = record.to_dict()
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """
                INSERT INTO lift_records
                (id, date, exercise_name, weight, reps, notes)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (
                    data["id"],
                    data["date"],
                    data["exercise_name"],
                    data["weight"],
                    data["reps"],
                    data["notes"],
                ),
            )
            await db.commit()

    async def delete(self, record: LiftRecord) -> None:
        """Delete a record."""
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute("DELETE FROM lift_records WHERE id = ?", (record.id,))
            await db.commit()

    def _row_to_record(self, row: aiosqlite.Row) -> LiftRecord:
        """Convert a database row to a LiftRecord."""
        return LiftRecord(
            id=row["id"],
            date=datetime.fromisoformat(row["date"]),
            exercise_name=row["exercise_name"],
            weight=row["weight"],
            reps=row["reps"],
            notes=row["notes"] or "",
        )


class SettingsRepository:
    """Repository for user preferences."""

    PR_LOOKBACK_YEARS = "pr_lookback_years"

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def get(self, key: str, default: str | None = None) -> str | None:
        """Get a raw setting value."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                "SELECT value FROM settings WHERE key = ?", (key,)
            )
            row = await cursor.fetchone()
            if row is None:
                return default
            return row[0]

    async def set(self, key: str, value: str) -> None:
        """Create or replace a setting."""
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """
                INSERT INTO settings (key, value) VALUES (?, ?)
                ON CONFLICT(key) DO UPDATE SET value = excluded.value
                """,
                (key, value),
            )
            await db.commit()

    async def clear(self) -> None:
        """Remove every stored preference."""
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute("DELETE FROM settings")
            await db.commit()

    async def get_pr_lookback_years(self) -> int:
        """Lookback window for PRs (0 = all time)."""
        value = await self.get(self.PR_LOOKBACK_YEARS)
        return int(value) if value is not None else 0

    async def set_pr_lookback_years(self, years: int) -> None:
        """Persist the PR lookback window."""
        if years < 0:
            raise ValueError(f"Lookback must be non-negative, got {years}")
        await self.set(self.PR_LOOKBACK_YEARS, str(years))
        logger.debug("PR lookback set to %d year(s)", years)
