"""Database engine setup and initialization."""

import os
from pathlib import Path

import aiosqlite

# Default data directory (override with MAXLIFT_DATA_DIR)
DATA_DIR = Path(
    os.environ.get("MAXLIFT_DATA_DIR", Path(__file__).parent.parent.parent.parent / "data")
)
DB_FILENAME = "maxlift.db"


def get_db_path(data_dir: Path | None = None) -> Path:
    """Get the database file path."""
    if data_dir is None:
        data_dir = DATA_DIR
    data_dir = Path(data_dir)
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir / DB_FILENAME


async def init_db(db_path: Path | None = None) -> None:
    """Initialize the database schema."""
    if db_path is None:
        db_path = get_db_path()

    async with aiosqlite.connect(db_path) as db:
        # Logged sets
        await db.execute("""
            CREATE TABLE IF NOT EXISTS lift_records (
                id TEXT PRIMARY KEY,
                date TEXT NOT NULL,
                exercise_name TEXT NOT NULL,
                weight REAL NOT NULL,
                reps INTEGER NOT NULL,
                notes TEXT DEFAULT ''
            )
        """)

        # Key/value preferences
        await db.execute("""
            CREATE TABLE IF NOT EXISTS settings (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL
            )
        """)

        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_lift_records_date
            ON lift_records(date)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_lift_records_exercise
            ON lift_records(exercise_name)
        """)

        await db.commit()
