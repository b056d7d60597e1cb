"""Pytest configuration and fixtures."""

import asyncio
import tempfile
from datetime import datetime
from pathlib import Path

import pytest

from maxlift.db import InMemoryLiftStore, init_db
from maxlift.models.lift_record import LiftRecord


@pytest.fixture
def temp_db_path():
    """Create a temporary, initialized database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        db_path = Path(tmpdir) / "test.db"
        asyncio.run(init_db(db_path))
        yield db_path


@pytest.fixture
def now():
    """Fixed reference time for lookback calculations."""
    return datetime(2025, 11, 27, 12, 0)


@pytest.fixture
def sample_lifts():
    """A small training log across a few exercises."""
    return [
        LiftRecord(
            exercise_name="Back Squat",
            weight=225,
            reps=5,
            date=datetime(2025, 11, 20, 18, 0),
        ),
        LiftRecord(
            exercise_name="Back Squat",
            weight=275,
            reps=1,
            date=datetime(2025, 11, 1, 18, 0),
            notes="Belt",
        ),
        LiftRecord(
            exercise_name="Bench Press",
            weight=185,
            reps=3,
            date=datetime(2025, 11, 22, 18, 0),
        ),
        LiftRecord(
            exercise_name="Deadlift",
            weight=315,
            reps=15,
            date=datetime(2025, 11, 25, 18, 0),
        ),
    ]


@pytest.fixture
def store(sample_lifts):
    """In-memory store seeded with the sample lifts."""
    return InMemoryLiftStore(sample_lifts)
