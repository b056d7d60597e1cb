"""Tests for the SQLite repositories."""

import asyncio
from datetime import datetime

import pytest

from maxlift.db import LiftRecordRepository, LiftStore, SettingsRepository
from maxlift.models.lift_record import LiftRecord
from maxlift.services.import_export import export_lifts, import_lifts
from maxlift.services.maintenance import purge_placeholder_records


class TestLiftRecordRepository:
    """Tests for LiftRecordRepository."""

    def test_is_a_lift_store(self, temp_db_path):
        assert isinstance(LiftRecordRepository(temp_db_path), LiftStore)

    def test_insert(self, temp_db_path):
        repo = LiftRecordRepository(temp_db_path)
        lift = LiftRecord(
            exercise_name="Bench Press",
            weight=185.5,
            reps=3,
            date=datetime(2025, 11, 27, 18, 30),
            notes="Paused",
        )

        asyncio.run(repo.insert(lift))

        assert asyncio.run(repo.all()) == [lift]

    def test_empty(self, temp_db_path):
        assert asyncio.run(LiftRecordRepository(temp_db_path).all()) == []

    def test_all_most_recent_first(self, temp_db_path, sample_lifts):
        repo = LiftRecordRepository(temp_db_path)
        for lift in sample_lifts:
            asyncio.run(repo.insert(lift))

        dates = [r.date for r in asyncio.run(repo.all())]
        assert dates == sorted(dates, reverse=True)

    def test_delete(self, temp_db_path, sample_lifts):
        repo = LiftRecordRepository(temp_db_path)
        for lift in sample_lifts:
            asyncio.run(repo.insert(lift))

        asyncio.run(repo.delete(sample_lifts[0]))

        ids = {r.id for r in asyncio.run(repo.all())}
        assert sample_lifts[0].id not in ids
        assert len(ids) == 3

    def test_placeholder_sweep(self, temp_db_path, sample_lifts):
        repo = LiftRecordRepository(temp_db_path)
        asyncio.run(repo.insert(sample_lifts[0]))
        asyncio.run(repo.insert(LiftRecord(exercise_name="", weight=0, reps=0)))

        removed = asyncio.run(purge_placeholder_records(repo))

        assert len(removed) == 1
        assert asyncio.run(repo.all()) == [sample_lifts[0]]

    def test_import_export_round_trip(self, temp_db_path, sample_lifts):
        repo = LiftRecordRepository(temp_db_path)

        count = asyncio.run(import_lifts(repo, export_lifts(sample_lifts)))
        stored = asyncio.run(repo.all())

        assert count == 4
        assert {(r.exercise_name, r.weight, r.reps, r.date, r.notes) for r in stored} == {
            (r.exercise_name, r.weight, r.reps, r.date, r.notes) for r in sample_lifts
        }


class TestSettingsRepository:
    """Tests for SettingsRepository."""

    def test_lookback_default(self, temp_db_path):
        assert asyncio.run(SettingsRepository(temp_db_path).get_pr_lookback_years()) == 0

    def test_lookback_set_and_replace(self, temp_db_path):
        repo = SettingsRepository(temp_db_path)
        asyncio.run(repo.set_pr_lookback_years(2))
        asyncio.run(repo.set_pr_lookback_years(5))

        assert asyncio.run(repo.get_pr_lookback_years()) == 5

    def test_negative_lookback(self, temp_db_path):
        with pytest.raises(ValueError):
            asyncio.run(SettingsRepository(temp_db_path).set_pr_lookback_years(-1))

    def test_clear(self, temp_db_path):
        repo = SettingsRepository(temp_db_path)
        asyncio.run(repo.set("theme", "dark"))
        asyncio.run(repo.clear())

        assert asyncio.run(repo.get("theme")) is None
