"""Tests for store maintenance."""

import asyncio

from maxlift.db import InMemoryLiftStore
from maxlift.models.lift_record import LiftRecord
from maxlift.services.history import build_history_view
from maxlift.services.maintenance import delete_all_records, purge_placeholder_records
from maxlift.services.personal_records import summarize_personal_records


class TestPurgePlaceholderRecords:
    """Tests for the startup sweep."""

    def test_removes_only_placeholders(self, sample_lifts):
        placeholder = LiftRecord(exercise_name="Back Squat", weight=0, reps=0)
        bodyweight = LiftRecord(exercise_name="Pull-up", weight=0, reps=8)
        store = InMemoryLiftStore([*sample_lifts, placeholder, bodyweight])

        removed = asyncio.run(purge_placeholder_records(store))
        remaining = asyncio.run(store.all())

        assert removed == [placeholder]
        assert placeholder not in remaining
        assert bodyweight in remaining
        assert len(remaining) == 5

    def test_absent_from_queries_after_sweep(self, sample_lifts):
        placeholder = LiftRecord(exercise_name="Ghost Lift", weight=0, reps=0)
        store = InMemoryLiftStore([*sample_lifts, placeholder])

        asyncio.run(purge_placeholder_records(store))
        records = asyncio.run(store.all())

        assert placeholder not in build_history_view(records).records
        assert "Ghost Lift" not in [
            s.exercise_name for s in summarize_personal_records(records)
        ]

    def test_nothing_to_do(self, store):
        assert asyncio.run(purge_placeholder_records(store)) == []
        assert len(asyncio.run(store.all())) == 4


def test_delete_all_records(store):
    assert asyncio.run(delete_all_records(store)) == 4
    assert asyncio.run(store.all()) == []
