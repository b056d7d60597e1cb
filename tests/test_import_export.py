"""Tests for the JSON import/export codec."""

import asyncio
import json
from datetime import date, datetime

import pytest

from maxlift.db import InMemoryLiftStore
from maxlift.models.lift_record import LiftRecord
from maxlift.services.import_export import (
    EXPORT_FIELDS,
    LiftImportError,
    backup_filename,
    decode_lifts,
    export_lifts,
    import_lifts,
)


def entry(**overrides):
    data = {
        "date": "2025-11-27T18:30:00",
        "exerciseName": "Back Squat",
        "weight": 225,
        "reps": 5,
        "notes": "",
    }
    data.update(overrides)
    return data


class FailingStore(InMemoryLiftStore):
    """Store whose n-th insert blows up."""

    def __init__(self, fail_on: int):
        super().__init__()
        self.fail_on = fail_on
        self.inserts = 0

    async def insert(self, record):
        self.inserts += 1
        if self.inserts == self.fail_on:
            raise RuntimeError("disk full")
        await super().insert(record)


class TestExport:
    """Tests for export_lifts."""

    def test_fields_without_id(self, sample_lifts):
        payload = json.loads(export_lifts(sample_lifts))

        assert len(payload) == 4
        for item in payload:
            assert set(item) == set(EXPORT_FIELDS)
        assert payload[1] == {
            "date": "2025-11-01T18:00:00",
            "exerciseName": "Back Squat",
            "weight": 275,
            "reps": 1,
            "notes": "Belt",
        }

    def test_empty(self):
        assert json.loads(export_lifts([])) == []


class TestRoundTrip:
    """Tests for export followed by import."""

    def test_round_trip_gives_new_records(self, sample_lifts):
        document = export_lifts(sample_lifts)
        target = InMemoryLiftStore()

        count = asyncio.run(import_lifts(target, document))
        imported = asyncio.run(target.all())

        def key(r):
            return (r.date, r.exercise_name, r.weight, r.reps, r.notes)

        assert count == len(sample_lifts)
        assert sorted(map(key, imported)) == sorted(map(key, sample_lifts))
        assert not {r.id for r in imported} & {r.id for r in sample_lifts}


class TestDecode:
    """Tests for decode_lifts validation."""

    def test_valid(self):
        (lift,) = decode_lifts(json.dumps([entry(notes="Belt")]))
        assert lift.exercise_name == "Back Squat"
        assert lift.date == datetime(2025, 11, 27, 18, 30)
        assert lift.notes == "Belt"

    def test_accepts_bytes(self):
        assert len(decode_lifts(json.dumps([entry()]).encode())) == 1

    def test_ignores_unknown_keys(self):
        assert len(decode_lifts(json.dumps([entry(id="abc")]))) == 1

    def test_integral_float_reps(self):
        (lift,) = decode_lifts(json.dumps([entry(reps=5.0)]))
        assert lift.reps == 5

    def test_timezone_converted_to_naive(self):
        (lift,) = decode_lifts(json.dumps([entry(date="2025-11-27T18:30:00Z")]))
        assert lift.date.tzinfo is None

    @pytest.mark.parametrize(
        "document",
        [
            "not json",
            '{"date": "2025-11-27"}',
            json.dumps([entry(date="yesterday")]),
            json.dumps([entry(date=12345)]),
            json.dumps([entry(weight="heavy")]),
            json.dumps([entry(reps=2.5)]),
            json.dumps([entry(reps=True)]),
            json.dumps([entry(weight=-5)]),
            json.dumps([entry(exerciseName=None)]),
            json.dumps(["squat"]),
        ],
    )
    def test_malformed(self, document):
        with pytest.raises(LiftImportError):
            decode_lifts(document)

    def test_missing_field_named(self):
        data = entry()
        del data["notes"]
        with pytest.raises(LiftImportError, match="notes"):
            decode_lifts(json.dumps([entry(), data]))

    def test_error_names_entry(self):
        with pytest.raises(LiftImportError, match="entry 1"):
            decode_lifts(json.dumps([entry(), entry(reps="five")]))

    @pytest.mark.parametrize("literal", ["NaN", "Infinity", "-Infinity"])
    def test_non_finite_weight(self, literal):
        document = json.dumps([entry()]).replace("225", literal)

        with pytest.raises(LiftImportError, match="finite"):
            decode_lifts(document)


class TestImport:
    """Tests for import_lifts against a store."""

    def test_malformed_document_inserts_nothing(self, store):
        document = json.dumps([entry(), entry(weight="x")])

        with pytest.raises(LiftImportError):
            asyncio.run(import_lifts(store, document))
        assert len(asyncio.run(store.all())) == 4

    def test_non_finite_weight_inserts_nothing(self, store):
        document = json.dumps([entry(), entry(weight=1)]).replace(": 1,", ": NaN,")

        with pytest.raises(LiftImportError):
            asyncio.run(import_lifts(store, document))
        assert len(asyncio.run(store.all())) == 4

    def test_failed_insert_rolls_back(self):
        store = FailingStore(fail_on=3)
        document = json.dumps([entry(), entry(reps=3), entry(reps=1), entry(reps=2)])

        with pytest.raises(LiftImportError, match="disk full"):
            asyncio.run(import_lifts(store, document))
        assert asyncio.run(store.all()) == []

    def test_count(self):
        store = InMemoryLiftStore()
        document = json.dumps([entry(), entry(reps=3)])
        assert asyncio.run(import_lifts(store, document)) == 2


def test_backup_filename():
    assert backup_filename(date(2025, 11, 27)) == "MaxLift_Backup_11-27-2025.json"


def test_records_are_lift_records(sample_lifts):
    store = InMemoryLiftStore()
    asyncio.run(import_lifts(store, export_lifts(sample_lifts)))
    assert all(isinstance(r, LiftRecord) for r in asyncio.run(store.all()))
