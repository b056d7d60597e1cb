"""Store protocol the analytics engine is injected with."""

from typing import Protocol, runtime_checkable

from ..models.lift_record import LiftRecord


@runtime_checkable
class LiftStore(Protocol):
    """Owner of the lift records.

    The engine never keeps records between calls; it asks the store for a
    snapshot and hands inserts and deletes back to it.
    """

    async def all(self) -> list[LiftRecord]:
        """Return every stored record."""
        ...

    async def insert(self, record: LiftRecord) -> None:
        """Store a new record."""
        ...

    async def delete(self, record: LiftRecord) -> None:
        """Remove a record (matched by id)."""
        ...


class InMemoryLiftStore:
    """List-backed store, handy for tests and one-off scripts."""

    def __init__(self, records: list[LiftRecord] | None = None):
        self._records: list[LiftRecord] = list(records or [])

    async def all(self) -> list[LiftRecord]:
        return list(self._records)

    async def insert(self, record: LiftRecord) -> None:
        self._records.append(record)

    async def delete(self, record: LiftRecord) -> None:
        self._records = [r for r in self._records if r.id != record.id]
