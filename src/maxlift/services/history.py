"""History search, ordering, grouping and deletion."""

import logging
from dataclasses import dataclass, field
from typing import Iterable

from ..db.base import LiftStore
from ..models.lift_record import LiftRecord

logger = logging.getLogger(__name__)


@dataclass
class HistoryView:
    """A rendered history list.

    ``records`` holds the rows in display order. In grouped mode that is the
    groups laid end to end, so row positions stay meaningful either way.
    """

    records: list[LiftRecord]
    groups: dict[str, list[LiftRecord]] | None = None
    search_text: str = ""

    @property
    def grouped(self) -> bool:
        return self.groups is not None

    def __len__(self) -> int:
        return len(self.records)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        data: dict = {
            "search_text": self.search_text,
            "records": [r.to_dict() for r in self.records],
        }
        if self.groups is not None:
            data["groups"] = {
                name: [r.to_dict() for r in lifts] for name, lifts in self.groups.items()
            }
        return data


@dataclass
class DeletionResult:
    """Records removed by a history deletion."""

    deleted: list[LiftRecord] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.deleted)


def matches_search(record: LiftRecord, search_text: str) -> bool:
    """Name contains the text (any case) or the rep count contains it.

    The rep check is on the decimal string, so "5" also hits 15 and 25.
    """
    if not search_text:
        return True
    return (
        search_text.casefold() in record.exercise_name.casefold()
        or search_text in str(record.reps)
    )


def search_lifts(records: Iterable[LiftRecord], search_text: str = "") -> list[LiftRecord]:
    """Filter records by search text, keeping input order."""
    return [r for r in records if matches_search(r, search_text)]


def sort_by_date(records: Iterable[LiftRecord]) -> list[LiftRecord]:
    """Most recent first."""
    return sorted(records, key=lambda r: r.date, reverse=True)


def group_lifts(records: Iterable[LiftRecord]) -> dict[str, list[LiftRecord]]:
    """Group by exercise name; groups alphabetical, inner order preserved."""
    groups: dict[str, list[LiftRecord]] = {}
    for record in records:
        groups.setdefault(record.exercise_name, []).append(record)
    return {name: groups[name] for name in sorted(groups)}


def build_history_view(
    records: Iterable[LiftRecord],
    search_text: str = "",
    group_by_exercise: bool = False,
) -> HistoryView:
    """Build the history list exactly as it is shown.

    Args:
        records: Current snapshot of the store
        search_text: Free-text filter (exercise name or reps)
        group_by_exercise: Partition the list by exercise name

    Returns:
        HistoryView whose ``records`` are the rows in display order
    """
    visible = [r for r in records if not r.is_placeholder]
    ordered = sort_by_date(search_lifts(visible, search_text))

    if not group_by_exercise:
        return HistoryView(records=ordered, search_text=search_text)

    groups = group_lifts(ordered)
    rows = [record for lifts in groups.values() for record in lifts]
    return HistoryView(records=rows, groups=groups, search_text=search_text)


def resolve_positions(view: HistoryView, positions: Iterable[int]) -> list[LiftRecord]:
    """Map 0-based row positions in ``view`` to records.

    Duplicates collapse to one record. Any out-of-range position fails the
    whole lookup so nothing is deleted by mistake.
    """
    resolved: list[LiftRecord] = []
    seen: set[int] = set()
    for position in positions:
        if position < 0 or position >= len(view.records):
            raise IndexError(
                f"Position {position} is outside the history view ({len(view.records)} rows)"
            )
        if position in seen:
            continue
        seen.add(position)
        resolved.append(view.records[position])
    return resolved


async def delete_from_view(
    store: LiftStore, view: HistoryView, positions: Iterable[int]
) -> DeletionResult:
    """Delete the records shown at ``positions`` of ``view`` from the store."""
    targets = resolve_positions(view, positions)

    result = DeletionResult()
    for record in targets:
        await store.delete(record)
        result.deleted.append(record)

    logger.info("Deleted %d lift(s) from history", result.count)
    return result
