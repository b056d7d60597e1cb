"""Lift analytics services."""

from .history import HistoryView, build_history_view, delete_from_view
from .import_export import LiftImportError, decode_lifts, export_lifts, import_lifts
from .lift_entry import exercise_suggestions, log_lift, parse_lift_entry
from .maintenance import delete_all_records, purge_placeholder_records
from .one_rep_max import RepRangeError, estimated_one_rep_max, is_estimable
from .percentage_chart import PercentageRow, build_percentage_chart, chart_for_lift
from .personal_records import (
    ExerciseRecords,
    OneRepMaxSource,
    summarize_exercise,
    summarize_personal_records,
)

__all__ = [
    "build_history_view",
    "build_percentage_chart",
    "chart_for_lift",
    "decode_lifts",
    "delete_all_records",
    "delete_from_view",
    "estimated_one_rep_max",
    "ExerciseRecords",
    "exercise_suggestions",
    "export_lifts",
    "HistoryView",
    "import_lifts",
    "is_estimable",
    "LiftImportError",
    "log_lift",
    "OneRepMaxSource",
    "parse_lift_entry",
    "PercentageRow",
    "purge_placeholder_records",
    "RepRangeError",
    "summarize_exercise",
    "summarize_personal_records",
]
