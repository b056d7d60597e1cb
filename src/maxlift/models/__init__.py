"""Data models for maxlift."""

from .lift_record import LiftRecord, new_lift_id

__all__ = [
    "LiftRecord",
    "new_lift_id",
]
