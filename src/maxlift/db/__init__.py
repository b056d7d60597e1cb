"""Database layer for maxlift."""

from .base import InMemoryLiftStore, LiftStore
from .engine import get_db_path, init_db
from .repositories import LiftRecordRepository, SettingsRepository

__all__ = [
    "get_db_path",
    "init_db",
    "InMemoryLiftStore",
    "LiftRecordRepository",
    "LiftStore",
    "SettingsRepository",
]
