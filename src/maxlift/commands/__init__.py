"""CLI commands for maxlift."""

from .chart import chart
from .export import export
from .history import history
from .import_data import import_data
from .init import init
from .log import log
from .prs import prs
from .reset import reset
from .serve import serve
from .settings import settings

__all__ = [
    "chart",
    "export",
    "history",
    "import_data",
    "init",
    "log",
    "prs",
    "reset",
    "serve",
    "settings",
]
