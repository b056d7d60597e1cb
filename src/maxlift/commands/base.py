"""Shared CLI utilities."""

import asyncio
from functools import wraps
from pathlib import Path

import click

from ..db import engine
from ..db.repositories import LiftRecordRepository
from ..models.lift_record import LiftRecord
from ..services.maintenance import purge_placeholder_records


def async_command(f):
    """Decorator to run async Click commands."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        return asyncio.run(f(*args, **kwargs))

    return wrapper


def get_data_dir() -> Path:
    """Get the data directory path."""
    return Path(engine.DATA_DIR)


def ensure_initialized(ctx: click.Context) -> None:
    """Ensure the database is initialized."""
    db_path = get_data_dir() / engine.DB_FILENAME
    if not db_path.exists():
        click.echo(
            click.style("Error: ", fg="red")
            + "Project not initialized. Run 'maxlift init' first."
        )
        ctx.exit(1)


def run_startup_maintenance() -> int:
    """Sweep placeholder lifts once per process, if there is a database."""
    db_path = get_data_dir() / engine.DB_FILENAME
    if not db_path.exists():
        return 0
    removed = asyncio.run(purge_placeholder_records(LiftRecordRepository(db_path)))
    return len(removed)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.echo(click.style("[OK] ", fg="green") + message)


def echo_error(message: str) -> None:
    """Print an error message."""
    click.echo(click.style("[ERROR] ", fg="red") + message)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(click.style("[INFO] ", fg="blue") + message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.echo(click.style("[WARN] ", fg="yellow") + message)


def format_weight(weight: float) -> str:
    """Whole pounds, as the lists show them."""
    return f"{int(weight)} lbs"


def format_lift_row(position: int, lift: LiftRecord) -> list[str]:
    """Table row for a history entry (1-based position)."""
    return [
        str(position),
        lift.date.strftime("%Y-%m-%d"),
        lift.exercise_name,
        format_weight(lift.weight),
        f"{lift.reps} reps",
        lift.notes,
    ]


def format_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """Format data as a simple table."""
    if not rows:
        return ""

    # Calculate column widths
    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))

    lines = []

    lines.append("".join(h.ljust(widths[i] + padding) for i, h in enumerate(headers)).rstrip())
    lines.append("".join("-" * w + " " * padding for w in widths).rstrip())

    for row in rows:
        lines.append(
            "".join(str(cell).ljust(widths[i] + padding) for i, cell in enumerate(row)).rstrip()
        )

    return "\n".join(lines)
