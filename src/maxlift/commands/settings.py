"""Preference commands."""

import click

from ..db.repositories import SettingsRepository
from ..services.personal_records import LOOKBACK_CHOICES
from .base import async_command, echo_success, ensure_initialized


def describe_lookback(years: int) -> str:
    """Label used for a lookback choice."""
    if years == 0:
        return "All Time"
    if years == 1:
        return "Past Year"
    return f"Past {years} Years"


@click.group()
def settings():
    """View and change preferences."""
    pass


@settings.command()
@click.argument(
    "years",
    type=click.Choice([str(y) for y in LOOKBACK_CHOICES]),
    required=False,
)
@click.pass_context
@async_command
async def lookback(ctx: click.Context, years: str | None):
    """Show or set how far back PRs are calculated from (0 = all time)."""
    ensure_initialized(ctx)

    repo = SettingsRepository()

    if years is None:
        current = await repo.get_pr_lookback_years()
        click.echo(f"Calculate PRs from: {describe_lookback(current)}")
        return

    await repo.set_pr_lookback_years(int(years))
    echo_success(f"PRs will be calculated from: {describe_lookback(int(years))}")
