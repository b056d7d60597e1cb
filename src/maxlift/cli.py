"""CLI entry point for maxlift."""

import logging

import click

from .commands import (
    chart,
    export,
    history,
    import_data,
    init,
    log,
    prs,
    reset,
    serve,
    settings,
)
from .commands.base import run_startup_maintenance


@click.group()
@click.version_option(version="0.1.0", prog_name="maxlift")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def main(verbose: bool):
    """maxlift: a personal lift log.

    Log sets, track personal records with estimated one-rep maxes, and build
    percentage charts for programming your training.

    Example usage:

        # Initialize the project
        maxlift init

        # Log a lift
        maxlift log -e "Back Squat" -w 225 -r 5

        # See PRs and a reference chart
        maxlift prs list
        maxlift prs show "Back Squat"

        # Back up and restore
        maxlift export -o lifts.json
        maxlift import lifts.json
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    run_startup_maintenance()


# Register commands
main.add_command(init)
main.add_command(log)
main.add_command(history)
main.add_command(prs)
main.add_command(chart)
main.add_command(export)
main.add_command(import_data)
main.add_command(settings)
main.add_command(reset)
main.add_command(serve)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
