"""
CLI interface for the water usage logger.

Prompts for today's usage, saves it and prints the comparisons.
"""

import logging
import sys
from datetime import date
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from water_usage.config.loader import ReportingConfig, load_reporting_config
from water_usage.core.reporting import (
    DailyComparison,
    WeeklySummary,
    daily_comparison,
    weekly_change
)
from water_usage.core.validation import parse_litres
from water_usage.storage.repository import UsageRepository

app = typer.Typer(add_completion=False)
console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False, soft_wrap=True)

logger = logging.getLogger(__name__)

EXIT_CODE_OK = 0
EXIT_CODE_FAIL = 1

PROMPT = "How many litres did you use today? (whole number, e.g. 50): "

# Unrecognised arguments are ignored rather than rejected.
CONTEXT_SETTINGS = {
    "allow_extra_args": True,
    "ignore_unknown_options": True,
    "help_option_names": ["-h", "--help"],
}


def configure_logging(verbose: bool = False) -> None:
    """Send log records to stderr, at DEBUG when ``verbose`` is set."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _today() -> date:
    return date.today()


def _prompt_for_usage() -> str:
    try:
        return console.input(PROMPT)
    except EOFError:
        return ""


@app.command(context_settings=CONTEXT_SETTINGS)
def main(
    data_file: Optional[str] = typer.Option(
        None,
        "--data-file",
        envvar="WATER_USAGE_DATA_FILE",
        help="JSON file the daily entries are stored in"
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        envvar="WATER_USAGE_CONFIG",
        help="YAML file overriding the baseline averages"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log debug output to stderr"
    )
):
    """
    Log today's water usage in litres and compare it with average usage.

    Input must be a whole number (e.g. 50). On Mondays a weekly change
    summary compares last week's total with the week before.
    """
    configure_logging(verbose)
    try:
        config = load_reporting_config(config_path) if config_path else ReportingConfig()
        repository = UsageRepository(data_file)
        repository.ensure_data_file()

        amount = parse_litres(_prompt_for_usage())
        today = _today()
        record = repository.upsert(today, amount)
        logger.debug("Saved %.1f L for %s to %s", record.amount, today, repository.data_path)

        _display_daily_comparison(daily_comparison(record.amount, config))

        summary = weekly_change(today, repository)
        if summary is not None:
            _display_weekly_summary(summary)
    except Exception as e:
        err_console.print(f"[red]Error:[/] {escape(str(e))}")
        sys.exit(EXIT_CODE_FAIL)

    sys.exit(EXIT_CODE_OK)


def _display_daily_comparison(comparison: DailyComparison):
    console.print("\nToday's log saved.")
    for line in comparison.lines():
        console.print(f"  {line}")


def _display_weekly_summary(summary: WeeklySummary):
    console.print("\nWeekly change (last week vs week before):")
    for line in summary.lines():
        console.print(f"  {line}")


if __name__ == "__main__":
    app()
