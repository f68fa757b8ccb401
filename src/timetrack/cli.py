"""Command-line interface for the time log interpreter."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from .config import TimetrackSettings
from .errors import TimeLogError
from .reporting import SummaryPrinter

app = typer.Typer(help="Summarize a tab separated time tracking log.")

logger = logging.getLogger(__name__)

_FILE_OPTION_HELP = "Location of the time log. Defaults to $TIMETRACK_FILE or the user data directory."


@app.callback(no_args_is_help=True)
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logs.")) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def _printer(log_path: Optional[Path]) -> SummaryPrinter:
    settings = TimetrackSettings.resolve(log_path)
    logger.debug("Reading time log %s", settings.log_path)
    return SummaryPrinter(settings.log_path, encoding=settings.encoding)


def _fail(exc: TimeLogError) -> typer.Exit:
    typer.echo(f"Error: {exc}", err=True)
    return typer.Exit(code=1)


@app.command()
def tasks(
    log_path: Optional[Path] = typer.Option(
        None, "--file", "-f", path_type=Path, help=_FILE_OPTION_HELP
    ),
) -> None:
    """Print the tasks of the most recent day."""
    try:
        _printer(log_path).print_tasks()
    except TimeLogError as exc:
        raise _fail(exc) from exc


@app.command()
def summary(
    log_path: Optional[Path] = typer.Option(
        None, "--file", "-f", path_type=Path, help=_FILE_OPTION_HELP
    ),
    last: Optional[int] = typer.Option(
        None,
        "--last",
        "-n",
        min=1,
        help="Only summarize the last N days. Defaults to all days.",
    ),
) -> None:
    """Print tasks, work time and work hours per day."""
    try:
        _printer(log_path).print_summaries(last=last)
    except TimeLogError as exc:
        raise _fail(exc) from exc


@app.command("last-active")
def last_active(
    log_path: Optional[Path] = typer.Option(
        None, "--file", "-f", path_type=Path, help=_FILE_OPTION_HELP
    ),
) -> None:
    """Print the name of the task worked on last."""
    try:
        _printer(log_path).print_last_active()
    except TimeLogError as exc:
        raise _fail(exc) from exc
