"""Helpers for locating the default time log."""

from __future__ import annotations

from pathlib import Path

from platformdirs import PlatformDirs


APP_NAME = "timetrack"
APP_AUTHOR = "timetrack"


def get_data_dir() -> Path:
    """Return the base directory for the time log."""
    dirs = PlatformDirs(appname=APP_NAME, appauthor=APP_AUTHOR, roaming=True)
    return Path(dirs.user_data_path)


def get_log_path() -> Path:
    return get_data_dir() / "timetrack.tsv"
