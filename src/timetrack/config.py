"""Configuration for reading the time log."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from .paths import get_log_path

LOG_PATH_ENV = "TIMETRACK_FILE"


@dataclass(slots=True)
class TimetrackSettings:
    """Where the log lives and how to decode it."""

    log_path: Path
    encoding: str = "utf-8"

    @classmethod
    def resolve(
        cls,
        log_path: Optional[Path] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "TimetrackSettings":
        environ = os.environ if environ is None else environ
        if log_path is None:
            configured = environ.get(LOG_PATH_ENV)
            log_path = Path(configured).expanduser() if configured else get_log_path()
        return cls(log_path=Path(log_path))
