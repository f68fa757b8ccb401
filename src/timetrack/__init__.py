"""Interpreter for tab separated time tracking logs."""

from .days import DayCollection, collect_days, open_log, parse_log_lines
from .errors import TimeLogError
from .models import PAUSE_TASK, UNKNOWN_TASK, Task, TaskRegistry
from .registry import RegistryBuilder, State
from .timelog import TimelogEntry, format_line, parse_line

__all__ = [
    "DayCollection",
    "PAUSE_TASK",
    "RegistryBuilder",
    "State",
    "Task",
    "TaskRegistry",
    "TimeLogError",
    "TimelogEntry",
    "UNKNOWN_TASK",
    "collect_days",
    "format_line",
    "open_log",
    "parse_line",
    "parse_log_lines",
]
