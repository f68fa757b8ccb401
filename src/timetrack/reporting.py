"""Simple reporting utilities for CLI output."""

from __future__ import annotations

from collections import deque
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Callable, Iterator, Optional, TextIO

from .days import DayCollection, collect_days, local_now, open_log
from .models import Task, TaskRegistry


class SummaryPrinter:
    """Render human-readable reports of a time log."""

    def __init__(
        self,
        log_path: Path,
        *,
        encoding: str = "utf-8",
        clock: Callable[[], datetime] = local_now,
        out: Optional[TextIO] = None,
    ) -> None:
        self.log_path = Path(log_path)
        self.encoding = encoding
        self.clock = clock
        self.out = out

    @contextmanager
    def _days(self) -> Iterator[Iterator[DayCollection]]:
        with open_log(self.log_path, self.encoding) as lines:
            yield collect_days(lines, clock=self.clock)

    def _last_registries(self, count: int) -> list[TaskRegistry]:
        with self._days() as days:
            return list(deque((day.registry for day in days), maxlen=count))

    def _emit(self, lines: list[str]) -> None:
        for line in lines:
            print(line, file=self.out)

    def print_tasks(self) -> None:
        """Print the task table of the most recent day."""
        for registry in self._last_registries(1):
            self._emit(render_tasks(registry))

    def print_summaries(self, last: Optional[int] = None) -> None:
        """Print a summary per day, for all days or only the ``last`` ones."""
        if last is None:
            with self._days() as days:
                for day in days:
                    self._print_summary(day.registry)
            return
        for registry in self._last_registries(last):
            self._print_summary(registry)

    def _print_summary(self, registry: TaskRegistry) -> None:
        self._emit(render_day_summary(registry))
        self._emit([""])

    def print_last_active(self) -> None:
        for registry in self._last_registries(1):
            task = registry.last_active
            if task is not None:
                self._emit([task.name])


def render_tasks(registry: TaskRegistry) -> list[str]:
    lines = ["#\ttime\ttask name"]
    # "Pause" always comes first and is not work.
    for number, task in enumerate(registry.tasks[1:], start=1):
        lines.append(f"{number}\t{format_task(task)}")
    lines.append(f"\t{format_hours_minutes(registry.work_duration.total_seconds())}\ttotal work time")
    return lines


def render_day_summary(registry: TaskRegistry) -> list[str]:
    start = registry.start_time
    lines = [f"=== {start.isoformat() if start else '(no work time)'}"]
    lines.extend(format_task(task) for task in registry.tasks)
    lines.append(f"-- Work time: {format_hours_minutes(registry.work_duration.total_seconds())}")
    lines.append("-- Work hours:")
    lines.append("on   \toff  \ttime \tpause")

    last_off: Optional[datetime] = None
    for on, off in registry.work_times:
        worked = format_hours_minutes((off - on).total_seconds())
        pause = "" if last_off is None else format_hours_minutes((on - last_off).total_seconds())
        last_off = off
        lines.append(f"{on:%H:%M}\t{off:%H:%M}\t{worked}\t{pause}")
    return lines


def format_task(task: Task) -> str:
    marker = "\t*" if task.active else ""
    return f"{format_duration(task.duration_seconds)}\t{task.name}{marker}"


def format_duration(seconds: float) -> str:
    total_seconds = int(round(seconds))
    hours, remainder = divmod(total_seconds, 3600)
    minutes, secs = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


def format_hours_minutes(seconds: float) -> str:
    hours, minutes = divmod(int(seconds) // 60, 60)
    return f"{hours:02d}:{minutes:02d}"
