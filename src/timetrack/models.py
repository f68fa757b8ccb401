"""Domain models for a reconstructed work day."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from .errors import UnknownTaskReference

PAUSE_TASK = "Pause"
UNKNOWN_TASK = "n/n"
RESERVED_TASKS = frozenset((PAUSE_TASK, UNKNOWN_TASK))

WorkInterval = tuple[datetime, datetime]


@dataclass(frozen=True, slots=True)
class Task:
    """Time accumulated under one task name during a day."""

    name: str
    duration: timedelta = timedelta(0)
    active: bool = False

    @property
    def duration_seconds(self) -> float:
        return self.duration.total_seconds()


@dataclass(frozen=True, slots=True)
class TaskRegistry:
    """Tasks and clocked-in intervals of a single work day.

    ``tasks`` keep the order in which they were first referenced, so "Pause"
    and "n/n" come first. ``work_times`` never contains two intervals where
    one ends exactly when the next begins.
    """

    tasks: tuple[Task, ...] = ()
    work_times: tuple[WorkInterval, ...] = ()
    last_active_index: Optional[int] = None

    @property
    def work_duration(self) -> timedelta:
        return sum((end - start for start, end in self.work_times), timedelta(0))

    @property
    def start_time(self) -> Optional[datetime]:
        if not self.work_times:
            return None
        return self.work_times[0][0]

    @property
    def active_task(self) -> Optional[Task]:
        return next((task for task in self.tasks if task.active), None)

    @property
    def last_active(self) -> Optional[Task]:
        """The named task that held the clock last, if the day did not end on "n/n"."""
        if self.last_active_index is None:
            return None
        task = self.tasks[self.last_active_index]
        if task.name in RESERVED_TASKS:
            return None
        return task

    def get(self, name: str) -> Task:
        for task in self.tasks:
            if task.name == name:
                return task
        raise UnknownTaskReference(name)

    def __contains__(self, name: object) -> bool:
        return any(task.name == name for task in self.tasks)
