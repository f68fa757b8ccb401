"""State machine that turns log entries into per-day task registries."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum
from typing import Callable, Optional

from .errors import (
    InvalidTransition,
    NonContinuousTimestamp,
    TaskNameConflict,
    UnknownTaskReference,
)
from .models import PAUSE_TASK, RESERVED_TASKS, UNKNOWN_TASK, Task, TaskRegistry, WorkInterval
from .timelog import Event, Off, OffSnapshot, On, Rename, Resume, Start, Stop, TimelogEntry

logger = logging.getLogger(__name__)


class State(Enum):
    IDLE = "Idle"
    DAY_TRACKING = "DayTracking"
    TASK_ACTIVE = "TaskActive"


@dataclass(slots=True)
class _Timers:
    segment_start: Optional[datetime] = None
    segment_index: Optional[int] = None
    work_start: Optional[datetime] = None


class RegistryBuilder:
    """Consume entries in log order and build one :class:`TaskRegistry` per day.

    While idle, time runs into "Pause"; while clocked in without a task it
    runs into "n/n". A day is handed out by :meth:`add_entry` when the next
    ``on`` arrives, or by :meth:`finish` when the log runs out.
    """

    def __init__(self) -> None:
        self.state = State.IDLE
        self._reset()

    def _reset(self) -> None:
        self._tasks: list[Task] = []
        self._names: dict[str, int] = {}
        self._work_times: list[WorkInterval] = []
        self._last_index: Optional[int] = None
        self._timers = _Timers()

    @property
    def current_task(self) -> Optional[Task]:
        if self.state is not State.TASK_ACTIVE or self._timers.segment_index is None:
            return None
        return self._tasks[self._timers.segment_index]

    def snapshot(self) -> TaskRegistry:
        """Registry of the day in progress, without the open work interval."""
        return TaskRegistry(tuple(self._tasks), tuple(self._work_times), self._last_index)

    def add_entry(self, entry: TimelogEntry) -> Optional[TaskRegistry]:
        """Apply ``entry``; return the previous day's registry if ``entry`` starts a new one."""
        handler = _TRANSITIONS.get((self.state, type(entry.event)))
        if handler is None:
            raise InvalidTransition(entry, self.state)

        finished = None
        if isinstance(entry.event, On) and self._work_times:
            finished = self._detach(clear_active=True)

        previous = self.state
        self.state = handler(self, entry)
        logger.debug("%s: %s -> %s", entry, previous.value, self.state.value)
        return finished

    def finish(self, now: datetime) -> Optional[TaskRegistry]:
        """Close the day at ``now`` if still clocked in and return its registry.

        Production callers pass the current local time. The task that held the
        clock stays ``active`` in the result so callers can tell an unfinished
        day from one closed by ``off``.
        """
        snapshot = self.state is not State.IDLE
        if snapshot:
            if now.tzinfo is None:
                now = now.astimezone()
            now = now.replace(second=0, microsecond=0)
            self.add_entry(TimelogEntry(now, OffSnapshot()))

        if not self._work_times:
            self._reset()
            return None
        return self._detach(clear_active=not snapshot)

    def _detach(self, *, clear_active: bool) -> TaskRegistry:
        tasks = self._tasks
        if clear_active:
            tasks = [replace(task, active=False) for task in tasks]
        registry = TaskRegistry(tuple(tasks), tuple(self._work_times), self._last_index)
        self._reset()
        return registry

    # Transitions

    def _on(self, entry: TimelogEntry) -> State:
        self._timers.work_start = entry.time
        self._ensure_task(PAUSE_TASK)
        self._open_task(UNKNOWN_TASK, entry.time)
        return State.DAY_TRACKING

    def _resume(self, entry: TimelogEntry) -> State:
        self._require_open_day(entry)
        self._close_segment(entry)
        self._timers.work_start = entry.time
        self._open_task(UNKNOWN_TASK, entry.time)
        return State.DAY_TRACKING

    def _start_from_idle(self, entry: TimelogEntry) -> State:
        self._require_open_day(entry)
        name = self._task_name(entry)
        self._close_segment(entry)
        self._timers.work_start = entry.time
        self._open_task(name, entry.time)
        return State.TASK_ACTIVE

    def _start(self, entry: TimelogEntry) -> State:
        name = self._task_name(entry)
        self._close_segment(entry)
        self._open_task(name, entry.time)
        return State.TASK_ACTIVE

    def _stop(self, entry: TimelogEntry) -> State:
        self._close_segment(entry)
        self._open_task(UNKNOWN_TASK, entry.time)
        return State.DAY_TRACKING

    def _off(self, entry: TimelogEntry) -> State:
        self._close_segment(entry)
        self._open_task(PAUSE_TASK, entry.time)
        self._close_work_interval(entry.time)
        return State.IDLE

    def _off_snapshot(self, entry: TimelogEntry) -> State:
        self._close_segment(entry, keep_active=True)
        self._close_work_interval(entry.time)
        self._timers = _Timers()
        return State.IDLE

    def _rename(self, entry: TimelogEntry) -> State:
        event = entry.event
        if not isinstance(event, Rename):
            raise InvalidTransition(entry, self.state)
        if event.from_ is None:
            index = self._timers.segment_index
        else:
            index = self._names.get(event.from_)
            if index is None:
                raise UnknownTaskReference(event.from_)

        task = self._tasks[index]
        if event.to == task.name:
            return State.TASK_ACTIVE
        if task.name in RESERVED_TASKS:
            raise TaskNameConflict(task.name, "cannot be renamed")
        if event.to in RESERVED_TASKS:
            raise TaskNameConflict(event.to, "is reserved")
        if event.to in self._names:
            raise TaskNameConflict(event.to, "already exists")

        del self._names[task.name]
        self._names[event.to] = index
        self._tasks[index] = replace(task, name=event.to)
        return State.TASK_ACTIVE

    # Bookkeeping

    def _require_open_day(self, entry: TimelogEntry) -> None:
        # Nothing to resume before the first "on".
        if self._timers.segment_start is None:
            raise InvalidTransition(entry, self.state)

    def _task_name(self, entry: TimelogEntry) -> str:
        event = entry.event
        if not isinstance(event, Start):
            raise InvalidTransition(entry, self.state)
        if event.name in RESERVED_TASKS:
            raise TaskNameConflict(event.name, "is reserved")
        return event.name

    def _ensure_task(self, name: str) -> int:
        index = self._names.get(name)
        if index is None:
            index = len(self._tasks)
            self._names[name] = index
            self._tasks.append(Task(name))
        return index

    def _open_task(self, name: str, time: datetime) -> None:
        index = self._ensure_task(name)
        self._tasks[index] = replace(self._tasks[index], active=True)
        self._timers.segment_start = time
        self._timers.segment_index = index

    def _close_segment(self, entry: TimelogEntry, *, keep_active: bool = False) -> None:
        start = self._timers.segment_start
        index = self._timers.segment_index
        if entry.time < start:
            raise NonContinuousTimestamp(entry, start)

        task = self._tasks[index]
        self._tasks[index] = replace(
            task, duration=task.duration + (entry.time - start), active=keep_active
        )
        if task.name != PAUSE_TASK:
            self._last_index = index

    def _close_work_interval(self, time: datetime) -> None:
        start = self._timers.work_start
        self._timers.work_start = None
        if self._work_times and self._work_times[-1][1] == start:
            start = self._work_times.pop()[0]
        self._work_times.append((start, time))


_Transition = Callable[[RegistryBuilder, TimelogEntry], State]

_TRANSITIONS: dict[tuple[State, type[Event]], _Transition] = {
    (State.IDLE, On): RegistryBuilder._on,
    (State.IDLE, Resume): RegistryBuilder._resume,
    (State.IDLE, Start): RegistryBuilder._start_from_idle,
    (State.DAY_TRACKING, Off): RegistryBuilder._off,
    (State.DAY_TRACKING, OffSnapshot): RegistryBuilder._off_snapshot,
    (State.DAY_TRACKING, Start): RegistryBuilder._start,
    (State.TASK_ACTIVE, Stop): RegistryBuilder._stop,
    (State.TASK_ACTIVE, Off): RegistryBuilder._off,
    (State.TASK_ACTIVE, OffSnapshot): RegistryBuilder._off_snapshot,
    (State.TASK_ACTIVE, Start): RegistryBuilder._start,
    (State.TASK_ACTIVE, Rename): RegistryBuilder._rename,
}
