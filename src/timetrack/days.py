"""Split a log into work days."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable, Iterable, Iterator, Optional

from .errors import LogReadError, TimeLogError
from .models import TaskRegistry
from .registry import RegistryBuilder
from .timelog import ParsedLine, TimelogEntry, parse_line

logger = logging.getLogger(__name__)

LogLine = tuple[int, ParsedLine]


def local_now() -> datetime:
    return datetime.now().astimezone()


@dataclass(frozen=True, slots=True)
class DayCollection:
    """A finished day together with the log lines it was built from."""

    registry: TaskRegistry
    lines: tuple[LogLine, ...]

    @property
    def start(self) -> Optional[datetime]:
        return self.registry.start_time

    @property
    def line_range(self) -> Optional[tuple[int, int]]:
        if not self.lines:
            return None
        return self.lines[0][0], self.lines[-1][0]


@contextmanager
def open_log(path: Path, encoding: str = "utf-8") -> Iterator[Iterator[str]]:
    """Open the log at ``path`` and yield its lines without line endings."""
    try:
        handle = open(path, encoding=encoding)
    except OSError as exc:
        raise LogReadError(f"could not read file {str(path)!r}: {exc.strerror}") from exc
    with handle:
        yield (line.rstrip("\r\n") for line in handle)


def parse_log_lines(lines: Iterable[str]) -> Iterator[LogLine]:
    """Parse ``lines``, numbering them from 1.

    The first unreadable or malformed line ends the iteration with an error
    carrying its line number.
    """
    iterator = iter(lines)
    line_number = 0
    while True:
        line_number += 1
        try:
            raw = next(iterator)
        except StopIteration:
            return
        except (OSError, UnicodeDecodeError) as exc:
            raise LogReadError(
                f"could not read line: {exc}", line_number=line_number
            ) from exc

        try:
            parsed = parse_line(raw)
        except TimeLogError as exc:
            exc.line_number = line_number
            raise
        yield line_number, parsed


def collect_days(
    lines: Iterable[str], *, clock: Callable[[], datetime] = local_now
) -> Iterator[DayCollection]:
    """Lazily yield one :class:`DayCollection` per work day in ``lines``.

    ``clock`` supplies the closing time of a day still open at the end of the
    log.
    """
    builder = RegistryBuilder()
    buffered: list[LogLine] = []
    line_number = 0

    for line_number, parsed in parse_log_lines(lines):
        if isinstance(parsed, TimelogEntry):
            try:
                finished = builder.add_entry(parsed)
            except TimeLogError as exc:
                exc.line_number = line_number
                raise
            if finished is not None:
                yield _flush(finished, buffered)
                buffered = []
        buffered.append((line_number, parsed))

    try:
        finished = builder.finish(clock())
    except TimeLogError as exc:
        exc.line_number = line_number
        raise
    if finished is not None:
        yield _flush(finished, buffered)


def _flush(registry: TaskRegistry, lines: list[LogLine]) -> DayCollection:
    day = DayCollection(registry, tuple(lines))
    logger.debug("Collected day starting %s from lines %s", day.start, day.line_range)
    return day
