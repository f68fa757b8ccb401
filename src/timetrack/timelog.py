"""Log line format: one timestamped event per tab separated line.

```
2019-11-21T07:30+0100	on
2019-11-21T07:30+0100	start	BACKEND-errors
2019-11-21T10:32+0100	rename	BACKEND-error-handling	BACKEND-errors
2019-11-21T17:00+0100	off
```

Blank lines and lines starting with ``#`` are kept as :class:`Ignored`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar, Optional, Union

from .errors import BadTimestamp, MissingArgument, TrailingContent, UnknownEvent

TIME_FMT = "%Y-%m-%dT%H:%M%z"

_TIME_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}[+-]\d{4}")


@dataclass(frozen=True, slots=True)
class Event:
    keyword: ClassVar[str] = ""

    def args(self) -> tuple[str, ...]:
        return ()


@dataclass(frozen=True, slots=True)
class On(Event):
    keyword: ClassVar[str] = "on"


@dataclass(frozen=True, slots=True)
class Off(Event):
    keyword: ClassVar[str] = "off"


@dataclass(frozen=True, slots=True)
class OffSnapshot(Event):
    """Closes a day when the log ends while still clocked in."""

    keyword: ClassVar[str] = "off (end of log)"


@dataclass(frozen=True, slots=True)
class Resume(Event):
    keyword: ClassVar[str] = "resume"


@dataclass(frozen=True, slots=True)
class Cancel(Event):
    keyword: ClassVar[str] = "cancel"


@dataclass(frozen=True, slots=True)
class Start(Event):
    keyword: ClassVar[str] = "start"

    name: str

    def args(self) -> tuple[str, ...]:
        return (self.name,)


@dataclass(frozen=True, slots=True)
class Stop(Event):
    keyword: ClassVar[str] = "stop"


@dataclass(frozen=True, slots=True)
class Rename(Event):
    """Rename ``from_`` (or the current task when omitted) to ``to``."""

    keyword: ClassVar[str] = "rename"

    to: str
    from_: Optional[str] = None

    def args(self) -> tuple[str, ...]:
        if self.from_ is None:
            return (self.to,)
        return (self.to, self.from_)


_SIMPLE_EVENTS: dict[str, Event] = {
    event.keyword: event for event in (On(), Off(), Resume(), Cancel(), Stop())
}


@dataclass(frozen=True, slots=True)
class TimelogEntry:
    time: datetime
    event: Event

    def __str__(self) -> str:
        return " ".join((self.time.strftime(TIME_FMT), self.event.keyword, *self.event.args()))


@dataclass(frozen=True, slots=True)
class Ignored:
    """A blank or comment line."""

    text: str


ParsedLine = Union[TimelogEntry, Ignored]


def parse_time(text: str) -> datetime:
    if not _TIME_PATTERN.fullmatch(text):
        raise BadTimestamp(text)
    try:
        return datetime.strptime(text, TIME_FMT)
    except ValueError as exc:
        raise BadTimestamp(text) from exc


def parse_line(line: str) -> ParsedLine:
    """Parse one log line into an entry, or :class:`Ignored` for blanks and comments."""
    line = line.rstrip("\r\n")
    if not line.strip() or line.startswith("#"):
        return Ignored(line)

    fields = line.split("\t")
    time = parse_time(fields[0])
    if len(fields) < 2:
        raise MissingArgument("", "event keyword")

    keyword = fields[1]
    rest = fields[2:]
    if keyword in _SIMPLE_EVENTS:
        event = _SIMPLE_EVENTS[keyword]
    elif keyword == Start.keyword:
        if not rest or not rest[0]:
            raise MissingArgument(keyword, "task name")
        event = Start(rest.pop(0))
    elif keyword == Rename.keyword:
        if not rest or not rest[0]:
            raise MissingArgument(keyword, "target task name")
        to = rest.pop(0)
        from_ = rest.pop(0) if rest else None
        event = Rename(to, from_ or None)
    else:
        raise UnknownEvent(keyword)

    extra = "".join(rest)
    if extra:
        raise TrailingContent(extra)
    return TimelogEntry(time, event)


def format_line(entry: TimelogEntry) -> str:
    """Render ``entry`` the way it is written in the log."""
    return "\t".join((entry.time.strftime(TIME_FMT), entry.event.keyword, *entry.event.args()))
