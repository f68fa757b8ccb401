"""Errors raised while reading and interpreting a time log."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .registry import State
    from .timelog import TimelogEntry


class TimeLogError(Exception):
    """Base class for every failure while interpreting a log.

    ``line_number`` is filled in by the line reader once the failing line is
    known, so the message always points at the offending line.
    """

    def __init__(self, message: str, *, line_number: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.line_number = line_number

    def __str__(self) -> str:
        if self.line_number is None:
            return self.message
        return f"{self.message} (line {self.line_number})"


class LogReadError(TimeLogError):
    """The log could not be opened or read."""


class ParseError(TimeLogError):
    """A line is not a well-formed log entry."""


class BadTimestamp(ParseError):
    def __init__(self, text: str) -> None:
        super().__init__(f"could not parse time {text!r}")
        self.text = text


class UnknownEvent(ParseError):
    def __init__(self, keyword: str) -> None:
        super().__init__(f"unexpected event: {keyword}")
        self.keyword = keyword


class MissingArgument(ParseError):
    def __init__(self, keyword: str, argument: str) -> None:
        super().__init__(f"expected {argument} for {keyword!r}")
        self.keyword = keyword
        self.argument = argument


class TrailingContent(ParseError):
    def __init__(self, content: str) -> None:
        super().__init__(f"unexpected trailing content: {content}")
        self.content = content


class InvalidTransition(TimeLogError):
    def __init__(self, entry: "TimelogEntry", state: "State") -> None:
        super().__init__(f"invalid event {entry} in state {state.value}")
        self.entry = entry
        self.state = state


class NonContinuousTimestamp(TimeLogError):
    def __init__(self, entry: "TimelogEntry", segment_start: datetime) -> None:
        super().__init__(
            f"non-continuous timestamp: {entry} is earlier than "
            f"{segment_start.isoformat()}"
        )
        self.entry = entry
        self.segment_start = segment_start


class UnknownTaskReference(TimeLogError):
    def __init__(self, name: str) -> None:
        super().__init__(f"couldn't find task name {name!r}")
        self.name = name


class TaskNameConflict(TimeLogError):
    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"task name {name!r} {reason}")
        self.name = name
