"""Sample logs shared by the tests. Fields are written with ``|`` for tabs."""

from datetime import datetime, timedelta

from timetrack.timelog import parse_time


def lines(text):
    return [line.replace("|", "\t") for line in text.splitlines()]


def at(text):
    return parse_time(text)


def minutes(value):
    return timedelta(minutes=value)


NOW = datetime.fromisoformat("2019-11-30T18:00:00+01:00")

BLANK_LINES = ["", ""]

COMMENT_LINE = ["# This is a comment"]

DAY_1 = lines("""\
# First line comment
2019-11-21T07:30+0100|on
2019-11-21T07:30+0100|start|BACKEND-errors
2019-11-21T09:45+0100|off
2019-11-21T10:20+0100|start|BACKEND-input-parsing
2019-11-21T10:32+0100|rename|BACKEND-error-handling|BACKEND-errors
2019-11-21T11:40+0100|off
2019-11-21T13:00+0100|start|BACKEND-input-parsing
2019-11-21T17:00+0100|off
""")

DAY_2 = lines("""\
2019-11-22T07:00+0100|on
2019-11-22T07:02+0100|start|BACKEND-error-handling
2019-11-22T07:27+0100|start|BACKEND-input
2019-11-22T07:30+0100|rename|BACKEND-input-parsing
2019-11-22T09:14+0100|off
2019-11-22T09:20+0100|start|BACKEND-input-parsing
2019-11-22T09:32+0100|off

# Pause

2019-11-22T09:49+0100|start|BACKEND-input-parsing
2019-11-22T10:40+0100|off
2019-11-22T11:06+0100|start|BACKEND-input-parsing
2019-11-22T11:43+0100|start|Daily
2019-11-22T11:51+0100|start|BACKEND-error-handling
2019-11-22T12:48+0100|off
2019-11-22T13:54+0100|resume
2019-11-22T13:58+0100|start|CHORE - instable tests
2019-11-22T14:06+0100|off
2019-11-22T14:06+0100|start|CHORE - instable tests
2019-11-22T15:24+0100|off
""")

DAY_3 = lines("""\
2019-11-26T07:00+0100|on
2019-11-26T07:10+0100|start|FRONTEND - error handling
2019-11-26T07:34+0100|start|BACKEND - query endpoint
2019-11-26T07:48+0100|off
2019-11-26T08:12+0100|resume
2019-11-26T08:14+0100|start|time logging
2019-11-26T08:20+0100|start|CHORE - build system
2019-11-26T09:19+0100|start|Team discussion
2019-11-26T09:30+0100|start|BACKEND - query endpoint
2019-11-26T09:51+0100|off
2019-11-26T10:43+0100|resume
2019-11-26T10:58+0100|start|time logging
2019-11-26T11:10+0100|start|BACKEND - query endpoint
2019-11-26T11:23+0100|start|BACKEND - integration tests
2019-11-26T11:30+0100|start|Daily
2019-11-26T11:45+0100|off
2019-11-26T12:28+0100|start|BACKEND - integration tests
2019-11-26T13:26+0100|start|backlog
2019-11-26T13:32+0100|start|CHORE - build system
2019-11-26T13:56+0100|stop
2019-11-26T14:01+0100|start|backlog
2019-11-26T15:57+0100|stop
2019-11-26T16:13+0100|start|UI JWT timeout
2019-11-26T16:30+0100|start|Bugfix Export
2019-11-26T16:51+0100|start|UI JWT timeout
2019-11-26T17:36+0100|start|BACKEND - query endpoint
2019-11-26T17:53+0100|off
""")

DAY_4 = lines("""\
2019-11-28T08:55+0100|on
2019-11-28T09:08+0100|start|Bugfix Export
2019-11-28T09:30+0100|start|Sprint planning
2019-11-28T10:15+0100|start|CHORE - Build system
2019-11-28T10:52+0100|start|Bugfix Export
2019-11-28T10:56+0100|stop
2019-11-28T11:07+0100|start|BACKEND - logging framework
2019-11-28T11:34+0100|start|FRONTEND - translations
2019-11-28T11:45+0100|start|Daily
2019-11-28T12:05+0100|off
2019-11-28T12:53+0100|resume
2019-11-28T12:58+0100|start|Sprint Retro
2019-11-28T14:43+0100|start|BACKEND - logging framework
2019-11-28T15:24+0100|start|FRONTEND - translations
2019-11-28T15:31+0100|stop
2019-11-28T15:40+0100|start|FRONTEND - release notes
2019-11-28T16:21+0100|start|BACKEND - logging framework
2019-11-28T17:52+0100|stop
2019-11-28T18:07+0100|off
""")
