from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from datetime import time

from .models import END_ACTION, START_ACTION, Event

# "14:02:03 ALICE99 Start"
LINE_PATTERN = re.compile(r"(\d\d):(\d\d):(\d\d) (\S+) (\S+)", re.ASCII)
VALID_ACTIONS = frozenset({START_ACTION, END_ACTION})

_logger = logging.getLogger(__name__)


def parse_line(line: str | None, logger: logging.Logger | None = None) -> Event | None:
    """Parse one log line into an Event, or return None when the line is rejected.

    Malformed lines are dropped quietly. Lines with the right shape but an
    unknown action or an impossible clock value are dropped with a warning.
    """
    log = logger or _logger
    if not line:
        return None

    match = LINE_PATTERN.fullmatch(line)
    if match is None:
        return None

    hours, minutes, seconds, user_id, action = match.groups()

    if action not in VALID_ACTIONS:
        log.warning("Invalid action: action not set to either Start or End in line %r - skipped", line)
        return None

    try:
        time_of_day = time(int(hours), int(minutes), int(seconds))
    except ValueError:
        log.warning("Invalid time of day in line %r - skipped", line)
        return None

    return Event(time_of_day=time_of_day, user_id=user_id, action=action)


def parse_lines(lines: Iterable[str] | None, logger: logging.Logger | None = None) -> list[Event]:
    if lines is None:
        return []

    events: list[Event] = []
    for line in lines:
        event = parse_line(line, logger=logger)
        if event is not None:
            events.append(event)
    return events
