from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from datetime import time

from .models import Event, Session, UserResult
from .parser import parse_lines
from .sessions import reconstruct_sessions

_logger = logging.getLogger(__name__)


def observation_window(events: Sequence[Event]) -> tuple[time, time] | None:
    """Return the first and last event times of the whole log, not per user."""
    if not events:
        return None
    return events[0].time_of_day, events[-1].time_of_day


def close_open_sessions(
    sessions_by_user: dict[str, list[Session]],
    window: tuple[time, time],
) -> None:
    first_time, last_time = window
    for sessions in sessions_by_user.values():
        for session in sessions:
            # Started before the log began.
            if session.start_time is None:
                session.start_time = first_time
            # Still connected when the log ended.
            if session.end_time is None:
                session.end_time = last_time


def summarize(
    sessions_by_user: dict[str, list[Session]],
    logger: logging.Logger | None = None,
) -> list[UserResult]:
    log = logger or _logger
    results: list[UserResult] = []
    for user_id, sessions in sessions_by_user.items():
        total = 0
        for session in sessions:
            seconds = session.duration_seconds()
            if seconds < 0:
                log.warning(
                    "Session for user=%s ends (%s) before it starts (%s); midnight wraparound is not supported",
                    user_id,
                    session.end_time,
                    session.start_time,
                )
            total += seconds
        results.append(UserResult(user_id=user_id, session_count=len(sessions), billable_seconds=total))
    return results


def compute_billing(
    lines: Iterable[str] | None,
    logger: logging.Logger | None = None,
) -> list[UserResult]:
    """Run the whole pipeline over raw log lines and return per-user totals."""
    events = parse_lines(lines, logger=logger)

    window = observation_window(events)
    if window is None:
        return []

    sessions_by_user = reconstruct_sessions(events, logger=logger)
    close_open_sessions(sessions_by_user, window)
    return summarize(sessions_by_user, logger=logger)
