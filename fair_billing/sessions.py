from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import time

from .models import START_ACTION, Event, Session


class SessionReconstructor:
    """Pairs Start/End events into per-user sessions.

    An End always closes the user's oldest session that is still missing an
    end, not the most recent one, so overlapping sessions unwind first-in
    first-out. An End with nothing to close opens a session whose start
    happened before the log began.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or logging.getLogger(__name__)
        self.sessions_by_user: dict[str, list[Session]] = {}
        # Index of the earliest session per user that may still be open.
        # Everything before it is closed and closed sessions never reopen.
        self._first_open: dict[str, int] = {}

    def apply(self, event: Event) -> None:
        if event.action == START_ACTION:
            self.start_session(event.user_id, event.time_of_day)
        else:
            self.end_session(event.user_id, event.time_of_day)

    def start_session(self, user_id: str, started_at: time) -> None:
        sessions = self._sessions_for(user_id)
        sessions.append(Session(user_id=user_id, start_time=started_at))

    def end_session(self, user_id: str, ended_at: time) -> None:
        sessions = self._sessions_for(user_id)

        cursor = self._first_open.get(user_id, 0)
        while cursor < len(sessions) and not sessions[cursor].is_open:
            cursor += 1
        self._first_open[user_id] = cursor

        if cursor < len(sessions):
            sessions[cursor].end_time = ended_at
            return

        self.logger.debug("End without open session for user=%s at %s", user_id, ended_at)
        sessions.append(Session(user_id=user_id, end_time=ended_at))

    def _sessions_for(self, user_id: str) -> list[Session]:
        sessions = self.sessions_by_user.get(user_id)
        if sessions is None:
            sessions = []
            self.sessions_by_user[user_id] = sessions
        return sessions


def reconstruct_sessions(
    events: Iterable[Event],
    logger: logging.Logger | None = None,
) -> dict[str, list[Session]]:
    reconstructor = SessionReconstructor(logger=logger)
    for event in events:
        reconstructor.apply(event)
    return reconstructor.sessions_by_user
