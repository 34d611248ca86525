from __future__ import annotations

from dataclasses import dataclass
from datetime import time

START_ACTION = "Start"
END_ACTION = "End"


def seconds_of_day(value: time) -> int:
    return value.hour * 3600 + value.minute * 60 + value.second


@dataclass(frozen=True, slots=True)
class Event:
    time_of_day: time
    user_id: str
    action: str


@dataclass(slots=True)
class Session:
    user_id: str
    start_time: time | None = None
    end_time: time | None = None

    @property
    def is_open(self) -> bool:
        return self.end_time is None

    def duration_seconds(self) -> int:
        if self.start_time is None or self.end_time is None:
            raise ValueError(f"Session for {self.user_id} is not closed")
        return seconds_of_day(self.end_time) - seconds_of_day(self.start_time)


@dataclass(frozen=True, slots=True)
class UserResult:
    user_id: str
    session_count: int
    billable_seconds: int
