from __future__ import annotations

from collections.abc import Iterable

from .models import UserResult

HEADER = "UserName  Sessions  TotalTimeInSeconds"
SEPARATOR = "-" * len(HEADER)


def format_seconds(total_seconds: int) -> str:
    """Render a duration as HH:MM:SS, keeping the sign of negative totals."""
    total = int(total_seconds)
    sign = "-" if total < 0 else ""
    hours, remainder = divmod(abs(total), 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{sign}{hours:02}:{minutes:02}:{seconds:02}"


def select_rows(results: Iterable[UserResult], user_id: str | None = None) -> list[UserResult]:
    # Keep first-seen order; filtering never changes the totals themselves.
    if user_id is None:
        return list(results)
    return [result for result in results if result.user_id == user_id]


def format_row(result: UserResult, *, hms: bool = False) -> str:
    total = format_seconds(result.billable_seconds) if hms else str(result.billable_seconds)
    return f"{result.user_id}   {result.session_count}         {total}"


def format_report(results: Iterable[UserResult], *, hms: bool = False) -> str:
    lines = [HEADER, SEPARATOR]
    lines.extend(format_row(result, hms=hms) for result in results)
    return "\n".join(lines)
