from __future__ import annotations

from pathlib import Path

from .errors import MissingLogFileError


def load_lines(path: str | Path) -> list[str]:
    """Read a whole log file into memory as an ordered list of lines."""
    log_path = Path(path)
    # Universal newlines: only \n, \r and \r\n end a line.
    try:
        with log_path.open(encoding="utf-8", newline=None) as handle:
            return [line.rstrip("\n") for line in handle]
    except FileNotFoundError as exc:
        raise MissingLogFileError(log_path) from exc
