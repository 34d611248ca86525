from __future__ import annotations

from pathlib import Path


class FairBillingError(Exception):
    """Base class for errors raised by the billing tool."""


class MissingLogFileError(FairBillingError):
    def __init__(self, path: str | Path) -> None:
        super().__init__(f"No such file {path}")
        self.path = Path(path)
