"""
download_stats/domain/errors.py

Exceptions raised by the report pipeline.

Every error is fatal for the report being built: there is no skip-and-continue
mode, because a report over partially loaded data under-counts silently.
"""

from __future__ import annotations

from pathlib import Path


class DownloadStatsError(Exception):
    """
    Base class for all report pipeline failures.
    """

    def __init__(self, message: str, *, path: Path | str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = Path(path) if path is not None else None

    def __str__(self) -> str:
        if self.path is None:
            return self.message
        return f"{self.path}: {self.message}"


class MalformedFilename(DownloadStatsError, ValueError):
    """
    Raised when the year/month cannot be extracted from a statistics file name.
    """


class MalformedRecord(DownloadStatsError, ValueError):
    """
    Raised when one CSV line fails structural or numeric parsing.
    """

    def __init__(
        self,
        message: str,
        *,
        line_number: int | None = None,
        field: str | None = None,
        value: str | None = None,
        path: Path | str | None = None,
    ) -> None:
        super().__init__(message, path=path)
        self.line_number = line_number
        self.field = field
        self.value = value

    def with_path(self, path: Path | str) -> "MalformedRecord":
        return MalformedRecord(
            self.message,
            line_number=self.line_number,
            field=self.field,
            value=self.value,
            path=path,
        )

    def __str__(self) -> str:
        location = f"line {self.line_number}" if self.line_number is not None else "file"
        if self.field is not None:
            location = f"{location}, field {self.field!r}"
        detail = f"{location}: {self.message}"
        if self.value is not None:
            detail = f"{detail} (value={self.value!r})"
        if self.path is None:
            return detail
        return f"{self.path}: {detail}"


class IOFailure(DownloadStatsError, OSError):
    """
    Raised when a discovered file or the root directory cannot be read.
    """
