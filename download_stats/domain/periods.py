"""
download_stats/domain/periods.py

Reporting periods and extraction of (year, month) from export file names.

Export files carry no period inside their content; the exporter encodes it
at fixed character offsets counted from the end of the file name, e.g.::

    apache-maven-stats-2023-01.csv
                       ^^^^ ^^
                       -11  -6
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from download_stats.domain.errors import MalformedFilename

MIN_YEAR: Final[int] = 2000
MAX_YEAR: Final[int] = 2100

_YEAR_PATTERN = re.compile(r"[0-9]{4}")
_MONTH_PATTERN = re.compile(r"[0-9]{2}")


@dataclass(frozen=True, order=True)
class PeriodKey:
    """
    One calendar month. Ordered by year, then month.
    """

    year: int
    month: int

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"


@dataclass(frozen=True)
class FilenamePeriodExtractor:
    """
    Reads the period out of a file name at fixed offsets from its end.

    ``year_offset`` and ``month_offset`` are the distances from the end of
    the name to the first character of the year and of the month. The year
    and the month must be separated by exactly one ``separator`` character,
    and the name must end in ``suffix`` right after the month.
    """

    year_offset: int
    month_offset: int
    suffix: str
    separator: str = "-"

    def __post_init__(self) -> None:
        if self.month_offset != self.year_offset - 5:
            raise ValueError("month must directly follow the year and its separator")
        if self.month_offset < 2 or len(self.separator) != 1:
            raise ValueError("invalid period extractor offsets")
        if len(self.suffix) != self.month_offset - 2:
            raise ValueError("suffix must start right after the month")

    def extract(self, filename: Path | str) -> PeriodKey:
        name = Path(filename).name
        if len(name) < self.year_offset:
            raise MalformedFilename(
                f"File name is too short to carry a period "
                f"(expected at least {self.year_offset} characters).",
                path=filename,
            )
        if not name.endswith(self.suffix):
            raise MalformedFilename(f"File name must end with {self.suffix!r}.", path=filename)

        year_start = len(name) - self.year_offset
        month_start = len(name) - self.month_offset
        year_text = name[year_start : year_start + 4]
        separator = name[year_start + 4]
        month_text = name[month_start : month_start + 2]

        if not _YEAR_PATTERN.fullmatch(year_text):
            raise MalformedFilename(f"Year {year_text!r} is not numeric.", path=filename)
        if separator != self.separator:
            raise MalformedFilename(
                f"Expected {self.separator!r} between year and month, found {separator!r}.",
                path=filename,
            )
        if not _MONTH_PATTERN.fullmatch(month_text):
            raise MalformedFilename(f"Month {month_text!r} is not numeric.", path=filename)

        year = int(year_text)
        month = int(month_text)
        if not MIN_YEAR <= year <= MAX_YEAR:
            raise MalformedFilename(
                f"Year {year} is outside {MIN_YEAR}-{MAX_YEAR}.", path=filename
            )
        if not 1 <= month <= 12:
            raise MalformedFilename(f"Month {month} is outside 1-12.", path=filename)
        return PeriodKey(year=year, month=month)

