"""
download_stats/domain/records.py

Typed records flowing through the report pipeline.
"""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Generic, Protocol, TypeVar

from download_stats.domain.periods import PeriodKey


class ReportKey(Hashable, Protocol):
    """
    What a report key must offer: equality, hashing, a total order and ``str()``.
    """

    def __lt__(self, other: object, /) -> bool: ...


K = TypeVar("K", bound=ReportKey)


@dataclass(frozen=True)
class DownloadRecord(Generic[K]):
    """
    One parsed CSV line.
    """

    key: K
    downloads: int
    relative_number: float


@dataclass(frozen=True)
class PeriodBundle(Generic[K]):
    """
    All records of one export file, tagged with the file's period.
    """

    period: PeriodKey
    source: Path
    records: tuple[DownloadRecord[K], ...]

    @property
    def sort_key(self) -> tuple[PeriodKey, str]:
        return self.period, str(self.source)


@dataclass(frozen=True)
class AggregateEntry(Generic[K]):
    """
    Total downloads of one key.
    """

    key: K
    total_downloads: int


@dataclass(frozen=True)
class PeriodSummary(Generic[K]):
    """
    Downloads of one period bundle.

    ``entries`` holds the bundle's downloads summed per key, ascending by key.
    """

    period: PeriodKey
    source: Path
    distinct_keys: int
    total_downloads: int
    entries: tuple[AggregateEntry[K], ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class RestrictedSubset(Generic[K]):
    """
    Aggregate entries restricted to a configured list of keys.

    ``configured_keys`` keeps the caller's list; keys absent from the data
    have no entry and contribute nothing to ``total_downloads``.
    """

    configured_keys: tuple[K, ...]
    entries: tuple[AggregateEntry[K], ...]
    total_downloads: int
