"""
download_stats/domain package marker.
"""

from download_stats.domain.errors import DownloadStatsError, IOFailure, MalformedFilename, MalformedRecord
from download_stats.domain.periods import FilenamePeriodExtractor, PeriodKey
from download_stats.domain.records import (
    AggregateEntry,
    DownloadRecord,
    PeriodBundle,
    PeriodSummary,
    RestrictedSubset,
)
from download_stats.domain.versions import CoreVersion

__all__ = [
    "AggregateEntry",
    "CoreVersion",
    "DownloadRecord",
    "DownloadStatsError",
    "FilenamePeriodExtractor",
    "IOFailure",
    "MalformedFilename",
    "MalformedRecord",
    "PeriodBundle",
    "PeriodKey",
    "PeriodSummary",
    "RestrictedSubset",
]
