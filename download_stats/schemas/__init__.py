"""
download_stats/schemas package marker.
"""

from download_stats.schemas.report import (
    DownloadReportResponse,
    KeyDownloadsResponse,
    PeriodDownloadsResponse,
    RestrictedSubsetResponse,
)

__all__ = [
    "DownloadReportResponse",
    "KeyDownloadsResponse",
    "PeriodDownloadsResponse",
    "RestrictedSubsetResponse",
]
