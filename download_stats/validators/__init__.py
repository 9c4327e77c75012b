"""
download_stats/validators package marker.
"""

from download_stats.validators.record_validator import DownloadRecordParser, unquote

__all__ = [
    "DownloadRecordParser",
    "unquote",
]
