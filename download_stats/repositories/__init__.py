"""
download_stats/repositories package marker.
"""

from download_stats.repositories.file_repository import StatisticsFileRepository

__all__ = [
    "StatisticsFileRepository",
]
