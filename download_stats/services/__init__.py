"""
download_stats/services package marker.
"""

from download_stats.services.aggregation_service import AggregationResult, DownloadAggregator
from download_stats.services.period_loader import PeriodFileLoader
from download_stats.services.report_renderer import ReportRenderer
from download_stats.services.report_service import DownloadReportService, get_report_service

__all__ = [
    "AggregationResult",
    "DownloadAggregator",
    "DownloadReportService",
    "PeriodFileLoader",
    "ReportRenderer",
    "get_report_service",
]
