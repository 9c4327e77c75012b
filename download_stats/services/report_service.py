"""
download_stats/services/report_service.py

Service layer for report generation.

A report run is: load all matching export files, aggregate, render. Each
step either completes or raises; the rendered text is only produced once
every number is known, so a failed run prints nothing for that report.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from download_stats.domain.records import K
from download_stats.domain.report_definitions import ReportDefinition
from download_stats.repositories.file_repository import StatisticsFileRepository
from download_stats.schemas.report import DownloadReportResponse
from download_stats.services.aggregation_service import AggregationResult, DownloadAggregator
from download_stats.services.period_loader import PeriodFileLoader
from download_stats.services.report_renderer import ReportRenderer

logger = logging.getLogger(__name__)


class DownloadReportService:
    """
    Coordinates loading, aggregation and rendering for any report definition.
    """

    def __init__(
        self,
        *,
        repository: StatisticsFileRepository | None = None,
        aggregator: DownloadAggregator | None = None,
        renderer: ReportRenderer | None = None,
    ) -> None:
        self._repository = repository or StatisticsFileRepository()
        self._aggregator = aggregator or DownloadAggregator()
        self._renderer = renderer or ReportRenderer()

    def build(
        self,
        definition: ReportDefinition[K],
        root: Path,
        *,
        default_keys: tuple[str, ...] | None = None,
    ) -> AggregationResult[K]:
        """
        Load and aggregate one report.

        ``default_keys`` are parsed with the definition's ``key_parser``;
        without them the result has no restricted subset.
        """

        bundles = PeriodFileLoader(definition, repository=self._repository).load(root)
        restricted_keys = None
        if default_keys is not None:
            restricted_keys = [definition.key_parser(key) for key in default_keys]

        logger.info("Aggregating report %s over %d files", definition.name, len(bundles))
        return self._aggregator.aggregate(bundles, restricted_keys=restricted_keys)

    def render_text(
        self,
        definition: ReportDefinition[K],
        root: Path,
        *,
        default_keys: tuple[str, ...] | None = None,
    ) -> str:
        result = self.build(definition, root, default_keys=default_keys)
        return self._renderer.render(result, definition)

    def render_json(
        self,
        definition: ReportDefinition[K],
        root: Path,
        *,
        default_keys: tuple[str, ...] | None = None,
    ) -> DownloadReportResponse:
        result = self.build(definition, root, default_keys=default_keys)
        return DownloadReportResponse.from_result(
            report=definition.name,
            title=definition.title,
            result=result,
        )


@lru_cache(maxsize=1)
def get_report_service() -> DownloadReportService:
    """
    Build and cache the default report service.
    """
    return DownloadReportService()
