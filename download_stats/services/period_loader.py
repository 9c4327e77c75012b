"""
download_stats/services/period_loader.py

Loads every export file of one report into period bundles.

Loading is eager: all matching files are parsed before anything is
returned, so a broken file aborts the run before aggregation starts.
"""

from __future__ import annotations

import logging
from collections import Counter
from pathlib import Path
from typing import Generic

from download_stats.domain.records import K, PeriodBundle
from download_stats.domain.report_definitions import ReportDefinition
from download_stats.logging_utils import log_event
from download_stats.repositories.file_repository import StatisticsFileRepository
from download_stats.validators.record_validator import DownloadRecordParser

logger = logging.getLogger(__name__)


class PeriodFileLoader(Generic[K]):
    """
    Discovers, filters and parses the export files of one report.

    Parameters
    ----------
    definition:
        Report whose file prefix, period extractor and key parser apply.
    repository:
        Filesystem access; replaceable in tests.
    """

    def __init__(
        self,
        definition: ReportDefinition[K],
        *,
        repository: StatisticsFileRepository | None = None,
    ) -> None:
        self._definition = definition
        self._repository = repository or StatisticsFileRepository()
        self._parser: DownloadRecordParser[K] = DownloadRecordParser(definition.key_parser)

    def load(self, root: Path) -> list[PeriodBundle[K]]:
        """
        Return one bundle per matching file under *root*, in no particular order.
        """

        selected = [
            path
            for path in self._repository.list_files(root)
            if self._definition.matches(path.name)
        ]

        bundles: list[PeriodBundle[K]] = []
        for path in selected:
            period = self._definition.period_extractor.extract(path)
            records = self._parser.parse_lines(self._repository.read_lines(path), source=path)
            bundles.append(PeriodBundle(period=period, source=path, records=tuple(records)))
            logger.debug("Loaded %d records for %s from %s", len(records), period, path)

        duplicates = [period for period, count in Counter(b.period for b in bundles).items() if count > 1]
        for period in sorted(duplicates):
            logger.warning(
                "Report %s has more than one file for period %s; both are counted.",
                self._definition.name,
                period,
            )

        log_event(
            logger,
            logging.INFO,
            "period_files_loaded",
            report=self._definition.name,
            root=str(root),
            files=len(bundles),
            records=sum(len(bundle.records) for bundle in bundles),
        )
        return bundles
