"""
download_stats/services/aggregation_service.py

Aggregation layer for download reports.

Turns period bundles into the numbers every report section prints:

    per-period summary     distinct keys and downloads per export file
    cross-period grouping  total downloads per key over all files
    grand total            sum of all per-key totals
    restricted subset      per-key totals limited to a configured key list

Percentages are derived on demand from the per-key totals and the grand
total; they are never stored. No formatting lives here; see
``report_renderer``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Generic, Iterable, Sequence

from download_stats.domain.records import (
    AggregateEntry,
    K,
    PeriodBundle,
    PeriodSummary,
    RestrictedSubset,
)
from download_stats.logging_utils import log_event

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AggregationResult(Generic[K]):
    """
    Everything one report needs, computed in a single pass.
    """

    period_summaries: tuple[PeriodSummary[K], ...]
    entries: tuple[AggregateEntry[K], ...]
    grand_total: int
    restricted: RestrictedSubset[K] | None = None

    def by_key(self) -> list[AggregateEntry[K]]:
        """Entries ascending by key."""
        return sorted(self.entries, key=lambda entry: entry.key)

    def by_downloads(self) -> list[AggregateEntry[K]]:
        """
        Entries by descending downloads; equal totals ascend by key.
        """
        return sorted(
            self.by_key(),
            key=lambda entry: entry.total_downloads,
            reverse=True,
        )

    def percentage(self, entry: AggregateEntry[K]) -> float:
        """
        Share of the grand total in percent; ``0.0`` when nothing was downloaded.
        """
        if self.grand_total == 0:
            return 0.0
        return entry.total_downloads / self.grand_total * 100.0

    @property
    def period_total(self) -> int:
        return sum(summary.total_downloads for summary in self.period_summaries)

    @property
    def is_reconciled(self) -> bool:
        """
        True when the per-key grand total matches the sum over all periods.
        """
        return self.grand_total == self.period_total


class DownloadAggregator(Generic[K]):
    """
    Stateless aggregation over period bundles.

    All methods are pure: the same bundles always produce equal results.
    """

    def summarize_periods(
        self,
        bundles: Iterable[PeriodBundle[K]],
    ) -> list[PeriodSummary[K]]:
        """
        One summary per bundle, ascending by period (then source path).
        """

        summaries: list[PeriodSummary[K]] = []
        for bundle in sorted(bundles, key=lambda b: b.sort_key):
            entries = self._sum_by_key([bundle])
            summaries.append(
                PeriodSummary(
                    period=bundle.period,
                    source=bundle.source,
                    distinct_keys=len(entries),
                    total_downloads=sum(entry.total_downloads for entry in entries),
                    entries=tuple(sorted(entries, key=lambda entry: entry.key)),
                )
            )
        return summaries

    def group_by_key(
        self,
        bundles: Iterable[PeriodBundle[K]],
    ) -> list[AggregateEntry[K]]:
        """
        Total downloads per key across all bundles.

        Bundles are visited in period order, so when two spellings compare
        equal (``3.0`` and ``3.0.0``) the earliest one names the entry.
        """

        return self._sum_by_key(sorted(bundles, key=lambda b: b.sort_key))

    def restrict(
        self,
        entries: Sequence[AggregateEntry[K]],
        keys: Iterable[K],
    ) -> RestrictedSubset[K]:
        """
        Filter already-aggregated entries down to *keys*.

        Keys without data are kept in ``configured_keys`` and add nothing.
        """

        configured = tuple(dict.fromkeys(keys))
        wanted = set(configured)
        selected = sorted(
            (entry for entry in entries if entry.key in wanted),
            key=lambda entry: entry.key,
        )
        return RestrictedSubset(
            configured_keys=configured,
            entries=tuple(selected),
            total_downloads=sum(entry.total_downloads for entry in selected),
        )

    def aggregate(
        self,
        bundles: Sequence[PeriodBundle[K]],
        *,
        restricted_keys: Iterable[K] | None = None,
    ) -> AggregationResult[K]:
        """
        Run both aggregation passes and, optionally, the restricted subset.
        """

        summaries = self.summarize_periods(bundles)
        entries = self.group_by_key(bundles)
        grand_total = sum(entry.total_downloads for entry in entries)
        restricted = (
            self.restrict(entries, restricted_keys) if restricted_keys is not None else None
        )

        result = AggregationResult(
            period_summaries=tuple(summaries),
            entries=tuple(entries),
            grand_total=grand_total,
            restricted=restricted,
        )
        if not result.is_reconciled:
            logger.error(
                "Grand total %d does not match the sum over periods %d.",
                result.grand_total,
                result.period_total,
            )

        log_event(
            logger,
            logging.INFO,
            "downloads_aggregated",
            periods=len(summaries),
            keys=len(entries),
            grand_total=grand_total,
            restricted_total=restricted.total_downloads if restricted else None,
        )
        return result

    @staticmethod
    def _sum_by_key(bundles: Iterable[PeriodBundle[K]]) -> list[AggregateEntry[K]]:
        # dict keeps the first inserted key object for equal keys
        totals: dict[K, int] = {}
        for bundle in bundles:
            for record in bundle.records:
                totals[record.key] = totals.get(record.key, 0) + record.downloads
        return [AggregateEntry(key=key, total_downloads=total) for key, total in totals.items()]
