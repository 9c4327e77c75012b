"""
download_stats/schemas/report.py

JSON output schemas for download reports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from download_stats.services.aggregation_service import AggregationResult


class _ReportModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class KeyDownloadsResponse(_ReportModel):
    """
    Total downloads of one key and its share of the grand total.
    """

    key: str = Field(min_length=1)
    downloads: int = Field(..., ge=0)
    percentage: float = Field(..., ge=0.0, le=100.0)


class PeriodDownloadsResponse(_ReportModel):
    """
    Downloads of one export file.
    """

    year: int = Field(..., ge=2000, le=2100)
    month: int = Field(..., ge=1, le=12)
    source: str
    distinct_keys: int = Field(..., ge=0)
    downloads: int = Field(..., ge=0)


class RestrictedSubsetResponse(_ReportModel):
    """
    Subtotal over the configured default keys.
    """

    configured_keys: list[str] = Field(default_factory=list)
    present_keys: list[str] = Field(default_factory=list)
    downloads: int = Field(..., ge=0)


class DownloadReportResponse(_ReportModel):
    """
    Machine-readable form of one rendered report.
    """

    report: str
    title: str
    periods: list[PeriodDownloadsResponse] = Field(default_factory=list)
    keys: list[KeyDownloadsResponse] = Field(default_factory=list)
    grand_total: int = Field(..., ge=0)
    restricted: RestrictedSubsetResponse | None = None

    @classmethod
    def from_result(cls, *, report: str, title: str, result: AggregationResult) -> "DownloadReportResponse":
        restricted = None
        if result.restricted is not None:
            restricted = RestrictedSubsetResponse(
                configured_keys=[str(key) for key in result.restricted.configured_keys],
                present_keys=[str(entry.key) for entry in result.restricted.entries],
                downloads=result.restricted.total_downloads,
            )
        return cls(
            report=report,
            title=title,
            periods=[
                PeriodDownloadsResponse(
                    year=summary.period.year,
                    month=summary.period.month,
                    source=str(summary.source),
                    distinct_keys=summary.distinct_keys,
                    downloads=summary.total_downloads,
                )
                for summary in result.period_summaries
            ],
            keys=[
                KeyDownloadsResponse(
                    key=str(entry.key),
                    downloads=entry.total_downloads,
                    percentage=round(result.percentage(entry), 2),
                )
                for entry in result.by_downloads()
            ],
            grand_total=result.grand_total,
            restricted=restricted,
        )
