"""
download_stats/domain/report_definitions.py

The two report pipelines, described as data.

Both reports share loading, aggregation and rendering; they differ only in
which files they read, how the period is encoded in the file name, how the
key column is parsed and which labels are printed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic

from download_stats.domain.periods import FilenamePeriodExtractor
from download_stats.domain.records import K
from download_stats.domain.versions import CoreVersion


def plugin_name(text: str) -> str:
    """
    Plugin keys are opaque names.
    """

    name = text.strip()
    if not name:
        raise ValueError("plugin name is empty")
    return name


@dataclass(frozen=True)
class ReportDefinition(Generic[K]):
    """
    Everything that makes one report different from the other.

    ``uses_default_keys`` marks reports that print a subtotal over a
    configured key list. The list itself is passed in by the caller.
    """

    name: str
    title: str
    file_prefix: str
    period_extractor: FilenamePeriodExtractor
    key_parser: Callable[[str], K]
    key_label: str
    key_column_width: int
    show_period_breakdown: bool = False
    uses_default_keys: bool = False
    default_keys_label: str = "default keys"

    def matches(self, filename: str) -> bool:
        return filename.startswith(self.file_prefix)


PLUGIN_REPORT: ReportDefinition[str] = ReportDefinition(
    name="plugins",
    title="Apache Maven Plugins Statistics",
    file_prefix="org-apache-maven-plugins-",
    period_extractor=FilenamePeriodExtractor(year_offset=18, month_offset=13, suffix="-totals.csv"),
    key_parser=plugin_name,
    key_label="plugins",
    key_column_width=36,
    show_period_breakdown=True,
    uses_default_keys=True,
    default_keys_label="default plugins",
)

CORE_REPORT: ReportDefinition[CoreVersion] = ReportDefinition(
    name="core",
    title="Apache Maven Core Statistics",
    file_prefix="apache-maven-stats",
    period_extractor=FilenamePeriodExtractor(year_offset=11, month_offset=6, suffix=".csv"),
    key_parser=CoreVersion.parse,
    key_label="versions",
    key_column_width=15,
)

REPORTS: dict[str, ReportDefinition] = {
    PLUGIN_REPORT.name: PLUGIN_REPORT,
    CORE_REPORT.name: CORE_REPORT,
}
