"""
download_stats/services/report_renderer.py

Text formatting for aggregation results.

Numbers are formatted with the format mini-language (``{:,}``, ``{:.2f}``),
which always uses ``,`` for grouping and ``.`` for decimals regardless of the
process locale.
"""

from __future__ import annotations

from typing import Generic

from download_stats.domain.records import AggregateEntry, K
from download_stats.domain.report_definitions import ReportDefinition
from download_stats.services.aggregation_service import AggregationResult

SEPARATOR = "-" * 60


class ReportRenderer(Generic[K]):
    """
    Renders one report in fixed section order:

    1. downloads per period (optionally broken down by key)
    2. all keys by key, with percentage
    3. grand total
    4. all keys by descending downloads, with percentage
    5. restricted subset, when the report defines one
    """

    def render(self, result: AggregationResult[K], definition: ReportDefinition[K]) -> str:
        width = definition.key_column_width
        lines: list[str] = [definition.title]

        for summary in result.period_summaries:
            lines.append(
                f"Year: {summary.period.year:04d} Month: {summary.period.month:02d} "
                f"Number of {definition.key_label}: {summary.distinct_keys:3d} "
                f"downloads: {summary.total_downloads:15,d}"
            )
            if definition.show_period_breakdown:
                for entry in summary.entries:
                    lines.append(f" {str(entry.key):<{width}} {entry.total_downloads:10,d}")

        lines.append(SEPARATOR)
        lines.append(f" {definition.key_label.capitalize()} ordered by name.")
        lines.append("")
        lines.extend(self._entry_line(result, entry, width) for entry in result.by_key())

        lines.append(SEPARATOR)
        lines.append(f" {'Downloads in total:':<{width}} {result.grand_total:15,d}")

        lines.append(SEPARATOR)
        lines.append(f" {definition.key_label.capitalize()} ordered by downloads.")
        lines.append("")
        lines.extend(self._entry_line(result, entry, width) for entry in result.by_downloads())

        restricted = result.restricted
        if restricted is not None:
            lines.append(SEPARATOR)
            lines.append(
                f"Number of {definition.default_keys_label} used: "
                f"{len(restricted.entries):3d} of {len(restricted.configured_keys):3d}"
            )
            lines.append(SEPARATOR)
            for entry in restricted.entries:
                lines.append(f" {str(entry.key):<{width}} {entry.total_downloads:15,d}")
            lines.append(SEPARATOR)
            label = f"Downloads of {definition.default_keys_label}:"
            lines.append(f" {label:<{width}} {restricted.total_downloads:15,d}")

        return "\n".join(lines) + "\n"

    @staticmethod
    def _entry_line(result: AggregationResult[K], entry: AggregateEntry[K], width: int) -> str:
        return (
            f" {str(entry.key):<{width}} {entry.total_downloads:15,d} "
            f"{result.percentage(entry):6.2f}"
        )
