"""
download_stats/validators/record_validator.py

Line-level validation and type parsing for download statistics exports.

Each export line has exactly three comma-separated, optionally quoted
fields::

    "maven-jar-plugin","1234","12.5"

Embedded commas are not supported; the exporter never produces them.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Callable, Generic, Iterable

from download_stats.domain.errors import MalformedRecord
from download_stats.domain.records import DownloadRecord, K

FIELD_NAMES: tuple[str, str, str] = ("key", "downloads", "relative_number")
QUOTE_CHARACTERS = ('"', "'")

_DOWNLOADS_PATTERN = re.compile(r"[0-9]+")


def unquote(value: str) -> str:
    """
    Remove one pair of matching surrounding quotes; otherwise return ``value``.
    """

    if len(value) >= 2 and value[0] in QUOTE_CHARACTERS and value[-1] == value[0]:
        return value[1:-1]
    return value


class DownloadRecordParser(Generic[K]):
    """
    Parses export lines into typed records using a report-specific key parser.

    ``key_parser`` must raise ``ValueError`` for keys it does not accept.
    """

    def __init__(self, key_parser: Callable[[str], K]) -> None:
        self._key_parser = key_parser

    def parse_lines(
        self,
        lines: Iterable[str],
        *,
        source: Path | str | None = None,
    ) -> list[DownloadRecord[K]]:
        """
        Parse every non-blank line; the first malformed line aborts the file.
        """

        records: list[DownloadRecord[K]] = []
        for line_number, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            try:
                records.append(self.parse_line(line, line_number=line_number))
            except MalformedRecord as exc:
                if source is None:
                    raise
                raise exc.with_path(source) from exc
        return records

    def parse_line(self, line: str, *, line_number: int | None = None) -> DownloadRecord[K]:
        fields = line.rstrip("\r\n").split(",")
        if len(fields) != len(FIELD_NAMES):
            raise MalformedRecord(
                f"Expected {len(FIELD_NAMES)} comma-separated fields, found {len(fields)}.",
                line_number=line_number,
                value=line.rstrip("\r\n"),
            )

        key_raw, downloads_raw, relative_raw = (unquote(field.strip()).strip() for field in fields)
        return DownloadRecord(
            key=self._parse_key(key_raw, line_number=line_number),
            downloads=self._parse_downloads(downloads_raw, line_number=line_number),
            relative_number=self._parse_relative_number(relative_raw, line_number=line_number),
        )

    def _parse_key(self, value: str, *, line_number: int | None) -> K:
        if not value:
            raise MalformedRecord(
                "Required value is missing.",
                line_number=line_number,
                field="key",
                value=value,
            )
        try:
            return self._key_parser(value)
        except ValueError as exc:
            raise MalformedRecord(
                f"Key could not be parsed: {exc}",
                line_number=line_number,
                field="key",
                value=value,
            ) from exc

    @staticmethod
    def _parse_downloads(value: str, *, line_number: int | None) -> int:
        if not _DOWNLOADS_PATTERN.fullmatch(value):
            raise MalformedRecord(
                "Download count must be a non-negative integer.",
                line_number=line_number,
                field="downloads",
                value=value,
            )
        return int(value)

    @staticmethod
    def _parse_relative_number(value: str, *, line_number: int | None) -> float:
        try:
            parsed = float(Decimal(value))
        except (InvalidOperation, ValueError) as exc:
            raise MalformedRecord(
                "Relative number must be a decimal value.",
                line_number=line_number,
                field="relative_number",
                value=value,
            ) from exc
        if not math.isfinite(parsed):
            raise MalformedRecord(
                "Relative number must be finite.",
                line_number=line_number,
                field="relative_number",
                value=value,
            )
        return parsed
