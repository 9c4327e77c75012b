"""
tests/test_record_validator.py

Pytest unit tests for quote stripping and export line parsing.

Coverage
--------
- unquote: matching pairs, missing/unbalanced quotes, internal quotes
- Plugin and core key strategies
- Field count, download count, relative number and key validation
- File-level parsing aborts on the first malformed line and names it
"""

from __future__ import annotations

from pathlib import Path

import pytest

from download_stats.domain.errors import MalformedRecord
from download_stats.domain.records import DownloadRecord
from download_stats.domain.report_definitions import plugin_name
from download_stats.domain.versions import CoreVersion
from download_stats.validators.record_validator import DownloadRecordParser, unquote


@pytest.fixture()
def plugin_parser() -> DownloadRecordParser[str]:
    return DownloadRecordParser(plugin_name)


@pytest.fixture()
def core_parser() -> DownloadRecordParser[CoreVersion]:
    return DownloadRecordParser(CoreVersion.parse)


# ---------------------------------------------------------------------------
# unquote
# ---------------------------------------------------------------------------


class TestUnquote:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ('"maven-jar-plugin"', "maven-jar-plugin"),
            ("'maven-jar-plugin'", "maven-jar-plugin"),
            ("maven-jar-plugin", "maven-jar-plugin"),
            ('"', '"'),
            ('""', ""),
            ('"unbalanced', '"unbalanced'),
            ("\"mixed'", "\"mixed'"),
            ('"say "hi""', 'say "hi"'),
        ],
    )
    def test_unquote(self, raw: str, expected: str) -> None:
        assert unquote(raw) == expected


# ---------------------------------------------------------------------------
# parse_line
# ---------------------------------------------------------------------------


class TestParseLine:
    def test_parses_quoted_plugin_line(self, plugin_parser: DownloadRecordParser[str]) -> None:
        record = plugin_parser.parse_line('"maven-jar-plugin","100","50.0"')
        assert record == DownloadRecord(key="maven-jar-plugin", downloads=100, relative_number=50.0)

    def test_parses_unquoted_line_with_crlf(self, plugin_parser: DownloadRecordParser[str]) -> None:
        record = plugin_parser.parse_line("maven-war-plugin,7,0.5\r\n")
        assert record.key == "maven-war-plugin"
        assert record.downloads == 7
        assert record.relative_number == pytest.approx(0.5)

    def test_core_key_is_a_version(self, core_parser: DownloadRecordParser[CoreVersion]) -> None:
        record = core_parser.parse_line('"3.9.6","12","1.5"')
        assert record.key == CoreVersion.parse("3.9.6")

    def test_record_is_immutable(self, plugin_parser: DownloadRecordParser[str]) -> None:
        record = plugin_parser.parse_line('"a","1","1.0"')
        with pytest.raises((AttributeError, TypeError)):
            record.downloads = 2  # type: ignore[misc]

    def test_two_fields_are_rejected(self, plugin_parser: DownloadRecordParser[str]) -> None:
        with pytest.raises(MalformedRecord) as excinfo:
            plugin_parser.parse_line('"maven-jar-plugin","100"', line_number=3)
        assert excinfo.value.line_number == 3

    def test_four_fields_are_rejected(self, plugin_parser: DownloadRecordParser[str]) -> None:
        with pytest.raises(MalformedRecord):
            plugin_parser.parse_line('"a,b","1","2.0"')

    @pytest.mark.parametrize("downloads", ['"-1"', '"1.5"', '"abc"', '""', '"1e3"'])
    def test_invalid_download_count(self, plugin_parser: DownloadRecordParser[str], downloads: str) -> None:
        with pytest.raises(MalformedRecord) as excinfo:
            plugin_parser.parse_line(f'"a",{downloads},"1.0"')
        assert excinfo.value.field == "downloads"

    @pytest.mark.parametrize("relative", ['"x"', '""', '"nan"', '"inf"'])
    def test_invalid_relative_number(self, plugin_parser: DownloadRecordParser[str], relative: str) -> None:
        with pytest.raises(MalformedRecord) as excinfo:
            plugin_parser.parse_line(f'"a","1",{relative}')
        assert excinfo.value.field == "relative_number"

    def test_empty_key_is_rejected(self, plugin_parser: DownloadRecordParser[str]) -> None:
        with pytest.raises(MalformedRecord) as excinfo:
            plugin_parser.parse_line('"","1","1.0"')
        assert excinfo.value.field == "key"

    def test_invalid_version_key_is_rejected(self, core_parser: DownloadRecordParser[CoreVersion]) -> None:
        with pytest.raises(MalformedRecord) as excinfo:
            core_parser.parse_line('"not-a-version","1","1.0"')
        assert excinfo.value.field == "key"
        assert excinfo.value.value == "not-a-version"


# ---------------------------------------------------------------------------
# parse_lines
# ---------------------------------------------------------------------------


class TestParseLines:
    def test_keeps_order_and_skips_blank_lines(self, plugin_parser: DownloadRecordParser[str]) -> None:
        lines = ['"b","2","40.0"', "", '"a","3","60.0"', "   "]
        records = plugin_parser.parse_lines(lines)
        assert [record.key for record in records] == ["b", "a"]

    def test_first_bad_line_aborts_with_location(self, plugin_parser: DownloadRecordParser[str]) -> None:
        lines = ['"a","1","1.0"', '"b","2"', '"c","3","1.0"']
        with pytest.raises(MalformedRecord) as excinfo:
            plugin_parser.parse_lines(lines, source=Path("stats.csv"))
        error = excinfo.value
        assert error.line_number == 2
        assert error.path == Path("stats.csv")
        assert "stats.csv" in str(error)
        assert "line 2" in str(error)
