"""
Shared fixtures: small export trees written to a temporary directory.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

ExportWriter = Callable[[str, list[str]], Path]


@pytest.fixture()
def write_export(tmp_path: Path) -> ExportWriter:
    """
    Write one export file below ``tmp_path`` and return its path.
    """

    def _write(relative_name: str, lines: list[str]) -> Path:
        path = tmp_path / relative_name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def plugin_exports(write_export: ExportWriter, tmp_path: Path) -> Path:
    """
    Two monthly plugin exports; the canonical two-file example.
    """

    write_export(
        "plugins/org-apache-maven-plugins-2023-01-totals.csv",
        ['"maven-jar-plugin","100","50.0"', '"maven-war-plugin","100","50.0"'],
    )
    write_export(
        "plugins/2023/org-apache-maven-plugins-2023-02-totals.csv",
        ['"maven-jar-plugin","50","100.0"'],
    )
    return tmp_path


@pytest.fixture()
def core_exports(write_export: ExportWriter, tmp_path: Path) -> Path:
    write_export(
        "core/apache-maven-stats-2023-02.csv",
        ['"3.9.10","40","40.0"', '"3.9.6","60","60.0"'],
    )
    write_export(
        "core/apache-maven-stats-2023-01.csv",
        ['"3.2.5","10","10.0"', '"3.9.6","90","90.0"'],
    )
    return tmp_path
