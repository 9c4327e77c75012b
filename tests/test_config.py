from __future__ import annotations

import os
from pathlib import Path

import pytest

from download_stats.config import DEFAULT_MAVEN_PLUGINS, ReportSettings, get_report_settings, load_env_file


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_report_settings.cache_clear()
    yield
    get_report_settings.cache_clear()


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DOWNLOAD_STATS_ROOT_DIR", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("DOWNLOAD_STATS_DEFAULT_PLUGINS", raising=False)
    assert get_report_settings() == ReportSettings()


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DOWNLOAD_STATS_ROOT_DIR", "/srv/exports")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    settings = get_report_settings()
    assert settings.root_directory == Path("/srv/exports")
    assert settings.log_level == "DEBUG"


def test_blank_values_fall_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DOWNLOAD_STATS_ROOT_DIR", "   ")
    assert get_report_settings().root_directory == Path("data")


def test_default_plugins_are_unique_and_immutable() -> None:
    assert len(set(DEFAULT_MAVEN_PLUGINS)) == len(DEFAULT_MAVEN_PLUGINS) == 15
    assert isinstance(DEFAULT_MAVEN_PLUGINS, tuple)


def test_default_plugins_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DOWNLOAD_STATS_DEFAULT_PLUGINS", " maven-jar-plugin,, maven-war-plugin ")
    assert get_report_settings().default_plugins == ("maven-jar-plugin", "maven-war-plugin")


def test_blank_default_plugins_fall_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DOWNLOAD_STATS_DEFAULT_PLUGINS", " , ")
    assert get_report_settings().default_plugins == DEFAULT_MAVEN_PLUGINS


def test_env_file_does_not_override_process(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    env_path = tmp_path / ".env"
    env_path.write_text(
        "# exports\nDOWNLOAD_STATS_ROOT_DIR='/from/file'\nLOG_LEVEL=DEBUG\nnot a pair\n",
        encoding="utf-8",
    )
    # setenv first so the variable written by the file is removed afterwards
    monkeypatch.setenv("DOWNLOAD_STATS_ROOT_DIR", "")
    monkeypatch.delenv("DOWNLOAD_STATS_ROOT_DIR")
    monkeypatch.setenv("LOG_LEVEL", "ERROR")

    load_env_file(env_path)

    assert os.environ["DOWNLOAD_STATS_ROOT_DIR"] == "/from/file"
    assert os.environ["LOG_LEVEL"] == "ERROR"
    assert "not a pair" not in os.environ


def test_missing_env_file_is_ignored(tmp_path: Path) -> None:
    load_env_file(tmp_path / ".env")
