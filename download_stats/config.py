"""
download_stats/config.py

Report configuration helpers.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Final

# Plugins bound to the default lifecycle; reported as a separate subtotal.
DEFAULT_MAVEN_PLUGINS: Final[tuple[str, ...]] = (
    "maven-clean-plugin",
    "maven-compiler-plugin",
    "maven-dependency-plugin",
    "maven-deploy-plugin",
    "maven-ear-plugin",
    "maven-ejb-plugin",
    "maven-enforcer-plugin",
    "maven-failsafe-plugin",
    "maven-help-plugin",
    "maven-install-plugin",
    "maven-jar-plugin",
    "maven-javadoc-plugin",
    "maven-resources-plugin",
    "maven-surefire-plugin",
    "maven-war-plugin",
)

DEFAULT_ROOT_DIR: Final[str] = "data"
DEFAULT_LOG_LEVEL: Final[str] = "WARNING"
ENV_FILE: Final[Path] = Path(__file__).resolve().parents[1] / ".env"


def load_env_file(env_path: Path = ENV_FILE) -> None:
    """
    Copy KEY=VALUE lines from ``env_path`` into ``os.environ``.

    Variables already set in the process win over the file. A missing file
    is not an error.
    """

    if not env_path.is_file():
        return

    for line in env_path.read_text(encoding="utf-8").split("\n"):
        name, sep, value = line.strip().partition("=")
        name = name.strip()
        if not sep or not name or name.startswith("#"):
            continue
        os.environ.setdefault(name, value.strip().strip("\"'"))


@lru_cache(maxsize=1)
def _load_env_once() -> None:
    load_env_file()


def _get_str_env(name: str, default: str) -> str:
    """
    Read a string from environment variables with fallback.
    """

    _load_env_once()
    value = os.getenv(name)
    if value is None:
        return default
    stripped = value.strip()
    return stripped if stripped else default


def _get_list_env(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    """
    Read a comma separated list; blank entries are dropped.
    """

    items = tuple(item.strip() for item in _get_str_env(name, "").split(","))
    items = tuple(item for item in items if item)
    return items or default


@dataclass(frozen=True)
class ReportSettings:
    """
    Runtime settings for report generation.
    """

    root_directory: Path = Path(DEFAULT_ROOT_DIR)
    log_level: str = DEFAULT_LOG_LEVEL
    default_plugins: tuple[str, ...] = DEFAULT_MAVEN_PLUGINS


@lru_cache(maxsize=1)
def get_report_settings() -> ReportSettings:
    """
    Return cached report settings from environment variables.
    """

    return ReportSettings(
        root_directory=Path(_get_str_env("DOWNLOAD_STATS_ROOT_DIR", DEFAULT_ROOT_DIR)),
        log_level=_get_str_env("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        default_plugins=_get_list_env("DOWNLOAD_STATS_DEFAULT_PLUGINS", DEFAULT_MAVEN_PLUGINS),
    )
