"""
Run download reports from CLI.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Sequence

from download_stats.config import get_report_settings
from download_stats.domain.errors import DownloadStatsError
from download_stats.domain.report_definitions import REPORTS
from download_stats.logging_utils import configure_logging
from download_stats.services.report_service import get_report_service

logger = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Summarize monthly download statistics exports.")
    parser.add_argument(
        "--root",
        dest="root",
        default=None,
        help="Directory searched recursively for export files (default: DOWNLOAD_STATS_ROOT_DIR).",
    )
    parser.add_argument(
        "--report",
        choices=[*REPORTS, "all"],
        default="all",
        help="Which report to produce.",
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=["text", "json"],
        default="text",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    settings = get_report_settings()
    configure_logging(settings.log_level)

    root = Path(args.root) if args.root else settings.root_directory
    names = list(REPORTS) if args.report == "all" else [args.report]
    service = get_report_service()

    # Nothing is written until every requested report has been built.
    outputs = []
    for name in names:
        definition = REPORTS[name]
        default_keys = settings.default_plugins if definition.uses_default_keys else None
        try:
            if args.output_format == "json":
                response = service.render_json(definition, root, default_keys=default_keys)
                outputs.append(response.model_dump(mode="json"))
            else:
                outputs.append(service.render_text(definition, root, default_keys=default_keys))
        except DownloadStatsError as exc:
            logger.error("Report %s failed: %s", name, exc)
            print(f"error: {exc}", file=sys.stderr)
            return 1

    if args.output_format == "json":
        print(json.dumps(outputs, indent=2))
    else:
        sys.stdout.write("".join(outputs))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
