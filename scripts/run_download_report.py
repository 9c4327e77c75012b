"""
Run download reports from CLI.
"""

from __future__ import annotations

from download_stats.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
