"""
download_stats/repositories/file_repository.py

Filesystem access for statistics exports.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from download_stats.domain.errors import IOFailure, MalformedRecord

logger = logging.getLogger(__name__)

ENCODING = "utf-8-sig"


class StatisticsFileRepository:
    """
    Lists and reads export files below a root directory.
    """

    def list_files(self, root: Path) -> list[Path]:
        """
        Return every regular, readable file under *root*, recursively.

        Order follows a sorted directory walk so repeated runs see the same
        sequence; callers must still not rely on it.
        """

        if not root.is_dir():
            raise IOFailure("Root directory does not exist or is not a directory.", path=root)

        def _raise(exc: OSError) -> None:
            raise IOFailure(f"Directory could not be listed: {exc.strerror}", path=exc.filename) from exc

        files: list[Path] = []
        for directory, subdirectories, filenames in os.walk(root, onerror=_raise):
            subdirectories.sort()
            for filename in sorted(filenames):
                path = Path(directory) / filename
                if path.is_file() and os.access(path, os.R_OK):
                    files.append(path)
                else:
                    logger.debug("Skipping unreadable or special file %s", path)
        return files

    def read_lines(self, path: Path) -> list[str]:
        """
        Read the whole file and release it before returning.

        Only line breaks end a line; other Unicode separators stay inside it.
        """

        try:
            with path.open("r", encoding=ENCODING) as handle:
                return [line.rstrip("\n") for line in handle]
        except UnicodeDecodeError as exc:
            raise MalformedRecord("File must be UTF-8 encoded.", path=path) from exc
        except OSError as exc:
            raise IOFailure(f"File could not be read: {exc.strerror or exc}", path=path) from exc
