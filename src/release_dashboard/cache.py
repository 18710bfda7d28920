"""Flat-file cache of releases, one CSV file per project."""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import List, Optional, Sequence

from .errors import CacheError, DataValidationError
from .models import Release
from .records import parse_row

logger = logging.getLogger(__name__)

CSV_HEADER = ("number", "date", "author")


class CacheStore:
    """Reads and writes ``<data_dir>/<project_id>.csv`` release files.

    Only ``number``, ``date`` and ``author`` are stored; everything else is
    recomputed on load.
    """

    def __init__(self, data_dir: Path) -> None:
        self._data_dir = Path(data_dir)

    def path_for(self, project_id: str) -> Path:
        """Return the cache file path for a project."""
        return self._data_dir / f"{project_id}.csv"

    def load(self, project_id: str) -> Optional[List[Release]]:
        """Load cached releases for a project.

        Returns:
            The cached releases in file order, or ``None`` when no cache file
            exists.

        Raises:
            CacheError: If the file exists but cannot be parsed.
        """
        path = self.path_for(project_id)
        if not path.is_file():
            return None

        try:
            with path.open("r", encoding="utf-8", newline="") as handle:
                rows = list(csv.reader(handle))
        except (UnicodeDecodeError, csv.Error) as exc:
            raise CacheError(self._corrupt_message(path, str(exc))) from exc

        header = rows[0] if rows else None
        if header is None or tuple(header) != CSV_HEADER:
            raise CacheError(self._corrupt_message(path, f"unexpected header {header!r}"))

        releases: List[Release] = []
        for line_number, columns in enumerate(rows[1:], start=2):
            if not columns:
                continue
            if len(columns) != len(CSV_HEADER):
                raise CacheError(
                    self._corrupt_message(path, f"line {line_number} has {len(columns)} columns")
                )
            try:
                releases.append(parse_row(dict(zip(CSV_HEADER, columns))))
            except DataValidationError as exc:
                raise CacheError(self._corrupt_message(path, f"line {line_number}: {exc}")) from exc

        logger.debug("Loaded cached releases", extra={"path": str(path), "count": len(releases)})
        return releases

    def save(self, project_id: str, releases: Sequence[Release]) -> Path:
        """Overwrite the project's cache file with ``releases`` sorted by date."""
        path = self.path_for(project_id)
        self._data_dir.mkdir(parents=True, exist_ok=True)

        with path.open("w", encoding="utf-8", newline="") as handle:
            writer = csv.writer(handle, lineterminator="\n")
            writer.writerow(CSV_HEADER)
            for release in sorted(releases, key=lambda item: item.date):
                writer.writerow((release.number, release.date, release.author))

        return path

    @staticmethod
    def _corrupt_message(path: Path, detail: str) -> str:
        return (
            f"Cache file {path} is corrupt ({detail}). "
            "Delete it or re-run with --fresh to fetch again."
        )
