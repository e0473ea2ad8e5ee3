"""
File source: read league documents ({league: [fixtures]}) from one or more JSON files.
Files are read concurrently; a bad file is logged and skipped, but at least one must yield data.
"""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Sequence

from league_tables.core.concurrency import settle_all
from league_tables.ingestion.validator import check_league_data
from league_tables.ops.ops_events import log_source_failure

from .base import FixtureSource, SourceError, SourceFailure, SourceResult, merge_league_data

logger = logging.getLogger(__name__)


def read_league_file(path: str | Path) -> Dict[str, List[Any]]:
    """Read and shape-check one league document. Raises SourceError on any problem."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise SourceError(f"Failed to read or parse file: {path}. Error: {e}") from e
    report = check_league_data(data)
    if not report.ok:
        raise SourceError(f"Invalid league data in {path}: {'; '.join(report.errors)}")
    if not data:
        raise SourceError(f"Data is empty for file: {path}")
    return data


class FileFixtureSource(FixtureSource):
    """Recorded league documents on local disk."""

    def __init__(self, paths: Sequence[str | Path]) -> None:
        if not paths:
            raise ValueError("FileFixtureSource requires at least one path")
        self._paths = [Path(p) for p in paths]

    @property
    def name(self) -> str:
        return "file"

    @property
    def paths(self) -> List[Path]:
        return list(self._paths)

    async def load(self) -> SourceResult:
        tasks = {str(p): asyncio.to_thread(read_league_file, p) for p in self._paths}
        loaded, failed = await settle_all(tasks)

        result = SourceResult()
        for target, exc in failed.items():
            logger.error("%s", exc)
            log_source_failure(self.name, target, str(exc))
            result.failures.append(SourceFailure(target=target, error=str(exc)))
        # Merge in configured path order so fixture order is reproducible.
        for target in tasks:
            if target in loaded:
                merge_league_data(result.leagues, loaded[target])

        if not result.leagues:
            raise SourceError("All data files are empty or contain invalid data.")
        return result
