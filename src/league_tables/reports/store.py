"""
Standings store: persist per-league mappings as JSON arrays of [team, record] pairs.

Layout: {root}/{league}/{league}-{kind}.json, kind in homeStanding | awayStanding | homeAnalysis | awayAnalysis.
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any, Dict, List, Mapping

from league_tables.engine.errors import InvalidFixtureError
from league_tables.engine.types import LeagueAnalysis, LeagueStandings, Side, Standing
from league_tables.ops.ops_events import log_store_write

logger = logging.getLogger(__name__)

KIND_HOME_STANDING = "homeStanding"
KIND_AWAY_STANDING = "awayStanding"
KIND_HOME_ANALYSIS = "homeAnalysis"
KIND_AWAY_ANALYSIS = "awayAnalysis"
KINDS = (KIND_HOME_STANDING, KIND_AWAY_STANDING, KIND_HOME_ANALYSIS, KIND_AWAY_ANALYSIS)

STANDING_KIND = {Side.HOME: KIND_HOME_STANDING, Side.AWAY: KIND_AWAY_STANDING}
ANALYSIS_KIND = {Side.HOME: KIND_HOME_ANALYSIS, Side.AWAY: KIND_AWAY_ANALYSIS}

_LEAGUE_RE = re.compile(r"^[A-Za-z0-9_.-]{1,128}$")


class StoreError(Exception):
    """Raised when a persisted mapping is missing or malformed, or a league id is unsafe."""


def _record(value: Any) -> Any:
    return value.to_dict() if hasattr(value, "to_dict") else value


def serialize_mapping(mapping: Mapping[str, Any]) -> List[List[Any]]:
    """Mapping -> [[key, record], ...] in insertion order."""
    return [[key, _record(value)] for key, value in mapping.items()]


def deserialize_pairs(data: Any) -> Dict[str, Any]:
    """[[key, record], ...] -> dict. Raises StoreError on any other shape."""
    if not isinstance(data, list):
        raise StoreError(f"expected a JSON array of [team, record] pairs, got {type(data).__name__}")
    out: Dict[str, Any] = {}
    for item in data:
        if not isinstance(item, list) or len(item) != 2 or not isinstance(item[0], str):
            raise StoreError(f"malformed entry: {item!r}")
        out[item[0]] = item[1]
    return out


def check_league_id(league: str) -> str:
    """League ids become directory names; allow only a safe character set."""
    if not isinstance(league, str) or not _LEAGUE_RE.match(league) or league in (".", ".."):
        raise StoreError(f"league id must match {_LEAGUE_RE.pattern}; got {league!r}")
    return league


class StandingsStore:
    """File-backed store for standings and analysis mappings."""

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root)

    @property
    def root(self) -> Path:
        return self._root

    def path_for(self, league: str, kind: str) -> Path:
        if kind not in KINDS:
            raise StoreError(f"unknown kind {kind!r}; expected one of {', '.join(KINDS)}")
        league = check_league_id(league)
        return self._root / league / f"{league}-{kind}.json"

    def write_mapping(self, league: str, kind: str, mapping: Mapping[str, Any]) -> Path:
        path = self.path_for(league, kind)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(serialize_mapping(mapping)), encoding="utf-8")
        log_store_write(league, kind, str(path), len(mapping))
        return path

    def read_mapping(self, league: str, kind: str) -> Dict[str, Any]:
        """Raw records keyed by team. Raises StoreError if missing or malformed."""
        path = self.path_for(league, kind)
        if not path.exists():
            raise StoreError(f"nothing stored for {league} {kind}: {path}")
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise StoreError(f"Failed to read or parse file: {path}. Error: {e}") from e
        return deserialize_pairs(data)

    def read_standings(self, league: str, side: Side) -> Dict[str, Standing]:
        side = Side(side)
        records = self.read_mapping(league, STANDING_KIND[side])
        try:
            return {team: Standing.from_dict(record) for team, record in records.items()}
        except InvalidFixtureError as e:
            raise StoreError(f"malformed standing in {league} {side.value}: {e}") from e

    def read_league_standings(self, league: str) -> LeagueStandings:
        return LeagueStandings(
            home=self.read_standings(league, Side.HOME),
            away=self.read_standings(league, Side.AWAY),
        )

    def write_standings(self, league: str, standings: LeagueStandings) -> List[Path]:
        return [
            self.write_mapping(league, KIND_HOME_STANDING, standings.home),
            self.write_mapping(league, KIND_AWAY_STANDING, standings.away),
        ]

    def write_analysis(self, league: str, analysis: LeagueAnalysis) -> List[Path]:
        return [
            self.write_mapping(league, KIND_HOME_ANALYSIS, analysis.home),
            self.write_mapping(league, KIND_AWAY_ANALYSIS, analysis.away),
        ]

    def write_league(self, league: str, standings: LeagueStandings, analysis: LeagueAnalysis) -> List[Path]:
        """Persist all four mappings of one league."""
        return self.write_standings(league, standings) + self.write_analysis(league, analysis)

    def list_leagues(self) -> List[str]:
        """Leagues with at least one stored mapping, sorted."""
        if not self._root.is_dir():
            return []
        leagues = []
        for child in sorted(self._root.iterdir()):
            if child.is_dir() and any((child / f"{child.name}-{kind}.json").exists() for kind in KINDS):
                leagues.append(child.name)
        return leagues


def write_fixtures(path: str | Path, league_data: Mapping[str, List[Dict[str, Any]]]) -> Path:
    """Write a league document ({league: [fixtures]}) readable by FileFixtureSource."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(dict(league_data), indent=2), encoding="utf-8")
    logger.info("Wrote %d league(s) of fixtures to %s", len(league_data), path)
    return path
