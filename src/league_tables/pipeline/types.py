from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from league_tables.engine.types import LeagueAnalysis, LeagueStandings
from league_tables.ingestion.connectors.base import SourceFailure


@dataclass
class LeagueResult:
    """Standings and analysis of one league, with what validation dropped."""

    league: str
    standings: LeagueStandings
    analysis: LeagueAnalysis
    fixtures_count: int = 0
    unplayed_count: int = 0
    invalid: List[str] = field(default_factory=list)
    written: List[str] = field(default_factory=list)

    def summary(self) -> Dict[str, Any]:
        return {
            "league": self.league,
            "fixtures": self.fixtures_count,
            "unplayed": self.unplayed_count,
            "invalid": len(self.invalid),
            "teams_home": len(self.standings.home),
            "teams_away": len(self.standings.away),
            "written": list(self.written),
        }


@dataclass
class LeagueFailure:
    league: str
    error: str

    def to_dict(self) -> Dict[str, str]:
        return {"league": self.league, "error": self.error}


@dataclass
class RunReport:
    """Result from one pipeline run."""

    status: str  # "OK" | "PARTIAL" | "NO_DATA"
    source: str
    leagues: Dict[str, LeagueResult] = field(default_factory=dict)
    league_failures: List[LeagueFailure] = field(default_factory=list)
    source_failures: List[SourceFailure] = field(default_factory=list)
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "status": self.status,
            "source": self.source,
            "leagues": [r.summary() for r in self.leagues.values()],
            "league_failures": [f.to_dict() for f in self.league_failures],
            "source_failures": [f.to_dict() for f in self.source_failures],
        }
        if self.error:
            out["error"] = self.error
        return out
