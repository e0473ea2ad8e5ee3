"""
Engine data model: fixtures, outcomes, per-team standings and derived analysis.
Serialized keys (GP, W, D, L, GF, GA, GD, Pts / AHG, AHCG, AS, DS) match the persisted JSON format.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict

from .errors import InvalidFixtureError


class Outcome(str, Enum):
    """Result of a match from one team's perspective."""

    WIN = "win"
    LOSS = "loss"
    DRAW = "draw"


class Side(str, Enum):
    """Which fixtures a standing is measured from."""

    HOME = "home"
    AWAY = "away"


def check_score(value: Any, label: str) -> int:
    """Return value if it is a non-negative int (bool excluded); raise InvalidFixtureError otherwise."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidFixtureError(f"{label} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise InvalidFixtureError(f"{label} must be >= 0, got {value}")
    return value


def check_team(value: Any, label: str) -> str:
    """Return value if it is a non-empty team name; raise InvalidFixtureError otherwise."""
    if not isinstance(value, str) or not value.strip():
        raise InvalidFixtureError(f"{label} must be a non-empty string, got {value!r}")
    return value


@dataclass(frozen=True)
class Fixture:
    """One played match with final scores."""

    home_team: str
    away_team: str
    home_score: int
    away_score: int

    def __post_init__(self) -> None:
        check_team(self.home_team, "home_team")
        check_team(self.away_team, "away_team")
        check_score(self.home_score, "home_score")
        check_score(self.away_score, "away_score")


STANDING_KEYS = ("GP", "W", "D", "L", "GF", "GA", "GD", "Pts")


@dataclass
class Standing:
    """Running aggregate for one team in one league and side.

    goal_difference is derived from goals_for and goals_against and cannot be set.
    """

    games_played: int = 0
    wins: int = 0
    draws: int = 0
    losses: int = 0
    goals_for: int = 0
    goals_against: int = 0
    points: int = 0

    @property
    def goal_difference(self) -> int:
        return self.goals_for - self.goals_against

    def to_dict(self) -> Dict[str, int]:
        return {
            "GP": self.games_played,
            "W": self.wins,
            "D": self.draws,
            "L": self.losses,
            "GF": self.goals_for,
            "GA": self.goals_against,
            "GD": self.goal_difference,
            "Pts": self.points,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Standing":
        """Build a Standing from its serialized form. GD is recomputed, not trusted."""
        if not isinstance(data, dict):
            raise InvalidFixtureError(f"standing must be an object, got {type(data).__name__}")
        missing = [k for k in STANDING_KEYS if k != "GD" and k not in data]
        if missing:
            raise InvalidFixtureError(f"standing missing keys: {', '.join(missing)}")
        standing = cls(
            games_played=check_score(data["GP"], "GP"),
            wins=check_score(data["W"], "W"),
            draws=check_score(data["D"], "D"),
            losses=check_score(data["L"], "L"),
            goals_for=check_score(data["GF"], "GF"),
            goals_against=check_score(data["GA"], "GA"),
            points=check_score(data["Pts"], "Pts"),
        )
        if standing.games_played != standing.wins + standing.draws + standing.losses:
            raise InvalidFixtureError(
                f"standing GP={standing.games_played} does not equal W+D+L="
                f"{standing.wins + standing.draws + standing.losses}"
            )
        if standing.points != 3 * standing.wins + standing.draws:
            raise InvalidFixtureError(
                f"standing Pts={standing.points} does not equal 3W+D={3 * standing.wins + standing.draws}"
            )
        return standing


@dataclass
class LeagueStats:
    """League-wide goal totals for one side; normalizer for strength ratios."""

    total_gf: int = 0
    total_ga: int = 0
    counted_teams: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {"totalGF": self.total_gf, "totalGA": self.total_ga, "countedTeams": self.counted_teams}


@dataclass(frozen=True)
class HomeAwayAnalysis:
    """Per-team averages and league-relative strengths (lower strength ratio = stronger)."""

    avg_goals: float
    avg_conceded: float
    attack_strength: float
    defense_strength: float

    def to_dict(self) -> Dict[str, float]:
        return {
            "AHG": self.avg_goals,
            "AHCG": self.avg_conceded,
            "AS": self.attack_strength,
            "DS": self.defense_strength,
        }


@dataclass
class LeagueStandings:
    """Standings of one league for one run: home-only and away-only mappings keyed by team."""

    home: Dict[str, Standing] = field(default_factory=dict)
    away: Dict[str, Standing] = field(default_factory=dict)

    def side(self, side: Side) -> Dict[str, Standing]:
        return self.home if Side(side) is Side.HOME else self.away


@dataclass
class LeagueAnalysis:
    """Analysis of one league: home and away mappings keyed by team."""

    home: Dict[str, HomeAwayAnalysis] = field(default_factory=dict)
    away: Dict[str, HomeAwayAnalysis] = field(default_factory=dict)

    def side(self, side: Side) -> Dict[str, HomeAwayAnalysis]:
        return self.home if Side(side) is Side.HOME else self.away
