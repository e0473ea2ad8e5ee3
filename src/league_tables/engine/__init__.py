"""Aggregation engine: outcome classification, home/away standings, strength analysis."""

from .analysis import analyze_league, analyze_standings, analyze_team, collect_league_stats
from .errors import InvalidFixtureError
from .outcome import classify, points_for
from .standings import aggregate_league, apply_fixture, combine_standings, update_standing
from .types import (
    Fixture,
    HomeAwayAnalysis,
    LeagueAnalysis,
    LeagueStandings,
    LeagueStats,
    Outcome,
    Side,
    Standing,
)

__all__ = [
    "Fixture",
    "HomeAwayAnalysis",
    "InvalidFixtureError",
    "LeagueAnalysis",
    "LeagueStandings",
    "LeagueStats",
    "Outcome",
    "Side",
    "Standing",
    "aggregate_league",
    "analyze_league",
    "analyze_standings",
    "analyze_team",
    "apply_fixture",
    "classify",
    "collect_league_stats",
    "combine_standings",
    "points_for",
    "update_standing",
]
