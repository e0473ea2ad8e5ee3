"""Pipeline: fixtures -> validated leagues -> standings -> analysis -> store."""

from .pipeline import analyze_persisted, process_league, run_leagues, run_pipeline
from .types import LeagueFailure, LeagueResult, RunReport

__all__ = [
    "LeagueFailure",
    "LeagueResult",
    "RunReport",
    "analyze_persisted",
    "process_league",
    "run_leagues",
    "run_pipeline",
]
