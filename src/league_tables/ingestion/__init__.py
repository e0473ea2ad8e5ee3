"""
Ingestion: fixture sources (file, web), boundary schema and validation.
"""

from .connectors.base import FixtureSource, SourceError, SourceFailure, SourceResult
from .validator import LeagueFixtures, validate_league

__all__ = [
    "FixtureSource",
    "LeagueFixtures",
    "SourceError",
    "SourceFailure",
    "SourceResult",
    "validate_league",
]
