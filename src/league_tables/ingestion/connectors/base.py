"""
Abstract base for fixture sources.

A source returns raw league data (league id -> list of feed records) plus the
individual reads/fetches that failed. Validation happens later, at the boundary.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List


class SourceError(Exception):
    """Raised when a source cannot produce any league data at all."""


@dataclass
class SourceFailure:
    """One failed file read or URL fetch."""

    target: str
    error: str

    def to_dict(self) -> Dict[str, str]:
        return {"target": self.target, "error": self.error}


@dataclass
class SourceResult:
    leagues: Dict[str, List[Any]] = field(default_factory=dict)
    failures: List[SourceFailure] = field(default_factory=list)


def merge_league_data(target: Dict[str, List[Any]], data: Dict[str, List[Any]]) -> None:
    """Merge data into target in place; fixtures of a league seen twice are appended."""
    for league, fixtures in data.items():
        target.setdefault(league, []).extend(fixtures)


class FixtureSource(ABC):
    """Fixture source: load raw fixtures for every configured league."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique identifier for this source."""
        ...

    @abstractmethod
    async def load(self) -> SourceResult:
        """Load all leagues. Individual failures are reported in the result, not raised."""
        ...
