"""Persistence: JSON files of [team, record] pairs per league and kind."""

from .store import KINDS, StandingsStore, StoreError, write_fixtures

__all__ = ["KINDS", "StandingsStore", "StoreError", "write_fixtures"]
