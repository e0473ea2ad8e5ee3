"""Operational logging: structured ops events."""

from .ops_events import (
    log_league_end,
    log_league_start,
    log_source_failure,
    log_store_write,
)

__all__ = [
    "log_league_end",
    "log_league_start",
    "log_source_failure",
    "log_store_write",
]
