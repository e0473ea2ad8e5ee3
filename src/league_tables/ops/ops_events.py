"""
Structured ops events for pipeline milestones and I/O failures.
Log-level + structured event dict; deterministic keys (no random ids).
"""

from __future__ import annotations

import logging
import time
from typing import Any, Dict

OPS_LOGGER_NAME = "ops_events"


def _logger() -> logging.Logger:
    return logging.getLogger(OPS_LOGGER_NAME)


def _event(event_type: str, level: int = logging.INFO, **kwargs: Any) -> None:
    """Emit a structured ops event (sorted keys)."""
    msg = f"ops_event={event_type} " + " ".join(f"{k}={v!r}" for k, v in sorted(kwargs.items()))
    _logger().log(level, msg, extra={"ops_event_type": event_type, "ops_event": {**kwargs}})


def log_league_start(league: str, fixtures_count: int) -> float:
    """Log league processing start; return start time for duration calculation."""
    _event("league_start", league=league, fixtures_count=fixtures_count)
    return time.perf_counter()


def log_league_end(
    league: str,
    duration_seconds: float,
    teams_home: int = 0,
    teams_away: int = 0,
    error: str | None = None,
) -> None:
    payload: Dict[str, Any] = {
        "league": league,
        "duration_seconds": round(duration_seconds, 4),
        "teams_home": teams_home,
        "teams_away": teams_away,
    }
    if error:
        payload["error"] = error
        _event("league_end", level=logging.ERROR, **payload)
        return
    _event("league_end", **payload)


def log_source_failure(source: str, target: str, error: str) -> None:
    """Log one failed read/fetch (a file path or URL); siblings keep going."""
    _event("source_failure", level=logging.ERROR, source=source, target=target, error=error)


def log_store_write(league: str, kind: str, path: str, entries: int) -> None:
    _event("store_write", league=league, kind=kind, path=path, entries=entries)
