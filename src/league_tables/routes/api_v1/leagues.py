"""GET /api/v1/leagues, GET /api/v1/leagues/{league}/standings/{view}, GET /api/v1/leagues/{league}/analysis/{side} (read-only)."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Mapping

from fastapi import APIRouter, Depends, HTTPException

from league_tables.core.config import ConfigError, Settings
from league_tables.engine.standings import combine_standings
from league_tables.engine.types import Side
from league_tables.reports.store import ANALYSIS_KIND, StandingsStore, StoreError

router = APIRouter(prefix="/leagues", tags=["leagues"])


class StandingsView(str, Enum):
    HOME = "home"
    AWAY = "away"
    COMBINED = "combined"


def get_store() -> StandingsStore:
    """Dependency: store rooted at STANDINGS_DIR (read per request so env changes apply)."""
    try:
        root = Settings.from_env().require("standings_dir")
    except ConfigError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return StandingsStore(root)


def _teams(mapping: Mapping[str, Any]) -> List[Dict[str, Any]]:
    rows = []
    for team, record in mapping.items():
        values = record.to_dict() if hasattr(record, "to_dict") else dict(record)
        rows.append({"team": team, **values})
    return rows


@router.get("", summary="Leagues with stored standings")
def list_leagues(store: StandingsStore = Depends(get_store)) -> dict:
    return {"leagues": store.list_leagues()}


@router.get(
    "/{league}/standings/{view}",
    summary="Stored standings of a league",
    response_description="Home-only, away-only, or combined (home + away summed per team) standings.",
)
def get_standings(league: str, view: StandingsView, store: StandingsStore = Depends(get_store)) -> dict:
    try:
        if view is StandingsView.COMBINED:
            stored = store.read_league_standings(league)
            mapping = combine_standings(stored.home, stored.away)
        else:
            mapping = store.read_standings(league, Side(view.value))
    except StoreError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"league": league, "view": view.value, "teams": _teams(mapping)}


@router.get("/{league}/analysis/{side}", summary="Stored home/away strength analysis of a league")
def get_analysis(league: str, side: Side, store: StandingsStore = Depends(get_store)) -> dict:
    try:
        records = store.read_mapping(league, ANALYSIS_KIND[side])
    except StoreError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"league": league, "side": side.value, "teams": _teams(records)}
