from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, Dict, List, Optional

from league_tables.core.concurrency import settle_all
from league_tables.engine.analysis import analyze_league
from league_tables.engine.standings import aggregate_league
from league_tables.ingestion.connectors.base import FixtureSource, SourceError
from league_tables.ingestion.validator import POLICY_SKIP, validate_league
from league_tables.ops.ops_events import log_league_end, log_league_start
from league_tables.reports.store import StandingsStore

from .types import LeagueFailure, LeagueResult, RunReport

logger = logging.getLogger(__name__)


def process_league(league: str, raw_fixtures: Any, policy: str = POLICY_SKIP) -> LeagueResult:
    """
    Validate one league's raw fixtures, aggregate home/away standings and analyze them.
    Raises InvalidFixtureError under the 'abort' policy (or when the league payload is not a list).
    """
    validated = validate_league(league, raw_fixtures, policy=policy)
    for message in validated.errors:
        logger.warning("Skipping invalid fixture %s", message)
    standings = aggregate_league(validated.fixtures)
    analysis = analyze_league(standings)
    return LeagueResult(
        league=league,
        standings=standings,
        analysis=analysis,
        fixtures_count=len(validated.fixtures),
        unplayed_count=validated.unplayed,
        invalid=list(validated.errors),
    )


async def _run_league(
    league: str,
    raw_fixtures: Any,
    store: Optional[StandingsStore],
    policy: str,
) -> LeagueResult:
    count = len(raw_fixtures) if isinstance(raw_fixtures, list) else 0
    t_start = log_league_start(league, count)
    try:
        result = process_league(league, raw_fixtures, policy=policy)
        if store is not None:
            paths = await asyncio.to_thread(store.write_league, league, result.standings, result.analysis)
            result.written = [str(p) for p in paths]
    except Exception as e:
        log_league_end(league, time.perf_counter() - t_start, error=str(e))
        raise
    log_league_end(
        league,
        time.perf_counter() - t_start,
        teams_home=len(result.standings.home),
        teams_away=len(result.standings.away),
    )
    return result


async def run_leagues(
    leagues: Dict[str, Any],
    store: Optional[StandingsStore] = None,
    policy: str = POLICY_SKIP,
) -> tuple[Dict[str, LeagueResult], List[LeagueFailure]]:
    """Process every league concurrently; a failed league never stops the others."""
    tasks = {league: _run_league(league, fixtures, store, policy) for league, fixtures in leagues.items()}
    results, failed = await settle_all(tasks)
    failures: List[LeagueFailure] = []
    for league, exc in failed.items():
        logger.error("League %s failed: %s", league, exc)
        failures.append(LeagueFailure(league=league, error=str(exc)))
    return results, failures


async def run_pipeline(
    source: FixtureSource,
    store: Optional[StandingsStore] = None,
    policy: str = POLICY_SKIP,
) -> RunReport:
    """Run one pass: load fixtures from the source, process all leagues, persist when a store is given.

    Steps:
    1. Load raw league data (per-file/per-URL failures are collected, not raised)
    2. Validate, aggregate and analyze each league on its own task
    3. Persist the four mappings per league
    4. Summarize into a RunReport

    Returns:
        RunReport with status OK (every league done, no source failure), PARTIAL, or NO_DATA
    """
    try:
        loaded = await source.load()
    except SourceError as e:
        logger.error("Source %s produced no data: %s", source.name, e)
        return RunReport(status="NO_DATA", source=source.name, error=str(e))

    results, failures = await run_leagues(loaded.leagues, store=store, policy=policy)

    if not results:
        status = "NO_DATA"
    elif failures or loaded.failures:
        status = "PARTIAL"
    else:
        status = "OK"

    return RunReport(
        status=status,
        source=source.name,
        leagues=results,
        league_failures=failures,
        source_failures=list(loaded.failures),
    )


def analyze_persisted(store: StandingsStore, league: str) -> LeagueResult:
    """Recompute and persist the analysis of a league from its stored home/away standings."""
    standings = store.read_league_standings(league)
    analysis = analyze_league(standings)
    paths = store.write_analysis(league, analysis)
    return LeagueResult(
        league=league,
        standings=standings,
        analysis=analysis,
        written=[str(p) for p in paths],
    )
