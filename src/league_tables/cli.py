"""
League tables CLI.
Usage: league-tables run [--source file|web] [--dry-run]
       league-tables fetch --output PATH
       league-tables analyze [--league ID]
       league-tables serve [--host HOST] [--port PORT]
Configuration comes from the environment (FIXTURES_FILES, FIXTURES_URLS, STANDINGS_DIR, LOG_FILE, ...).
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import List, Optional

from league_tables.core.config import ConfigError, Settings
from league_tables.core.logging import setup_logging

logger = logging.getLogger("league_tables.cli")


def _cmd_run(args: argparse.Namespace, settings: Settings) -> int:
    from league_tables.ingestion.registry import get_source
    from league_tables.pipeline import run_pipeline
    from league_tables.reports.store import StandingsStore

    try:
        source = get_source(args.source, settings)
    except KeyError as e:
        print(f"Error: {e.args[0]}", file=sys.stderr)
        return 2
    store = None if args.dry_run else StandingsStore(settings.require("standings_dir"))
    report = asyncio.run(run_pipeline(source, store=store, policy=settings.invalid_fixture_policy))
    print(json.dumps(report.to_dict(), indent=2))
    logger.info("Run finished: status=%s leagues=%d", report.status, len(report.leagues))
    return 1 if report.status == "NO_DATA" else 0


def _cmd_fetch(args: argparse.Namespace, settings: Settings) -> int:
    from league_tables.ingestion.connectors.web_source import WebFixtureSource
    from league_tables.ingestion.validator import extract_played
    from league_tables.reports.store import write_fixtures

    source = WebFixtureSource(settings.require("fixtures_urls"), timeout=settings.fetch_timeout_seconds)
    loaded = asyncio.run(source.load())
    if not loaded.leagues:
        print("No feed could be fetched; see log for details.", file=sys.stderr)
        return 1
    extracted = {league: extract_played(records) for league, records in loaded.leagues.items()}
    path = write_fixtures(args.output, extracted)
    print(f"{path},{len(extracted)},{len(loaded.failures)}")
    return 0


def _cmd_analyze(args: argparse.Namespace, settings: Settings) -> int:
    from league_tables.pipeline import analyze_persisted
    from league_tables.reports.store import StandingsStore, StoreError

    store = StandingsStore(settings.require("standings_dir"))
    leagues = [args.league] if args.league else store.list_leagues()
    if not leagues:
        print(f"No stored standings under {store.root}", file=sys.stderr)
        return 1
    failed = 0
    for league in leagues:
        try:
            result = analyze_persisted(store, league)
        except StoreError as e:
            logger.error("Analysis of %s failed: %s", league, e)
            failed += 1
            continue
        print(f"{league},{len(result.analysis.home)},{len(result.analysis.away)}")
    return 1 if failed else 0


def _cmd_serve(args: argparse.Namespace, settings: Settings) -> int:
    import uvicorn

    uvicorn.run("league_tables.main:app", host=args.host, port=args.port, log_level=settings.log_level.lower())
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="league-tables", description="Home/away standings and strength analysis.")
    sub = parser.add_subparsers(dest="command", required=True)

    run = sub.add_parser("run", help="Load fixtures, compute standings and analysis, persist them")
    run.add_argument("--source", default="file", help="Fixture source: file (FIXTURES_FILES) or web (FIXTURES_URLS)")
    run.add_argument("--dry-run", action="store_true", help="Compute and report without writing to STANDINGS_DIR")
    run.set_defaults(func=_cmd_run)

    fetch = sub.add_parser("fetch", help="Fetch FIXTURES_URLS and write played fixtures to a local league file")
    fetch.add_argument("--output", required=True, help="Path of the league document to write")
    fetch.set_defaults(func=_cmd_fetch)

    analyze = sub.add_parser("analyze", help="Recompute analysis from stored standings")
    analyze.add_argument("--league", default=None, help="Only this league (default: every stored league)")
    analyze.set_defaults(func=_cmd_analyze)

    serve = sub.add_parser("serve", help="Serve the read-only API")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)
    serve.set_defaults(func=_cmd_serve)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = Settings.from_env()
        setup_logging(settings)
        return args.func(args, settings)
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
