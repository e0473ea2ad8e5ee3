"""
Validate raw league data at the boundary: typed Fixture lists out, unplayed fixtures dropped,
malformed ones reported (skip policy) or raised as InvalidFixtureError (abort policy).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from league_tables.engine.errors import InvalidFixtureError
from league_tables.engine.types import Fixture

from .schema import RawFixture

POLICY_SKIP = "skip"
POLICY_ABORT = "abort"


@dataclass
class ValidationReport:
    ok: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


@dataclass
class LeagueFixtures:
    """Validated fixtures of one league plus what was dropped on the way."""

    league: str
    fixtures: List[Fixture] = field(default_factory=list)
    unplayed: int = 0
    errors: List[str] = field(default_factory=list)


def _describe(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "record"
        parts.append(f"{loc}: {err.get('msg', 'invalid')}")
    return "; ".join(parts)


def parse_raw_fixture(raw: Any) -> RawFixture:
    """Parse one raw record. Raises InvalidFixtureError if it is not a well-formed fixture."""
    if not isinstance(raw, dict):
        raise InvalidFixtureError(f"fixture must be an object, got {type(raw).__name__}")
    try:
        return RawFixture.model_validate(raw)
    except ValidationError as e:
        raise InvalidFixtureError(_describe(e)) from e


def parse_fixture(raw: Any) -> Optional[Fixture]:
    """Fixture for a played record, None for an unplayed one (null score)."""
    record = parse_raw_fixture(raw)
    if not record.is_played:
        return None
    return record.to_fixture()


def validate_league(league: str, raw_fixtures: Any, policy: str = POLICY_SKIP) -> LeagueFixtures:
    """
    Validate every record of one league in order.
    policy 'skip' drops malformed records and lists them in errors; 'abort' raises on the first one.
    """
    if policy not in (POLICY_SKIP, POLICY_ABORT):
        raise ValueError(f"Unknown invalid fixture policy: {policy!r}")
    if not isinstance(raw_fixtures, list):
        raise InvalidFixtureError(f"{league}: fixtures must be a list, got {type(raw_fixtures).__name__}")

    result = LeagueFixtures(league=league)
    for index, raw in enumerate(raw_fixtures):
        try:
            fixture = parse_fixture(raw)
        except InvalidFixtureError as e:
            message = f"{league}[{index}]: {e}"
            if policy == POLICY_ABORT:
                raise InvalidFixtureError(message) from e
            result.errors.append(message)
            continue
        if fixture is None:
            result.unplayed += 1
        else:
            result.fixtures.append(fixture)
    return result


def check_league_data(data: Any) -> ValidationReport:
    """Shape check for a league document: object of league id -> list of records."""
    if not isinstance(data, dict):
        return ValidationReport(ok=False, errors=["root must be a JSON object of league -> fixtures"])
    errors: List[str] = []
    warnings: List[str] = []
    if not data:
        warnings.append("no leagues in document")
    for league, fixtures in data.items():
        if not str(league).strip():
            errors.append("league id cannot be empty")
        if not isinstance(fixtures, list):
            errors.append(f"{league}: fixtures must be a list")
        elif not fixtures:
            warnings.append(f"{league}: no fixtures")
    return ValidationReport(ok=len(errors) == 0, errors=errors, warnings=warnings)


def extract_played(raw_fixtures: List[Any]) -> List[Dict[str, Any]]:
    """Reduce feed records to the four fixture fields, keeping only valid played matches."""
    extracted: List[Dict[str, Any]] = []
    for raw in raw_fixtures:
        try:
            record = parse_raw_fixture(raw)
        except InvalidFixtureError:
            continue
        if record.is_played:
            extracted.append(record.to_feed_dict())
    return extracted
