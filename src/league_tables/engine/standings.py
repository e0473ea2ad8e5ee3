"""
Standings aggregation: fold played fixtures into per-team home and away standings.
Pure in-memory transforms; no I/O and no logging.
"""

from __future__ import annotations

from typing import Dict, Iterable, Optional

from .errors import InvalidFixtureError
from .outcome import classify, points_for
from .types import Fixture, LeagueStandings, Outcome, Standing, check_score, check_team


def update_standing(
    standings: Dict[str, Standing],
    team: str,
    team_score: int,
    opponent_score: int,
) -> Standing:
    """
    Record one match for `team` in `standings` and return the team's Standing.

    Creates the entry on the team's first match; otherwise updates it in place.
    Arguments are checked before anything is mutated (InvalidFixtureError on bad data).
    """
    check_team(team, "team")
    check_score(team_score, "team_score")
    check_score(opponent_score, "opponent_score")

    outcome = classify(team_score, opponent_score)
    standing = standings.get(team)
    if standing is None:
        standing = Standing()
        standings[team] = standing

    standing.games_played += 1
    standing.goals_for += team_score
    standing.goals_against += opponent_score
    if outcome is Outcome.WIN:
        standing.wins += 1
    elif outcome is Outcome.DRAW:
        standing.draws += 1
    else:
        standing.losses += 1
    standing.points += points_for(outcome)
    return standing


def apply_fixture(standings: LeagueStandings, fixture: Fixture) -> None:
    """Record a fixture from the home team's side and from the away team's side."""
    update_standing(standings.home, fixture.home_team, fixture.home_score, fixture.away_score)
    update_standing(standings.away, fixture.away_team, fixture.away_score, fixture.home_score)


def aggregate_league(
    fixtures: Iterable[Fixture],
    standings: Optional[LeagueStandings] = None,
) -> LeagueStandings:
    """
    Fold fixtures (in the given order) into home/away standings.
    Pass an existing LeagueStandings to accumulate into it; otherwise a fresh one is created.
    """
    if standings is None:
        standings = LeagueStandings()
    for fixture in fixtures:
        if not isinstance(fixture, Fixture):
            raise InvalidFixtureError(f"expected Fixture, got {type(fixture).__name__}")
        apply_fixture(standings, fixture)
    return standings


def combine_standings(
    home: Dict[str, Standing],
    away: Dict[str, Standing],
) -> Dict[str, Standing]:
    """Overall standings regardless of side: every field summed per team. Inputs are not modified."""
    combined: Dict[str, Standing] = {}
    for mapping in (home, away):
        for team, s in mapping.items():
            total = combined.setdefault(team, Standing())
            total.games_played += s.games_played
            total.wins += s.wins
            total.draws += s.draws
            total.losses += s.losses
            total.goals_for += s.goals_for
            total.goals_against += s.goals_against
            total.points += s.points
    return combined
