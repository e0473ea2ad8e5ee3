"""
League strength analysis: per-game averages and league-relative attack/defense strength.

Formulas, per team in one league and side:
    AHG  = GF / GP                  (0 when GF == 0)
    AHCG = GA / GP                  (0 when GA == 0)
    AS   = league total GF / GF     (0 when either is 0; lower = stronger attack)
    DS   = league total GA / GA     (0 when either is 0; lower = stronger defense)
"""

from __future__ import annotations

from typing import Dict

from .types import HomeAwayAnalysis, LeagueAnalysis, LeagueStandings, LeagueStats, Standing


def collect_league_stats(standings: Dict[str, Standing]) -> LeagueStats:
    """Sum goals for/against over every team in the mapping."""
    stats = LeagueStats()
    for standing in standings.values():
        stats.total_gf += standing.goals_for
        stats.total_ga += standing.goals_against
        stats.counted_teams += 1
    return stats


def _ratio(numerator: int, denominator: int) -> float:
    if numerator > 0 and denominator > 0:
        return numerator / denominator
    return 0.0


def analyze_team(standing: Standing, stats: LeagueStats) -> HomeAwayAnalysis:
    gp = standing.games_played
    gf = standing.goals_for
    ga = standing.goals_against
    return HomeAwayAnalysis(
        avg_goals=gf / gp if gf > 0 and gp > 0 else 0.0,
        avg_conceded=ga / gp if ga > 0 and gp > 0 else 0.0,
        attack_strength=_ratio(stats.total_gf, gf),
        defense_strength=_ratio(stats.total_ga, ga),
    )


def analyze_standings(standings: Dict[str, Standing]) -> Dict[str, HomeAwayAnalysis]:
    """Analysis for every team in a completed standings mapping. Empty in, empty out."""
    stats = collect_league_stats(standings)
    return {team: analyze_team(standing, stats) for team, standing in standings.items()}


def analyze_league(standings: LeagueStandings) -> LeagueAnalysis:
    return LeagueAnalysis(
        home=analyze_standings(standings.home),
        away=analyze_standings(standings.away),
    )
