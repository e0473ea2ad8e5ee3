"""Outcome classification and the 3-1-0 points rule. Nothing else in the package scores matches."""

from __future__ import annotations

from .types import Outcome

POINTS = {
    Outcome.WIN: 3,
    Outcome.DRAW: 1,
    Outcome.LOSS: 0,
}


def classify(score: int, opponent_score: int) -> Outcome:
    """Outcome for the team that scored `score`."""
    if score > opponent_score:
        return Outcome.WIN
    if score < opponent_score:
        return Outcome.LOSS
    return Outcome.DRAW


def points_for(outcome: Outcome) -> int:
    return POINTS[Outcome(outcome)]
