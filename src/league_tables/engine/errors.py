"""Engine errors."""

from __future__ import annotations


class InvalidFixtureError(ValueError):
    """Raised when a fixture (or a standings update) carries malformed data.

    The engine never coerces bad data into a zero or partial Standing; callers
    decide whether to skip the fixture or abort the league.
    """
