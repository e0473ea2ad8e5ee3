# Ensure src/ is at sys.path[0] when pytest runs from a checkout without an install
import sys
from pathlib import Path

import pytest

_src = Path(__file__).resolve().parent.parent / "src"
_str_src = str(_src)
if sys.path[0:1] != [_str_src]:
    sys.path.insert(0, _str_src)

SETTINGS_ENV = (
    "APP_NAME",
    "ENV",
    "LOG_LEVEL",
    "LOG_FILE",
    "FIXTURES_FILES",
    "FIXTURES_URLS",
    "STANDINGS_DIR",
    "FETCH_TIMEOUT_SECONDS",
    "INVALID_FIXTURE_POLICY",
)


@pytest.fixture
def epl_2024():
    """Four records: home win, draw, away win, and one unplayed fixture."""
    return [
        {"HomeTeam": "Arsenal", "AwayTeam": "Chelsea", "HomeTeamScore": 2, "AwayTeamScore": 1},
        {"HomeTeam": "Chelsea", "AwayTeam": "Liverpool", "HomeTeamScore": 0, "AwayTeamScore": 0},
        {"HomeTeam": "Liverpool", "AwayTeam": "Arsenal", "HomeTeamScore": 1, "AwayTeamScore": 3},
        {"HomeTeam": "Arsenal", "AwayTeam": "Liverpool", "HomeTeamScore": None, "AwayTeamScore": None},
    ]


@pytest.fixture
def clean_env(monkeypatch):
    """Unset every variable Settings.from_env reads."""
    for name in SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
