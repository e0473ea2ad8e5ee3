"""StandingsStore: [team, record] pair files per league and kind."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from league_tables.engine import Fixture, Side, aggregate_league, analyze_league
from league_tables.reports.store import (
    StandingsStore,
    StoreError,
    deserialize_pairs,
    serialize_mapping,
    write_fixtures,
)

FIXTURES = [Fixture("Arsenal", "Chelsea", 2, 1), Fixture("Liverpool", "Arsenal", 1, 3)]


def test_write_league_creates_four_named_files(tmp_path: Path) -> None:
    store = StandingsStore(tmp_path)
    standings = aggregate_league(FIXTURES)
    paths = store.write_league("epl-2024", standings, analyze_league(standings))

    names = sorted(p.name for p in paths)
    assert names == [
        "epl-2024-awayAnalysis.json",
        "epl-2024-awayStanding.json",
        "epl-2024-homeAnalysis.json",
        "epl-2024-homeStanding.json",
    ]
    assert all(p.parent == tmp_path / "epl-2024" for p in paths)


def test_files_hold_ordered_pairs(tmp_path: Path) -> None:
    store = StandingsStore(tmp_path)
    standings = aggregate_league(FIXTURES)
    store.write_standings("epl-2024", standings)

    data = json.loads((tmp_path / "epl-2024" / "epl-2024-homeStanding.json").read_text(encoding="utf-8"))
    assert data == [
        ["Arsenal", {"GP": 1, "W": 1, "D": 0, "L": 0, "GF": 2, "GA": 1, "GD": 1, "Pts": 3}],
        ["Liverpool", {"GP": 1, "W": 0, "D": 0, "L": 1, "GF": 1, "GA": 3, "GD": -2, "Pts": 0}],
    ]


def test_read_back_standings(tmp_path: Path) -> None:
    store = StandingsStore(tmp_path)
    standings = aggregate_league(FIXTURES)
    store.write_standings("epl-2024", standings)

    assert store.read_standings("epl-2024", Side.AWAY) == standings.away
    assert store.read_standings("epl-2024", "home") == standings.home
    assert store.read_league_standings("epl-2024").home == standings.home


def test_serialize_and_deserialize_pairs():
    pairs = serialize_mapping({"A": {"x": 1}, "B": {"x": 2}})
    assert pairs == [["A", {"x": 1}], ["B", {"x": 2}]]
    assert deserialize_pairs(pairs) == {"A": {"x": 1}, "B": {"x": 2}}


@pytest.mark.parametrize("data", [{"A": 1}, [["A"]], [[1, {}]], ["A", {}]])
def test_deserialize_rejects_other_shapes(data):
    with pytest.raises(StoreError):
        deserialize_pairs(data)


def test_read_missing_and_malformed(tmp_path: Path) -> None:
    store = StandingsStore(tmp_path)
    with pytest.raises(StoreError, match="nothing stored"):
        store.read_standings("epl-2024", Side.HOME)

    path = store.path_for("epl-2024", "homeStanding")
    path.parent.mkdir(parents=True)
    path.write_text("not json", encoding="utf-8")
    with pytest.raises(StoreError, match="Failed to read or parse file"):
        store.read_standings("epl-2024", Side.HOME)

    path.write_text(json.dumps([["Arsenal", {"GP": 1}]]), encoding="utf-8")
    with pytest.raises(StoreError, match="malformed standing"):
        store.read_standings("epl-2024", Side.HOME)

    inconsistent = {"GP": 5, "W": 1, "D": 0, "L": 0, "GF": 1, "GA": 0, "GD": 1, "Pts": 99}
    path.write_text(json.dumps([["Arsenal", inconsistent]]), encoding="utf-8")
    with pytest.raises(StoreError, match=r"W\+D\+L"):
        store.read_standings("epl-2024", Side.HOME)

    inconsistent = {"GP": 1, "W": 1, "D": 0, "L": 0, "GF": 1, "GA": 0, "GD": 1, "Pts": 99}
    path.write_text(json.dumps([["Arsenal", inconsistent]]), encoding="utf-8")
    with pytest.raises(StoreError, match=r"3W\+D"):
        store.read_standings("epl-2024", Side.HOME)


@pytest.mark.parametrize("league", ["", "..", "../etc", "a/b", "epl 2024"])
def test_unsafe_league_id_rejected(tmp_path: Path, league: str) -> None:
    with pytest.raises(StoreError):
        StandingsStore(tmp_path).path_for(league, "homeStanding")


def test_unknown_kind_rejected(tmp_path: Path) -> None:
    with pytest.raises(StoreError, match="unknown kind"):
        StandingsStore(tmp_path).path_for("epl-2024", "overall")


def test_list_leagues(tmp_path: Path) -> None:
    store = StandingsStore(tmp_path / "standings")
    assert store.list_leagues() == []
    standings = aggregate_league(FIXTURES)
    store.write_standings("laliga-2024", standings)
    store.write_standings("epl-2024", standings)
    (store.root / "empty").mkdir()
    assert store.list_leagues() == ["epl-2024", "laliga-2024"]


def test_write_fixtures(tmp_path: Path) -> None:
    records = [{"HomeTeam": "A", "AwayTeam": "B", "HomeTeamScore": 1, "AwayTeamScore": 1}]
    path = write_fixtures(tmp_path / "out" / "leagues.json", {"epl-2024": records})
    assert json.loads(path.read_text(encoding="utf-8")) == {"epl-2024": records}
