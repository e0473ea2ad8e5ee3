"""league-tables CLI: run, analyze and fetch against local files and a mock feed."""

from __future__ import annotations

import functools
import json
from pathlib import Path

import httpx
import pytest

from league_tables import cli
from league_tables.ingestion.connectors import web_source


def _league_file(tmp_path: Path, data) -> Path:
    path = tmp_path / "leagues.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_run_persists_and_prints_report(tmp_path: Path, clean_env, epl_2024, capsys) -> None:
    clean_env.setenv("FIXTURES_FILES", str(_league_file(tmp_path, {"epl-2024": epl_2024})))
    clean_env.setenv("STANDINGS_DIR", str(tmp_path / "standings"))

    assert cli.main(["run"]) == 0

    report = json.loads(capsys.readouterr().out)
    assert report["status"] == "OK"
    assert report["leagues"][0]["league"] == "epl-2024"
    assert (tmp_path / "standings" / "epl-2024" / "epl-2024-homeStanding.json").exists()


def test_run_dry_run_writes_nothing(tmp_path: Path, clean_env, epl_2024, capsys) -> None:
    clean_env.setenv("FIXTURES_FILES", str(_league_file(tmp_path, {"epl-2024": epl_2024})))

    assert cli.main(["run", "--dry-run"]) == 0
    assert json.loads(capsys.readouterr().out)["leagues"][0]["written"] == []


def test_run_no_data_exits_nonzero(tmp_path: Path, clean_env, capsys) -> None:
    clean_env.setenv("FIXTURES_FILES", str(_league_file(tmp_path, {})))
    clean_env.setenv("STANDINGS_DIR", str(tmp_path / "standings"))

    assert cli.main(["run"]) == 1
    assert json.loads(capsys.readouterr().out)["status"] == "NO_DATA"


def test_run_missing_config(clean_env, capsys) -> None:
    assert cli.main(["run"]) == 2
    assert "FIXTURES_FILES" in capsys.readouterr().err


def test_run_unknown_source(clean_env, capsys) -> None:
    assert cli.main(["run", "--source", "ftp"]) == 2
    assert "Unknown source" in capsys.readouterr().err


def test_analyze_stored_leagues(tmp_path: Path, clean_env, epl_2024, capsys) -> None:
    clean_env.setenv("FIXTURES_FILES", str(_league_file(tmp_path, {"epl-2024": epl_2024, "laliga-2024": epl_2024})))
    clean_env.setenv("STANDINGS_DIR", str(tmp_path / "standings"))
    assert cli.main(["run"]) == 0
    capsys.readouterr()

    assert cli.main(["analyze"]) == 0
    assert capsys.readouterr().out.splitlines() == ["epl-2024,3,3", "laliga-2024,3,3"]

    assert cli.main(["analyze", "--league", "serie-a"]) == 1


def test_analyze_empty_store(tmp_path: Path, clean_env, capsys) -> None:
    clean_env.setenv("STANDINGS_DIR", str(tmp_path / "standings"))
    assert cli.main(["analyze"]) == 1
    assert "No stored standings" in capsys.readouterr().err


def test_fetch_writes_played_fixtures(tmp_path: Path, clean_env, epl_2024, monkeypatch, capsys) -> None:
    feed = [dict(r, MatchNumber=i) for i, r in enumerate(epl_2024)]
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json=feed))
    monkeypatch.setattr(web_source, "WebFixtureSource", functools.partial(web_source.WebFixtureSource, transport=transport))
    clean_env.setenv("FIXTURES_URLS", "https://feeds.example.test/feed/json/epl-2024")
    output = tmp_path / "out" / "leagues.json"

    assert cli.main(["fetch", "--output", str(output)]) == 0
    assert json.loads(output.read_text(encoding="utf-8")) == {"epl-2024": epl_2024[:3]}
    assert capsys.readouterr().out.strip() == f"{output},1,0"


def test_run_does_not_hide_internal_key_errors(tmp_path: Path, clean_env, epl_2024, monkeypatch) -> None:
    import league_tables.pipeline as pipeline

    async def broken_pipeline(*args, **kwargs):
        return {}["status"]

    monkeypatch.setattr(pipeline, "run_pipeline", broken_pipeline)
    clean_env.setenv("FIXTURES_FILES", str(_league_file(tmp_path, {"epl-2024": epl_2024})))

    with pytest.raises(KeyError, match="status"):
        cli.main(["run", "--dry-run"])
