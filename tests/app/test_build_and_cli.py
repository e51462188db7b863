# tests/app/test_build_and_cli.py
import json
import logging

import pytest
from click.testing import CliRunner

from polypath.app.build import build
from polypath.cli import cli
from polypath.errors import InvalidInputError
from polypath.io.poly_format import SAMPLE_POLY
from polypath.io.search_logging import SearchLogging
from polypath.search.hooks import NoopHooks


def test_build_and_run_sample():
    app = build({"graph": {"by": "sample"}, "query": {"start": 0, "end": 2}}, use_logging=False)
    r = app.run()
    assert r.path == [0, 1, 2]
    assert app.query(0, 0).path == [0]


def test_build_wires_logging_hooks():
    app = build({"run_id": "abc", "log": {"level": "WARNING"}})
    assert isinstance(app.engine.hooks, SearchLogging)
    assert app.engine.hooks.run_id == "abc"
    assert app.engine.hooks.log.level == logging.WARNING


def test_build_without_logging_uses_noop_hooks():
    assert type(build({}, use_logging=False).engine.hooks) is NoopHooks


def test_run_without_query_fails():
    app = build({}, use_logging=False)
    with pytest.raises(ValueError):
        app.run()


def test_query_unknown_id_propagates():
    app = build({}, use_logging=False)
    with pytest.raises(InvalidInputError):
        app.query(0, 77)


def test_build_synthetic_is_reproducible():
    cfg = {"graph": {"by": "synthetic", "n_points": 30, "radius": 260.0, "seed": 8}}
    a, b = build(cfg, use_logging=False), build(cfg, use_logging=False)
    assert a.graph == b.graph
    assert a.query(0, 29).cost == b.query(0, 29).cost


# ---------- CLI


def test_cli_route_sample_json():
    res = CliRunner().invoke(cli, ["route", "0", "2", "--json"])
    assert res.exit_code == 0, res.output
    payload = json.loads(res.output.strip().splitlines()[-1])
    assert payload["path"] == [0, 1, 2]
    assert payload["reachable"] is True
    assert payload["nodes_explored"] == 9


def test_cli_route_text_report(tmp_path):
    f = tmp_path / "g.poly"
    f.write_text(SAMPLE_POLY, encoding="utf-8")
    res = CliRunner().invoke(cli, ["route", "0", "7", "--file", str(f), "--log-level", "ERROR"])
    assert res.exit_code == 0, res.output
    assert "Path from 0 to 7: 0 -> 9 -> 8 -> 7" in res.output
    assert "Nodes explored:" in res.output


def test_cli_unknown_node_is_an_error():
    res = CliRunner().invoke(cli, ["route", "0", "99", "--log-level", "ERROR"])
    assert res.exit_code == 1
    assert "end id 99" in res.output


def test_cli_bad_config(tmp_path):
    f = tmp_path / "cfg.json"
    f.write_text('{"metric": {"kind": "nope"}}', encoding="utf-8")
    res = CliRunner().invoke(cli, ["route", "0", "1", "--config", str(f)])
    assert res.exit_code == 1
    assert "bad config" in res.output


def test_cli_sample_writes_file(tmp_path):
    out = tmp_path / "exemplo.poly"
    res = CliRunner().invoke(cli, ["sample", str(out)])
    assert res.exit_code == 0
    assert out.read_text(encoding="utf-8") == SAMPLE_POLY


def test_cli_non_utf8_graph_file(tmp_path):
    f = tmp_path / "bad.poly"
    f.write_bytes(b"1\t2\t0\t1\n0\t1\t1\n\xff\xfe\n0\t1\n")
    res = CliRunner().invoke(cli, ["route", "0", "0", "--file", str(f)])
    assert res.exit_code == 1
    assert isinstance(res.exception, SystemExit)
    assert "not UTF-8" in res.output


def test_cli_dialect_requires_file():
    res = CliRunner().invoke(cli, ["route", "0", "2", "--dialect", "labeled"])
    assert res.exit_code == 2
    assert "--dialect" in res.output


def test_cli_logs_quiet_by_default(caplog):
    res = CliRunner().invoke(cli, ["route", "0", "2"])
    assert res.exit_code == 0, res.output
    assert [r for r in caplog.records if r.getMessage() == "search_end"] == []
    assert res.output.splitlines()[0] == "Path from 0 to 2: 0 -> 1 -> 2"


def test_cli_log_level_opt_in(caplog):
    res = CliRunner().invoke(cli, ["route", "0", "2", "--log-level", "INFO"])
    assert res.exit_code == 0, res.output
    (rec,) = [r for r in caplog.records if r.getMessage() == "search_end"]
    assert rec.extra["path"] == [0, 1, 2]
