"""Tests for the end command."""

import json

from typer.testing import CliRunner

from timr_cli.main import app

runner = CliRunner()


def _run(store_path, *args):
    return runner.invoke(app, [*args, "--store", str(store_path)])


def test_start_then_end(store, store_path, frozen_now):
    _run(store_path, "start", "debugging", "0700")
    result = _run(store_path, "end", "debugging", "1200")

    assert result.exit_code == 0
    assert "debugging ended at 1200 (5 hours, 0 minutes)" in result.output
    [task] = store.read_all()
    assert task.time_total == 300


def test_end_defaults_to_now(store, store_path, frozen_now):
    _run(store_path, "start", "debugging", "0930")
    result = _run(store_path, "end", "debugging")

    assert result.exit_code == 0
    assert store.read_all()[0].time_end == "1030"


def test_end_unknown_task(store_path, frozen_now):
    result = _run(store_path, "end", "ghost", "1000")

    assert result.exit_code == 5
    assert "No open task named 'ghost'" in result.output


def test_end_invalid_time(store, store_path, frozen_now):
    _run(store_path, "start", "debugging", "0700")
    result = _run(store_path, "end", "debugging", "12:00")

    assert result.exit_code == 2
    assert store.read_all()[0].is_open


def test_end_json_output(store_path, frozen_now):
    _run(store_path, "start", "late", "2300")
    result = _run(store_path, "end", "late", "0100", "-o", "json")

    assert result.exit_code == 0
    assert json.loads(result.output)["time_total"] == -1320


def test_corrupt_store_exit_code(store_path, frozen_now):
    store_path.write_text("{not json\n", encoding="utf-8")
    result = _run(store_path, "end", "debugging", "1000")

    assert result.exit_code == 7
    assert "Corrupt task record (line 1" in result.output


def test_end_before_start_warns(store, store_path, frozen_now):
    _run(store_path, "start", "late", "2300")
    result = _run(store_path, "end", "late", "0100")

    assert result.exit_code == 0
    assert "late ended at 0100 (-22 hours, 0 minutes)" in result.output
    assert "Warning" in result.output
    assert "earlier than start" in result.output


def test_end_after_start_does_not_warn(store_path, frozen_now):
    _run(store_path, "start", "debugging", "0700")
    result = _run(store_path, "end", "debugging", "0800")

    assert "Warning" not in result.output
