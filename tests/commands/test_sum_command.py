"""Tests for the sum command."""

import json

from typer.testing import CliRunner

from conftest import make_task
from timr_cli.main import app

runner = CliRunner()


def _seed(store):
    store.prepend(make_task("review", date="2024-01-01", time_start="0800", time_end="0830"))
    store.prepend(make_task("review", time_start="0900", time_end="1000"))
    store.prepend(make_task("review", time_start="1015"))


def test_sum_all(store, store_path, frozen_now):
    _seed(store)
    result = runner.invoke(app, ["sum", "review", "--store", str(store_path)])

    assert result.exit_code == 0
    assert "1 hours, 30 minutes" in result.output
    assert "0130" in result.output


def test_sum_within_days(store, store_path, frozen_now):
    _seed(store)
    result = runner.invoke(
        app, ["sum", "review", "--days", "0", "-o", "json", "--store", str(store_path)]
    )

    assert result.exit_code == 0
    assert json.loads(result.output) == {"task_name": "review", "days": 0, "minutes": 60}


def test_sum_unknown(store, store_path, frozen_now):
    _seed(store)
    result = runner.invoke(app, ["sum", "ghost", "--store", str(store_path)])

    assert result.exit_code == 5
    assert "No completed task named 'ghost'" in result.output


def test_sum_negative_total_shows_sign_and_warns(store, store_path, frozen_now):
    store.prepend(make_task("late", time_start="2300", time_end="0100"))
    result = runner.invoke(app, ["sum", "late", "--store", str(store_path)])

    assert result.exit_code == 0
    assert "-22 hours, 0 minutes" in result.output
    assert "Warning" in result.output
    assert "earlier than start" in result.output


def test_sum_positive_total_does_not_warn(store, store_path, frozen_now):
    _seed(store)
    result = runner.invoke(app, ["sum", "review", "--store", str(store_path)])

    assert "Warning" not in result.output
    assert "-1 hours" not in result.output
