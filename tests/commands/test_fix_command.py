"""Tests for the fix command."""

import json

from typer.testing import CliRunner

from conftest import make_task
from timr_cli.main import app

runner = CliRunner()


def _seed(store):
    store.prepend(make_task("old", date="2024-01-10", time_start="0800", time_end="0900"))
    store.prepend(make_task("second", time_start="0800", time_end="0900"))
    store.prepend(make_task("first", time_start="0930"))


def _fix(store_path, *args, input=None):
    return runner.invoke(app, ["fix", *args, "--store", str(store_path)], input=input)


class TestFixCommand:
    def test_fix_by_index(self, store, store_path, frozen_now):
        _seed(store)
        result = _fix(store_path, "--index", "1", "--end", "1030")

        assert result.exit_code == 0
        assert "Amended second" in result.output
        assert store.read_all()[1].time_total == 150

    def test_fix_start_of_open_task(self, store, store_path, frozen_now):
        _seed(store)
        result = _fix(store_path, "-n", "0", "--start", "0900", "-o", "json")

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["time_start"] == "0900"
        assert data["time_total"] == 0

    def test_fix_prompts_for_index(self, store, store_path, frozen_now):
        _seed(store)
        result = _fix(store_path, "--end", "1000", input="0\n")

        assert result.exit_code == 0
        assert "Index of the task to amend" in result.output
        first = store.read_all()[0]
        assert (first.task_name, first.time_total) == ("first", 30)

    def test_fix_wider_window(self, store, store_path, frozen_now):
        _seed(store)
        result = _fix(store_path, "--days", "7", "-n", "2", "--start", "0700")

        assert result.exit_code == 0
        assert store.read_all()[2].time_total == 120

    def test_fix_bad_index(self, store, store_path, frozen_now):
        _seed(store)
        result = _fix(store_path, "-n", "2", "--end", "1000")

        assert result.exit_code == 5
        assert "No task at index 2" in result.output

    def test_fix_requires_a_change(self, store, store_path, frozen_now):
        _seed(store)
        result = _fix(store_path, "-n", "0")
        assert result.exit_code == 2

    def test_fix_invalid_time(self, store, store_path, frozen_now):
        _seed(store)
        result = _fix(store_path, "-n", "0", "--end", "10:00")
        assert result.exit_code == 2

    def test_fix_nothing_listed(self, store_path, frozen_now):
        result = _fix(store_path, "--end", "1000")
        assert result.exit_code == 0
        assert "No tasks within 0 day(s)" in result.output
