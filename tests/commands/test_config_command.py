"""Tests for the config sub-commands (view, get, set, reset, list)."""

import json

from typer.testing import CliRunner

from timr_cli.commands.config import _parse_value, app
from timr_cli.config import get_config_manager

runner = CliRunner()


class TestHelpFlags:
    def test_app_help(self):
        assert runner.invoke(app, ["--help"]).exit_code == 0

    def test_set_help(self):
        assert runner.invoke(app, ["set", "--help"]).exit_code == 0


class TestParseValue:
    def test_booleans(self):
        assert _parse_value("true") is True
        assert _parse_value("False") is False

    def test_none(self):
        assert _parse_value("none") is None
        assert _parse_value("null") is None

    def test_digits(self):
        assert _parse_value("42") == 42

    def test_text(self):
        assert _parse_value("~/timr.jsonl") == "~/timr.jsonl"


class TestView:
    def test_table(self):
        result = runner.invoke(app, ["view"])
        assert result.exit_code == 0
        assert "output.format = table" in result.output
        assert "logging.level = INFO" in result.output

    def test_json(self):
        result = runner.invoke(app, ["view", "-o", "json"])
        assert json.loads(result.output)["store"] == {"path": None}


class TestGetSet:
    def test_set_then_get(self, tmp_path):
        path = str(tmp_path / "tasks.jsonl")
        result = runner.invoke(app, ["set", "store.path", path])
        assert result.exit_code == 0
        assert "Success" in result.output

        result = runner.invoke(app, ["get", "store.path"])
        assert result.exit_code == 0
        assert path in result.output

    def test_set_persists_to_profile_file(self):
        runner.invoke(app, ["set", "output.color", "false", "--profile", "work"])
        manager = get_config_manager("work")
        assert manager.config_file.exists()
        assert json.loads(manager.config_file.read_text())["output"]["color"] is False

    def test_get_unset_value_prints_none(self):
        result = runner.invoke(app, ["get", "store.path"])
        assert result.exit_code == 0
        assert "None" in result.output

    def test_get_unknown_key(self):
        result = runner.invoke(app, ["get", "store.nope"])
        assert result.exit_code == 5
        assert "not found" in result.output

    def test_set_unknown_key(self):
        result = runner.invoke(app, ["set", "api.endpoint", "x"])
        assert result.exit_code == 5

    def test_set_invalid_value(self):
        result = runner.invoke(app, ["set", "output.color", "maybe"])
        assert result.exit_code == 2
        assert "Invalid value" in result.output


class TestReset:
    def test_reset_key(self):
        runner.invoke(app, ["set", "logging.level", "DEBUG"])
        result = runner.invoke(app, ["reset", "logging.level", "--yes"])

        assert result.exit_code == 0
        assert get_config_manager().get("logging.level") == "INFO"

    def test_reset_all_confirmed(self):
        runner.invoke(app, ["set", "output.format", "json"])
        result = runner.invoke(app, ["reset"], input="y\n")

        assert result.exit_code == 0
        assert get_config_manager().get("output.format") == "table"

    def test_reset_cancelled(self):
        runner.invoke(app, ["set", "output.format", "json"])
        result = runner.invoke(app, ["reset"], input="n\n")

        assert result.exit_code == 0
        assert "Cancelled" in result.output
        assert get_config_manager().get("output.format") == "json"

    def test_reset_unknown_key(self):
        result = runner.invoke(app, ["reset", "nope", "--yes"])
        assert result.exit_code == 5


class TestListProfiles:
    def test_no_profiles(self):
        result = runner.invoke(app, ["list"])
        assert "No profiles found" in result.output

    def test_marks_current(self):
        runner.invoke(app, ["set", "output.format", "json"])
        runner.invoke(app, ["set", "output.format", "json", "--profile", "work"])
        result = runner.invoke(app, ["list", "--profile", "work"])

        assert "default" in result.output
        assert "work *" in result.output
