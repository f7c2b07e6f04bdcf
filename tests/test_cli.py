"""Unit tests for CLI commands."""

import json
import pytest
from click.testing import CliRunner

from teamboard.cli import main, COMPLETED_STATUS_ENV
from teamboard.version import VERSION

BOARD_YAML = """
completed_status_id: done
teams:
  - id: t1
    name: Design
    color: "#f97316"
  - id: t2
    name: Marketing
    color: "#0ea5e9"
projects:
  - id: p1
    name: Website
    color: "#22c55e"
    team_id: t1
  - id: p2
    name: Brand
    color: "#3b82f6"
    team_id: t2
tasks:
  - id: x1
    project_id: p1
    status: done
  - id: x2
    project_id: p1
    status: todo
  - id: x3
    project_id: p2
    status: review
"""


@pytest.fixture
def runner(monkeypatch) -> CliRunner:
    """Create CLI test runner."""
    monkeypatch.delenv(COMPLETED_STATUS_ENV, raising=False)
    return CliRunner()


@pytest.fixture
def board_file(tmp_path):
    path = tmp_path / "board.yml"
    path.write_text(BOARD_YAML)
    return str(path)


class TestCliGroup:
    """Tests for main CLI group."""

    def test_help(self, runner):
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "teamboard" in result.output

    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert VERSION in result.output


class TestShowCommand:
    """Tests for show command."""

    def test_initial_state(self, runner, board_file):
        result = runner.invoke(main, ["show", board_file])
        assert result.exit_code == 0
        assert "▶ All" in result.output
        assert "Design (1)" in result.output
        assert "Website" in result.output
        assert "50% (1/2)" in result.output
        assert "Brand" in result.output

    def test_team_click(self, runner, board_file):
        result = runner.invoke(main, ["show", board_file, "--team", "t1"])
        assert result.exit_code == 0
        assert "▶ Design (1)" in result.output
        assert "Website" in result.output
        assert "Brand" not in result.output

    def test_second_click_collapses(self, runner, board_file):
        result = runner.invoke(main, ["show", board_file, "-t", "t1", "-t", "t1"])
        assert result.exit_code == 0
        assert "Projects: collapsed" in result.output
        assert "Website" not in result.output

    def test_project_click(self, runner, board_file):
        result = runner.invoke(main, ["show", board_file, "-t", "t1", "-p", "p1"])
        assert result.exit_code == 0
        assert "▶ Website" in result.output

    def test_completed_status_from_env(self, runner, board_file, monkeypatch):
        monkeypatch.setenv(COMPLETED_STATUS_ENV, "review")
        result = runner.invoke(main, ["show", board_file, "-t", "t2"])
        assert result.exit_code == 0
        assert "100% (1/1)" in result.output

    def test_missing_board(self, runner, tmp_path):
        result = runner.invoke(main, ["show", str(tmp_path / "nope.yml")])
        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_undecodable_board(self, runner, tmp_path):
        path = tmp_path / "board.yml"
        path.write_bytes(b"completed_status_id: \xff\n")
        result = runner.invoke(main, ["show", str(path)])
        assert result.exit_code == 1
        assert "Error loading board" in result.output


class TestProgressCommand:
    """Tests for progress command."""

    def test_known_project(self, runner, board_file):
        result = runner.invoke(main, ["progress", board_file, "p1"])
        assert result.exit_code == 0
        assert "Website: 50% (1/2 tasks completed)" in result.output

    def test_option_overrides_board(self, runner, board_file):
        result = runner.invoke(main, ["progress", board_file, "p2", "--completed-status", "review"])
        assert result.exit_code == 0
        assert "Brand: 100% (1/1 tasks completed)" in result.output

    def test_unknown_project(self, runner, board_file):
        result = runner.invoke(main, ["progress", board_file, "p9"])
        assert result.exit_code == 0
        assert "Unknown project 'p9'" in result.output
        assert "p9: 0% (0/0 tasks completed)" in result.output


class TestValidateCommand:
    """Tests for validate command."""

    def test_valid(self, runner, board_file):
        result = runner.invoke(main, ["validate", board_file])
        assert result.exit_code == 0
        assert "is valid" in result.output

    def test_invalid(self, runner, tmp_path):
        path = tmp_path / "board.json"
        path.write_text(json.dumps({"tasks": [{"id": "x1", "status": "todo"}]}))
        result = runner.invoke(main, ["validate", str(path)])
        assert result.exit_code == 1
        assert "completed_status_id" in result.output


class TestSchemaCommand:
    """Tests for schema command."""

    def test_print(self, runner):
        result = runner.invoke(main, ["schema"])
        assert result.exit_code == 0
        assert json.loads(result.output)["title"] == "Board"

    def test_write(self, runner, tmp_path):
        output = tmp_path / "schemas" / "board.schema.json"
        result = runner.invoke(main, ["schema", "--output", str(output)])
        assert result.exit_code == 0
        assert json.loads(output.read_text())["title"] == "Board"


class TestNotificationsCommand:
    """Tests for notifications command."""

    def test_enabled(self, runner, tmp_path):
        path = tmp_path / "prefs.yml"
        path.write_text("chat_messages: true\nemail_notifications: true\n")
        result = runner.invoke(main, ["notifications", str(path)])
        assert result.exit_code == 0
        assert result.output.index("Email notifications") < result.output.index("Chat messages")

    def test_none_enabled(self, runner, tmp_path):
        path = tmp_path / "prefs.yml"
        path.write_text("{}\n")
        result = runner.invoke(main, ["notifications", str(path)])
        assert result.exit_code == 0
        assert "No notifications enabled" in result.output
