#!/usr/bin/env python3
"""
Integration tests for the reminder CLI.

Each command runs against a temporary data file; a FixedClock is handed
in through the context object so due-date output is deterministic.
"""
import json

import pytest
from click.testing import CliRunner

from reminder.database.cli import cli
from reminder.utils.temporal import FixedClock, timestamp_for_date


class TestReminderCLI:
    """Test reminder CLI commands with a temporary data file."""

    @pytest.fixture
    def runner(self):
        """Create Click test runner."""
        return CliRunner()

    @pytest.fixture
    def clock(self):
        return FixedClock(timestamp_for_date(2024, 3, 8))

    @pytest.fixture
    def test_dirs(self, tmp_path):
        """Temporary locations for data, logs and config."""
        return {
            "data_file": tmp_path / "data.json",
            "log_dir": tmp_path / "logs",
            "config": tmp_path / "config.yaml",
        }

    def invoke_cli(self, runner, test_dirs, clock, args, **kwargs):
        """Helper to invoke CLI with test configuration."""
        base_args = [
            "--data-file", str(test_dirs["data_file"]),
            "--log-dir", str(test_dirs["log_dir"]),
            "--config", str(test_dirs["config"]),
        ]
        return runner.invoke(cli, base_args + args, obj={"clock": clock}, **kwargs)

    def stored(self, test_dirs):
        return json.loads(test_dirs["data_file"].read_text(encoding="utf-8"))

    def test_cli_help(self, runner):
        """Top-level help lists the command groups."""
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "note" in result.output
        assert "tag" in result.output

    def test_init_creates_data_file(self, runner, test_dirs, clock):
        result = self.invoke_cli(runner, test_dirs, clock, ["init", "--name", "Ada"])
        assert result.exit_code == 0
        assert "Created with 7 tags" in result.output
        assert self.stored(test_dirs)["user"]["name"] == "Ada"

    def test_init_twice(self, runner, test_dirs, clock):
        self.invoke_cli(runner, test_dirs, clock, ["init"])
        result = self.invoke_cli(runner, test_dirs, clock, ["init"])
        assert result.exit_code == 0
        assert "already exists" in result.output

    def test_stats_bootstraps_missing_file(self, runner, test_dirs, clock):
        result = self.invoke_cli(runner, test_dirs, clock, ["stats"])
        assert result.exit_code == 0
        assert "Number of Tags: 7" in result.output
        assert test_dirs["data_file"].exists()

    def test_stats_json(self, runner, test_dirs, clock):
        result = self.invoke_cli(runner, test_dirs, clock, ["stats", "--json"])
        assert json.loads(result.output)["tag_count"] == 7

    def test_tag_add_and_list(self, runner, test_dirs, clock):
        result = self.invoke_cli(runner, test_dirs, clock, ["tag", "add", "Work", "--group", "office"])
        assert result.exit_code == 0
        assert "id 7" in result.output

        result = self.invoke_cli(runner, test_dirs, clock, ["tag", "list"])
        assert "work  [office]" in result.output

    def test_duplicate_tag_fails(self, runner, test_dirs, clock):
        result = self.invoke_cli(runner, test_dirs, clock, ["tag", "add", "tips"])
        assert result.exit_code == 1
        assert "DuplicateSlugError" in result.output

    def test_note_lifecycle(self, runner, test_dirs, clock):
        """Add, edit and complete a note through the CLI."""
        result = self.invoke_cli(runner, test_dirs, clock, ["note", "add", "Pay rent", "-t", "current"])
        assert result.exit_code == 0

        for args in (
            ["note", "comment", "1", "asked landlord"],
            ["note", "due-date", "1", "10-03-2024"],
            ["note", "summary", "1", "Before the 10th"],
            ["note", "toggle-main", "1"],
        ):
            clock.advance(1)
            result = self.invoke_cli(runner, test_dirs, clock, args)
            assert result.exit_code == 0, result.output

        result = self.invoke_cli(runner, test_dirs, clock, ["note", "show", "1"])
        assert "asked landlord" in result.output
        assert "Before the 10th" in result.output

        result = self.invoke_cli(runner, test_dirs, clock, ["due"])
        assert "Pay rent" in result.output

        result = self.invoke_cli(runner, test_dirs, clock, ["note", "done", "1"])
        assert "Marked as done" in result.output
        assert self.stored(test_dirs)["notes"][0]["status"] == "done"

        result = self.invoke_cli(runner, test_dirs, clock, ["due"])
        assert "Nothing is due" in result.output

    def test_index_follows_most_recent_update(self, runner, test_dirs, clock):
        self.invoke_cli(runner, test_dirs, clock, ["note", "add", "older", "-t", "current"])
        clock.advance(5)
        self.invoke_cli(runner, test_dirs, clock, ["note", "add", "newer", "-t", "current"])

        result = self.invoke_cli(runner, test_dirs, clock, ["note", "list"])
        lines = [line for line in result.output.splitlines() if line.strip().startswith(("1.", "2."))]
        assert "newer" in lines[0]
        assert "older" in lines[1]

    def test_repeat_note_status_skipped(self, runner, test_dirs, clock):
        self.invoke_cli(runner, test_dirs, clock, ["note", "add", "Birthday", "-t", "repeat-annually"])
        result = self.invoke_cli(runner, test_dirs, clock, ["note", "done", "1"])
        assert result.exit_code == 0
        assert "Status unchanged" in result.output
        assert self.stored(test_dirs)["notes"][0]["status"] == "pending"

    def test_invalid_date(self, runner, test_dirs, clock):
        self.invoke_cli(runner, test_dirs, clock, ["note", "add", "Pay rent", "-t", "current"])
        result = self.invoke_cli(runner, test_dirs, clock, ["note", "due-date", "1", "2024-03-10"])
        assert result.exit_code == 1
        assert "InvalidDateError" in result.output

    def test_unknown_tag(self, runner, test_dirs, clock):
        result = self.invoke_cli(runner, test_dirs, clock, ["note", "add", "x", "-t", "nope"])
        assert result.exit_code == 1
        assert "Unknown tag: nope" in result.output

    def test_bad_index(self, runner, test_dirs, clock):
        result = self.invoke_cli(runner, test_dirs, clock, ["note", "show", "3"])
        assert result.exit_code == 1
        assert "No note at index 3" in result.output

    def test_search_and_tag_notes(self, runner, test_dirs, clock):
        self.invoke_cli(runner, test_dirs, clock, ["note", "add", "Renew passport", "-t", "priority-urgent"])
        result = self.invoke_cli(runner, test_dirs, clock, ["search", "PASSPORT"])
        assert "Renew passport" in result.output

        result = self.invoke_cli(runner, test_dirs, clock, ["tag", "notes", "priority-urgent"])
        assert "Renew passport" in result.output

    def test_note_tags_replaced(self, runner, test_dirs, clock):
        self.invoke_cli(runner, test_dirs, clock, ["note", "add", "x", "-t", "current"])
        result = self.invoke_cli(runner, test_dirs, clock, ["note", "tags", "1", "-t", "tips", "-t", "priority-low"])
        assert result.exit_code == 0
        assert self.stored(test_dirs)["notes"][0]["tag_ids"] == [6, 3]

    def test_backup_list_and_restore(self, runner, test_dirs, clock):
        self.invoke_cli(runner, test_dirs, clock, ["init"])
        result = self.invoke_cli(runner, test_dirs, clock, ["backup"])
        assert result.exit_code == 0
        assert "Backup created" in result.output

        result = self.invoke_cli(runner, test_dirs, clock, ["backups"])
        assert "Total backups: 1" in result.output

        clock.advance(10)
        self.invoke_cli(runner, test_dirs, clock, ["note", "add", "later", "-t", "current"])
        backup_path = test_dirs["data_file"].with_name("data_backup_latest.json")
        clock.advance(10)
        result = self.invoke_cli(runner, test_dirs, clock, ["restore", str(backup_path), "--yes"])
        assert result.exit_code == 0, result.output
        assert self.stored(test_dirs)["notes"] == []

    def test_auto_backup_respects_gap(self, runner, test_dirs, clock):
        self.invoke_cli(runner, test_dirs, clock, ["init"])
        result = self.invoke_cli(runner, test_dirs, clock, ["auto-backup", "--gap", "0"])
        assert "Backup created" in result.output

        clock.advance(100)
        result = self.invoke_cli(runner, test_dirs, clock, ["auto-backup", "--gap", "3600"])
        assert "skipping" in result.output

    def test_auto_backup_gap_from_config(self, runner, test_dirs, clock):
        test_dirs["config"].write_text("auto_backup_gap_secs: 999999999999\n", encoding="utf-8")
        self.invoke_cli(runner, test_dirs, clock, ["init"])
        result = self.invoke_cli(runner, test_dirs, clock, ["auto-backup"])
        assert "skipping" in result.output

    def test_invalid_config(self, runner, test_dirs, clock):
        test_dirs["config"].write_text("auto_backup_gap_secs: -5\n", encoding="utf-8")
        result = self.invoke_cli(runner, test_dirs, clock, ["stats"])
        assert result.exit_code == 1
        assert "ValidationError" in result.output
