"""Tests for the optscan CLI."""

import json
import os
from unittest.mock import patch

from typer.testing import CliRunner

from optscan._constants import PROG_NAME, __version__
from optscan.cli import app
from optscan.helpers import reload_config

runner = CliRunner()


class TestCLI:
    """Test top-level CLI behaviour."""

    def test_version_flag(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert f"{PROG_NAME} {__version__}" in result.stdout

    def test_version_short_flag(self):
        result = runner.invoke(app, ["-V"])
        assert result.exit_code == 0
        assert f"{PROG_NAME} {__version__}" in result.stdout

    def test_help_flag(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "glibc-compatible command-line option scanning" in result.stdout
        assert "scan" in result.stdout
        assert "usage" in result.stdout

    def test_no_args_shows_help(self):
        result = runner.invoke(app, [])
        # Exit code can be 0 or 2 depending on Python/Typer version
        assert result.exit_code in (0, 2)
        output = result.stdout or result.output
        assert "Usage:" in output


class TestScanCommand:
    """Test `optscan scan`."""

    def test_scan_short_and_long(self):
        result = runner.invoke(
            app,
            ["scan", "-o", "ac:", "-l", "verbose", "--", "x", "-a", "--verbose", "-cv"],
        )
        assert result.exit_code == 0
        assert result.stdout.strip() == "-a --verbose -c 'v' -- 'x'"

    def test_scan_reports_rejected_options(self):
        result = runner.invoke(app, ["scan", "-o", "a", "-n", "tool", "--", "-z"])
        assert result.exit_code == 1
        assert "tool: unrecognised option 'z'" in result.output

    def test_scan_bad_optstring(self):
        result = runner.invoke(app, ["scan", "-o", "a::::", "--", "-a"])
        assert result.exit_code == 2
        assert "Bad option string" in result.output

    def test_scan_json(self):
        result = runner.invoke(app, ["scan", "-o", "a", "--json", "--", "-a", "f"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["options"] == [{"option": "-a", "argument": None}]
        assert data["operands"] == ["f"]

    def test_scan_debug_output(self):
        with patch.dict(os.environ, {"OPTSCAN_DEBUG": "1"}):
            reload_config()
            result = runner.invoke(app, ["scan", "-o", "a", "--", "-a"])
        assert result.exit_code == 0
        assert "scan: optstring='a'" in result.output


class TestUsageCommands:
    """Test `optscan usage` and `optscan validate-options`."""

    def test_usage(self, option_list_file):
        result = runner.invoke(app, ["usage", str(option_list_file)])
        assert result.exit_code == 0
        assert result.stdout.startswith("Usage: tar [OPTION]... [FILE]...")
        assert "  -f ARCHIVE, --file=ARCHIVE" in result.stdout

    def test_usage_selected_group(self, option_list_file):
        result = runner.invoke(
            app, ["usage", str(option_list_file), "--group", "Operation"]
        )
        assert result.exit_code == 0
        assert "Operation:" in result.stdout
        assert "Output:" not in result.stdout

    def test_validate_options_success(self, option_list_file):
        result = runner.invoke(app, ["validate-options", str(option_list_file)])
        assert result.exit_code == 0
        assert "Option list is valid" in result.stdout
        assert "optstring: 'cxf:'" in result.stdout

    def test_validate_options_failure(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(
            json.dumps(
                {"options": [{"option": {"name": "out", "val": "o", "flag": 1}}]}
            )
        )
        result = runner.invoke(app, ["validate-options", str(path)])
        assert result.exit_code == 1
        assert "Option list validation failed" in result.stdout
