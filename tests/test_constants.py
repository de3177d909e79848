"""Tests for the _constants module."""

import os
import re
from pathlib import Path
from unittest.mock import patch

from optscan._constants import (
    DEFAULT_OPTION_WIDTH,
    END_OF_OPTIONS,
    EXIT_SUCCESS,
    MISSING_ARGUMENT,
    NON_OPTION,
    OPTSTRING_PATTERN,
    PROG_NAME,
    UNRECOGNIZED,
    __version__,
    load_config,
    reload_environment,
)


class TestConstants:
    """Test that all constants are defined with expected values."""

    def test_version(self) -> None:
        """Test version constant is consistent with pyproject.toml."""
        pyproject_path = Path(__file__).parent.parent / "pyproject.toml"
        content = pyproject_path.read_text(encoding="utf-8")
        match = re.search(r'^version\s*=\s*"([^"]+)"', content, re.MULTILINE)
        assert match is not None
        assert __version__ == match.group(1)

    def test_program_constants(self) -> None:
        assert PROG_NAME == "optscan"
        assert EXIT_SUCCESS == 0

    def test_tokens_are_distinct(self) -> None:
        tokens = {END_OF_OPTIONS, NON_OPTION, UNRECOGNIZED, MISSING_ARGUMENT}
        assert len(tokens) == 4
        assert END_OF_OPTIONS == -1
        assert NON_OPTION == 1

    def test_optstring_grammar(self) -> None:
        for valid in ("", "+", "-ab", ":a:b::", "x0:9::"):
            assert OPTSTRING_PATTERN.fullmatch(valid)
        for invalid in ("a:::", "+-a", "a+", "ab;"):
            assert not OPTSTRING_PATTERN.fullmatch(invalid)


class TestLoadConfig:
    """Test the load_config function with various environment configurations."""

    def test_default_config(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            config = load_config()
            assert config["OPTSCAN_DEBUG"] is False
            assert config["OPTSCAN_LOGGING_ENABLED"] is False
            assert config["OPTSCAN_OPTION_WIDTH"] == DEFAULT_OPTION_WIDTH
            assert config["POSIXLY_CORRECT"] is False

    def test_debug_setting(self) -> None:
        for value in ["1", "true", "yes", "debug"]:
            with patch.dict(os.environ, {"OPTSCAN_DEBUG": value}):
                assert load_config()["OPTSCAN_DEBUG"] is True

        for value in ["", "0", "false", "F"]:
            with patch.dict(os.environ, {"OPTSCAN_DEBUG": value}):
                assert load_config()["OPTSCAN_DEBUG"] is False

    def test_logging_setting(self) -> None:
        with patch.dict(os.environ, {"OPTSCAN_LOGGING_ENABLED": "1"}):
            assert load_config()["OPTSCAN_LOGGING_ENABLED"] is True

        for value in ["0", "true", "yes", ""]:
            with patch.dict(os.environ, {"OPTSCAN_LOGGING_ENABLED": value}):
                assert load_config()["OPTSCAN_LOGGING_ENABLED"] is False

    def test_option_width_setting(self) -> None:
        with patch.dict(os.environ, {"OPTSCAN_OPTION_WIDTH": "24"}):
            assert load_config()["OPTSCAN_OPTION_WIDTH"] == 24

        for value in ["0", "-3", "wide"]:
            with patch.dict(os.environ, {"OPTSCAN_OPTION_WIDTH": value}):
                assert load_config()["OPTSCAN_OPTION_WIDTH"] == DEFAULT_OPTION_WIDTH

    def test_posixly_correct_presence(self) -> None:
        # only presence matters, not the value
        for value in ["", "0", "1"]:
            with patch.dict(os.environ, {"POSIXLY_CORRECT": value}):
                assert load_config()["POSIXLY_CORRECT"] is True

    def test_all_config_keys_present(self) -> None:
        assert set(load_config()) == {
            "OPTSCAN_DEBUG",
            "OPTSCAN_LOGGING_ENABLED",
            "OPTSCAN_OPTION_WIDTH",
            "POSIXLY_CORRECT",
        }

    def test_reload_environment_updates_in_place(self) -> None:
        config = load_config()
        with patch.dict(os.environ, {"OPTSCAN_DEBUG": "1"}):
            result = reload_environment(config)
        assert result is config
        assert config["OPTSCAN_DEBUG"] is True
