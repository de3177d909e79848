"""Shared fixtures and helpers for optscan tests."""

from __future__ import annotations

import io
import json
import os
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import patch

import pytest

from optscan.core.scanner import OptionScanner
from optscan.helpers import reload_config
from tests.fixtures import TAR_LIKE_OPTION_LIST_DICT


@pytest.fixture(autouse=True)
def clean_environment() -> Iterator[None]:
    """Run every test without POSIXLY_CORRECT or optscan settings leaking in."""
    keys = [
        key
        for key in os.environ
        if key == "POSIXLY_CORRECT" or key.startswith("OPTSCAN_")
    ]
    with patch.dict(os.environ):
        for key in keys:
            del os.environ[key]
        reload_config()
        yield
    reload_config()


@pytest.fixture
def error_stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def scanner(error_stream: io.StringIO) -> OptionScanner:
    """A scanner in default (permuting) mode that writes diagnostics to a buffer."""
    return OptionScanner(posixly_correct=False, error_stream=error_stream)


@pytest.fixture
def option_list_file(tmp_path: Path) -> Path:
    path = tmp_path / "options.json"
    path.write_text(json.dumps(TAR_LIKE_OPTION_LIST_DICT, indent=2))
    return path


def collect(scanner: OptionScanner, argv: list[str], optstring: str, longopts=()):
    """Run a scan session to completion and return ``(token, argument)`` pairs."""
    return [
        (result.token, result.argument)
        for result in scanner.iter_options(argv, optstring, longopts)
    ]
