"""Option tables and option list documents shared by the tests."""

from __future__ import annotations

import copy
from typing import Any

from optscan.core.options import ArgFlags, OptionExtra, OptionList, OptionSpec

TAR_LIKE_OPTION_LIST_DICT: dict[str, Any] = {
    "usage": "tar [OPTION]... [FILE]...",
    "groups": ["Operation", "Output"],
    "options": [
        {
            "option": {"name": "create", "has_arg": "none", "val": "c"},
            "description": "create a new archive",
            "group": "Operation",
        },
        {
            "option": {"name": "x", "has_arg": "none", "val": "x"},
            "description": "extract files from an archive",
            "group": "Operation",
        },
        {
            "option": {"name": "file", "has_arg": "required", "val": "f"},
            "description": "use archive file ARCHIVE",
            "group": "Output",
            "arg_label": "ARCHIVE",
        },
        {
            "option": {"name": "color", "has_arg": "optional", "val": 300},
            "description": "colorize the listing",
            "group": "Output",
            "arg_label": "WHEN",
        },
    ],
}


def create_option_list(**overrides: Any) -> OptionList:
    data = copy.deepcopy(TAR_LIKE_OPTION_LIST_DICT)
    data.update(overrides)
    return OptionList.model_validate(data)


def create_option_extras() -> list[OptionExtra]:
    return create_option_list().options


def create_long_options() -> list[OptionSpec]:
    """Long table used by most scanner tests: verbose, output=, color[=]."""
    return [
        OptionSpec(name="verbose", has_arg=ArgFlags.NONE, val="v"),
        OptionSpec(name="output", has_arg=ArgFlags.REQUIRED, val="o"),
        OptionSpec(name="color", has_arg=ArgFlags.OPTIONAL, val=300),
    ]
