"""Test fixtures for optscan tests."""

from .option_lists import (
    TAR_LIKE_OPTION_LIST_DICT,
    create_long_options,
    create_option_extras,
    create_option_list,
)

__all__ = [
    "TAR_LIKE_OPTION_LIST_DICT",
    "create_long_options",
    "create_option_extras",
    "create_option_list",
]
