"""Option descriptors for the scanner using Pydantic.

``OptionSpec`` mirrors glibc's ``struct option``; ``OptionExtra`` decorates it
with the description, group and argument label the usage printer needs, and
``OptionList`` is the JSON document the command-line front end loads.
"""

from __future__ import annotations

import json as json_module
from enum import IntEnum
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from optscan._constants import SHORT_OPTION_PATTERN


class ArgFlags(IntEnum):
    """Argument requirement of an option (glibc's ``has_arg``)."""

    NONE = 0
    REQUIRED = 1
    OPTIONAL = 2


class OptionSpec(BaseModel):
    """Long option descriptor.

    A ``name`` of length one marks an option that only has a short form.
    ``val`` is what the scanner returns when the option matches. ``flag`` is
    reserved and must stay zero.
    """

    model_config = {"frozen": True}

    name: str = Field(..., min_length=1, description="Long name of the option")
    has_arg: ArgFlags = ArgFlags.NONE
    val: str | int
    flag: int = 0

    @field_validator("has_arg", mode="before")
    @classmethod
    def coerce_has_arg(cls, value: Any) -> Any:
        """Accept ``"none"``, ``"required"`` and ``"optional"`` as well as 0/1/2."""
        if isinstance(value, str):
            try:
                return ArgFlags[value.strip().upper()]
            except KeyError:
                raise ValueError(
                    f"has_arg must be one of none, required, optional (got {value!r})"
                ) from None
        return value

    @field_validator("val")
    @classmethod
    def validate_val(cls, value: str | int) -> str | int:
        if isinstance(value, str) and len(value) != 1:
            raise ValueError("val must be a single character or an integer")
        return value

    @field_validator("flag")
    @classmethod
    def validate_flag(cls, value: int) -> int:
        if value != 0:
            raise ValueError("flag is reserved and must be zero")
        return value

    @property
    def short_char(self) -> str | None:
        """The short option character, or None when the option is long-only."""
        if isinstance(self.val, str) and SHORT_OPTION_PATTERN.match(self.val):
            return self.val
        return None

    @property
    def is_long(self) -> bool:
        return len(self.name) > 1


class OptionExtra(BaseModel):
    """An option plus the text needed to describe it in usage output."""

    option: OptionSpec
    description: str = ""
    group: str | None = None
    arg_label: str | None = None


class OptionList(BaseModel):
    """Declarative option list loaded by the command-line front end."""

    usage: str = ""
    options: list[OptionExtra] = Field(default_factory=list)
    groups: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_unique_names(self) -> OptionList:
        """Reject duplicate long names and duplicate short characters."""
        seen_names: set[str] = set()
        seen_chars: set[str] = set()
        for extra in self.options:
            spec = extra.option
            if spec.is_long:
                if spec.name in seen_names:
                    raise ValueError(f"duplicate long option name '{spec.name}'")
                seen_names.add(spec.name)
            char = spec.short_char
            if char is not None:
                if char in seen_chars:
                    raise ValueError(f"duplicate short option '{char}'")
                seen_chars.add(char)
        return self

    @classmethod
    def from_json(cls, json_str: str) -> OptionList:
        return cls.model_validate_json(json_str)


def validate_option_list(json_str: str) -> tuple[bool, dict[str, Any]]:
    """Validate an option list JSON document.

    Args:
        json_str: JSON text to validate

    Returns:
        Tuple of (is_valid, errors). ``errors`` maps a dotted field path
        (``"__root__"`` for document-level problems) to its message.
    """
    try:
        json_module.loads(json_str)
    except json_module.JSONDecodeError as exc:
        return False, {"__root__": f"Invalid JSON: {exc}"}

    try:
        OptionList.from_json(json_str)
    except ValidationError as exc:
        errors: dict[str, Any] = {}
        for error in exc.errors():
            path = ".".join(str(part) for part in error["loc"]) or "__root__"
            errors[path] = error["msg"]
        return False, errors

    return True, {}
