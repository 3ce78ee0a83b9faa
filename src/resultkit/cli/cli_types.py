# topmark:header:start
#
#   project      : ResultKit
#   file         : cli_types.py
#   file_relpath : src/resultkit/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end


"""Shared CLI parameter types for ResultKit."""

from __future__ import annotations

from enum import Enum
from typing import Any, Generic, TypeVar

import click

E = TypeVar("E", bound=Enum)


class OutputFormat(str, Enum):
    """Output format for CLI rendering.

    Members:
      DEFAULT: Human-friendly text output; may include ANSI color if enabled.
      JSON: A single JSON document (machine-readable).
      NDJSON: One JSON object per line (machine-readable).
      MARKDOWN: A Markdown table.
    """

    DEFAULT = "default"
    JSON = "json"
    NDJSON = "ndjson"
    MARKDOWN = "markdown"


class EnumChoiceParam(click.Choice, Generic[E]):
    """Case-insensitive choice over the values of a string Enum, converted to a member."""

    def __init__(self, enum_cls: type[E]) -> None:
        super().__init__([str(member.value) for member in enum_cls], case_sensitive=False)
        self.enum_cls: type[E] = enum_cls

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> E:
        if isinstance(value, self.enum_cls):
            return value
        choice: Any = super().convert(value, param, ctx)
        return self.enum_cls(choice)
