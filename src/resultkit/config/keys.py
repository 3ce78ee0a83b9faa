# topmark:header:start
#
#   project      : ResultKit
#   file         : keys.py
#   file_relpath : src/resultkit/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for ResultKit configuration.

These are the strings read from ``resultkit.toml`` and from
``[tool.resultkit]`` in ``pyproject.toml``. Renaming or removing a key is a
breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by ResultKit configuration."""

    # pyproject.toml nesting
    SECTION_TOOL: Final[str] = "tool"
    SECTION_RESULTKIT: Final[str] = "resultkit"

    # [formats]
    SECTION_FORMATS: Final[str] = "formats"

    KEY_DISABLED: Final[str] = "disabled"
    KEY_LOAD_PLUGINS: Final[str] = "load_plugins"

    # [logging]
    SECTION_LOGGING: Final[str] = "logging"

    KEY_LEVEL: Final[str] = "level"

    # ---------------------------- Schema helpers ----------------------------

    ALLOWED_TOP_LEVEL_KEYS: Final[frozenset[str]] = frozenset(
        {
            SECTION_FORMATS,
            SECTION_LOGGING,
        }
    )

    ALLOWED_SECTION_KEYS: Final[dict[str, frozenset[str]]] = {
        SECTION_FORMATS: frozenset({KEY_DISABLED, KEY_LOAD_PLUGINS}),
        SECTION_LOGGING: frozenset({KEY_LEVEL}),
    }
