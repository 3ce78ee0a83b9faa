# topmark:header:start
#
#   project      : ResultKit
#   file         : loaders.py
#   file_relpath : src/resultkit/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources and read typed values from them.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from resultkit.config.keys import Toml
from resultkit.config.logging import get_logger
from resultkit.constants import PYPROJECT_TOML_NAME
from resultkit.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from resultkit.config.logging import ResultKitLogger

TomlTable = dict[str, Any]

logger: ResultKitLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    except TomlkitParseError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_resultkit_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the ResultKit settings of a parsed file.

    For ``pyproject.toml`` this is the ``[tool.resultkit]`` table (``None`` when
    absent); any other file is taken as a whole.
    """
    if path.name != PYPROJECT_TOML_NAME:
        return data
    tool: Any = data.get(Toml.SECTION_TOOL, {})
    section: Any = tool.get(Toml.SECTION_RESULTKIT) if isinstance(tool, dict) else None
    if not isinstance(section, dict):
        logger.debug("No [tool.resultkit] table in %s", path)
        return None
    return cast("TomlTable", section)


def validate_keys(path: Path, data: TomlTable) -> None:
    """Check ``data`` against the known sections and keys.

    Raises:
        ConfigError: On an unknown section, an unknown key or a section that
            is not a table.
    """
    for section, body in data.items():
        if section not in Toml.ALLOWED_TOP_LEVEL_KEYS:
            raise ConfigError(f"{path}: unknown section [{section}]")
        if not isinstance(body, dict):
            raise ConfigError(f"{path}: [{section}] must be a table")
        unknown: set[str] = set(cast("TomlTable", body)) - Toml.ALLOWED_SECTION_KEYS[section]
        if unknown:
            keys: str = ", ".join(sorted(unknown))
            raise ConfigError(f"{path}: unknown key(s) in [{section}]: {keys}")


def get_table(data: TomlTable, section: str) -> TomlTable:
    value: Any = data.get(section, {})
    return cast("TomlTable", value) if isinstance(value, dict) else {}


def get_bool_value_or_none(table: TomlTable, key: str) -> bool | None:
    """Extract an optional boolean value from a TOML table.

    Raises:
        ConfigError: If the key is present but not a boolean.
    """
    value: Any = table.get(key)
    if value is None or isinstance(value, bool):
        return value
    raise ConfigError(f"'{key}' must be a boolean, got {value!r}")


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Extract an optional string value from a TOML table.

    Raises:
        ConfigError: If the key is present but not a string.
    """
    value: Any = table.get(key)
    if value is None or isinstance(value, str):
        return value
    raise ConfigError(f"'{key}' must be a string, got {value!r}")


def get_string_list_or_none(table: TomlTable, key: str) -> list[str] | None:
    """Extract an optional list of strings from a TOML table.

    Raises:
        ConfigError: If the key is present but not a list of strings.
    """
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, list) and all(isinstance(item, str) for item in cast("list[Any]", value)):
        return list(cast("list[str]", value))
    raise ConfigError(f"'{key}' must be a list of strings, got {value!r}")
