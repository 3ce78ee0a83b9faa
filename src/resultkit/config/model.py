# topmark:header:start
#
#   project      : ResultKit
#   file         : model.py
#   file_relpath : src/resultkit/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable snapshot read by a `World` when it opens.
    - `MutableConfig`: a mutable builder used during discovery and merging;
      it can be frozen into `Config` and thawed back for edits.

Merge order (lowest to highest precedence):
    1) Built-in defaults
    2) ``pyproject.toml`` (``[tool.resultkit]``) in the working directory
    3) ``resultkit.toml`` in the working directory
    4) Files passed explicitly (e.g. ``--config``), in the given order
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from resultkit.config.keys import Toml
from resultkit.config.loaders import (
    extract_resultkit_table,
    get_bool_value_or_none,
    get_string_list_or_none,
    get_string_value_or_none,
    get_table,
    load_toml_dict,
    validate_keys,
)
from resultkit.config.logging import get_logger, parse_log_level
from resultkit.constants import PYPROJECT_TOML_NAME, RESULTKIT_TOML_NAME
from resultkit.errors import ConfigError

if TYPE_CHECKING:
    from resultkit.config.loaders import TomlTable
    from resultkit.config.logging import ResultKitLogger

logger: ResultKitLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        disabled_formats (frozenset[str]): Format names not registered at bootstrap.
        load_plugins (bool): Whether entry-point plugins are discovered.
        log_level (str | None): Log level name from ``[logging]``, if any.
        config_files (tuple[Path, ...]): Files merged into this config.
    """

    disabled_formats: frozenset[str] = frozenset()
    load_plugins: bool = True
    log_level: str | None = None
    config_files: tuple[Path, ...] = ()

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            disabled_formats=set(self.disabled_formats),
            load_plugins=self.load_plugins,
            log_level=self.log_level,
            config_files=list(self.config_files),
        )

    def to_toml_dict(self) -> TomlTable:
        toml_dict: TomlTable = {
            Toml.SECTION_FORMATS: {
                Toml.KEY_DISABLED: sorted(self.disabled_formats),
                Toml.KEY_LOAD_PLUGINS: self.load_plugins,
            },
        }
        if self.log_level is not None:
            toml_dict[Toml.SECTION_LOGGING] = {Toml.KEY_LEVEL: self.log_level}
        return toml_dict


# -------------------------- Mutable builder --------------------------
@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    ``None`` means "not set by this layer" so that merging keeps the value of
    lower layers.
    """

    disabled_formats: set[str] | None = None
    load_plugins: bool | None = None
    log_level: str | None = None
    config_files: list[Path] = field(default_factory=lambda: [])

    def freeze(self) -> Config:
        """Produce the immutable `Config`, applying defaults for unset fields."""
        return Config(
            disabled_formats=frozenset(self.disabled_formats or ()),
            load_plugins=True if self.load_plugins is None else self.load_plugins,
            log_level=self.log_level,
            config_files=tuple(self.config_files),
        )

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        return cls(disabled_formats=set(), load_plugins=True)

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, config_file: Path | None = None) -> MutableConfig:
        """Build a draft from a parsed ResultKit table.

        Raises:
            ConfigError: If the table has unknown keys or values of the wrong type.
        """
        origin: Path = config_file or Path("<config>")
        validate_keys(origin, data)

        formats: TomlTable = get_table(data, Toml.SECTION_FORMATS)
        logging_table: TomlTable = get_table(data, Toml.SECTION_LOGGING)

        try:
            disabled: list[str] | None = get_string_list_or_none(formats, Toml.KEY_DISABLED)
            load_plugins: bool | None = get_bool_value_or_none(formats, Toml.KEY_LOAD_PLUGINS)
            level: str | None = get_string_value_or_none(logging_table, Toml.KEY_LEVEL)
        except ConfigError as exc:
            raise ConfigError(f"{origin}: {exc}") from exc

        if level is not None and parse_log_level(level) is None:
            raise ConfigError(f"{origin}: unknown log level {level!r}")

        return cls(
            disabled_formats=set(disabled) if disabled is not None else None,
            load_plugins=load_plugins,
            log_level=level,
            config_files=[config_file] if config_file is not None else [],
        )

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        Returns:
            MutableConfig | None: The draft, or ``None`` for a ``pyproject.toml``
                without a ``[tool.resultkit]`` table.

        Raises:
            ConfigError: If the file is unreadable or malformed.
        """
        logger.debug("Loading configuration from %s", path)
        section: TomlTable | None = extract_resultkit_table(path, load_toml_dict(path))
        if section is None:
            return None
        return cls.from_toml_dict(section, config_file=path)

    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return config files in ``start``: ``pyproject.toml`` first, then ``resultkit.toml``."""
        return [
            candidate
            for candidate in (start / PYPROJECT_TOML_NAME, start / RESULTKIT_TOML_NAME)
            if candidate.is_file()
        ]

    @classmethod
    def load_merged(
        cls,
        *,
        start: Path | None = None,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
    ) -> MutableConfig:
        """Discover and merge configuration layers into a draft.

        Args:
            start (Path | None): Directory searched for config files (CWD if None).
            extra_config_files (Iterable[Path] | None): Explicit files merged last.
            no_config (bool): If True, skip discovery in ``start``.

        Returns:
            MutableConfig: The merged draft.

        Raises:
            ConfigError: If any of the files is malformed.
        """
        draft: MutableConfig = cls.from_defaults()
        paths: list[Path] = []
        if not no_config:
            paths.extend(cls.discover_local_config_files(start or Path.cwd()))
        paths.extend(Path(p) for p in extra_config_files or ())

        for path in paths:
            layer: MutableConfig | None = cls.from_toml_file(path)
            if layer is not None:
                draft = draft.merge_with(layer)
        return draft

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft."""
        return MutableConfig(
            disabled_formats=(
                set(other.disabled_formats)
                if other.disabled_formats is not None
                else (set(self.disabled_formats) if self.disabled_formats is not None else None)
            ),
            load_plugins=(
                other.load_plugins if other.load_plugins is not None else self.load_plugins
            ),
            log_level=other.log_level if other.log_level is not None else self.log_level,
            config_files=[*self.config_files, *other.config_files],
        )
