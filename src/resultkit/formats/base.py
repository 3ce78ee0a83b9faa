# topmark:header:start
#
#   project      : ResultKit
#   file         : base.py
#   file_relpath : src/resultkit/formats/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Format factories: the record a result-format plugin contributes.

A plugin is a *registration function* receiving an empty `FormatFactory`. It
fills in the identifying metadata (names, label, MIME types with a quality
weight, syntax URIs) and whichever hooks it implements:

* ``sniff`` scores how much a content sample looks like the format;
* ``write`` serializes a `ResultSet` to a text sink;
* ``get_rowsource`` returns a `RowSource` parsing a text source;
* ``init`` / ``finish`` run when a `Formatter` is created / destroyed;
* ``context_factory`` builds the private per-formatter state.

Hook presence is turned into `FormatFlags` once, when the registry accepts the
factory, and frozen into a `FormatDescriptor` together with the metadata.

Example:
    ```python
    def register_yaml(factory: FormatFactory) -> None:
        factory.names = ["yaml"]
        factory.label = "YAML results"
        factory.mime_types = [MimeTypeQ("application/x-yaml", 8)]
        factory.write = write_yaml
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import IntFlag
from typing import TYPE_CHECKING, Any, Protocol, TextIO, runtime_checkable

if TYPE_CHECKING:
    from resultkit.formats.formatter import Formatter
    from resultkit.results.model import ResultSet, RowSource, VariablesTable
    from resultkit.world import World


class FormatFlags(IntFlag):
    """Capabilities of a format, computed from the hooks it provides.

    Attributes:
        NONE: Neither reader nor writer (also: "no filter" in lookups).
        READER: The format can parse results (``get_rowsource`` present).
        WRITER: The format can serialize results (``write`` present).
    """

    NONE = 0
    READER = 1
    WRITER = 2


@dataclass(frozen=True)
class MimeTypeQ:
    """A MIME type declared by a format with its quality weight.

    Attributes:
        mime_type (str): The MIME type, e.g. ``application/sparql-results+json``.
        q (int): Preference weight in 0..10. A weight of 10 marks the format as
            the authoritative handler of that MIME type.
    """

    mime_type: str
    q: int = 10


@runtime_checkable
class SniffHook(Protocol):
    """Score a content sample against a format.

    Returns an affinity score; positive values are evidence *for* the format.
    The sample holds at most the first 1024 bytes of the content.
    """

    def __call__(
        self,
        sample: bytes,
        identifier: str | None,
        suffix: str | None,
        mime_type: str | None,
    ) -> int: ...


@runtime_checkable
class WriteHook(Protocol):
    """Serialize ``results`` to ``sink``; return True on success."""

    def __call__(
        self,
        formatter: Formatter,
        sink: TextIO,
        results: ResultSet,
        base_uri: str | None,
    ) -> bool: ...


@runtime_checkable
class RowSourceHook(Protocol):
    """Return a row source parsing ``source``, or None on failure."""

    def __call__(
        self,
        formatter: Formatter,
        world: World,
        variables: VariablesTable,
        source: TextIO,
        base_uri: str | None,
    ) -> RowSource | None: ...


InitHook = Callable[["Formatter", "str | None"], "bool | None"]
FinishHook = Callable[["Formatter"], None]
ContextFactory = Callable[[], Any]
RegisterFactory = Callable[["FormatFactory"], "bool | None"]


@dataclass(frozen=True)
class FormatDescriptor:
    """Stable, read-only description of a registered format.

    Attributes:
        names (tuple[str, ...]): Format names; the first is canonical.
        label (str): Human-readable label.
        mime_types (tuple[MimeTypeQ, ...]): Declared MIME types with weights.
        uri_strings (tuple[str, ...]): Syntax URIs identifying the format.
        flags (FormatFlags): Reader / writer capabilities.
    """

    names: tuple[str, ...]
    label: str
    mime_types: tuple[MimeTypeQ, ...] = ()
    uri_strings: tuple[str, ...] = ()
    flags: FormatFlags = FormatFlags.NONE

    @property
    def name(self) -> str:
        """Canonical (first) name."""
        return self.names[0]

    @property
    def is_reader(self) -> bool:
        return bool(self.flags & FormatFlags.READER)

    @property
    def is_writer(self) -> bool:
        return bool(self.flags & FormatFlags.WRITER)


@dataclass
class FormatFactory:
    """A result format contributed by a plugin.

    Fields are populated by the plugin's registration function; `desc` is set by
    the registry once the factory has been validated and must be treated as the
    authoritative view afterwards.
    """

    names: list[str] = field(default_factory=lambda: [])
    label: str | None = None
    mime_types: list[MimeTypeQ] = field(default_factory=lambda: [])
    uri_strings: list[str] = field(default_factory=lambda: [])

    sniff: SniffHook | None = None
    write: WriteHook | None = None
    get_rowsource: RowSourceHook | None = None
    init: InitHook | None = None
    finish: FinishHook | None = None
    context_factory: ContextFactory | None = None

    desc: FormatDescriptor | None = None

    def compute_flags(self) -> FormatFlags:
        """Derive capability flags from the hooks that are present."""
        flags = FormatFlags.NONE
        if self.get_rowsource is not None:
            flags |= FormatFlags.READER
        if self.write is not None:
            flags |= FormatFlags.WRITER
        return flags

    def freeze(self) -> FormatDescriptor:
        """Snapshot the metadata into a `FormatDescriptor`.

        Raises:
            ValueError: If no name or no label was declared.
        """
        if not self.names or not self.names[0] or not self.label:
            raise ValueError("format failed to declare the required names and label")
        return FormatDescriptor(
            names=tuple(self.names),
            label=self.label,
            mime_types=tuple(self.mime_types),
            uri_strings=tuple(self.uri_strings),
            flags=self.compute_flags(),
        )

    @property
    def flags(self) -> FormatFlags:
        return self.desc.flags if self.desc is not None else self.compute_flags()

    @property
    def name(self) -> str:
        """Canonical (first) name; empty before the plugin declared one."""
        return self.names[0] if self.names else ""

    def has_name(self, name: str) -> bool:
        """Case-sensitive match against every declared name."""
        return name in self.names

    def declares_uri(self, uri: str) -> bool:
        return uri in self.uri_strings

    def mime_quality(self, mime_type: str) -> int | None:
        """Return the quality weight of ``mime_type``, or None if not declared."""
        for type_q in self.mime_types:
            if type_q.mime_type == mime_type:
                return type_q.q
        return None
