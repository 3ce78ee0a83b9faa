# topmark:header:start
#
#   project      : ResultKit
#   file         : registry.py
#   file_relpath : src/resultkit/formats/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Registry of result format factories.

A `FormatRegistry` is owned by a `World` (see `resultkit.world`) and built once,
serially, when the world opens; afterwards it is only read. Registration order
matters: the first registered format is the default, and lookups and sniffing
scan formats in that order.

Typical usage:
    ```python
    registry = FormatRegistry()
    registry.register(register_sparql_xml)
    registry.register(register_sparql_json)

    registry.lookup(name="json")            # by name
    registry.lookup(flags=FormatFlags.WRITER)  # first pure writer
    registry.guess_format_name(identifier="out.srj")
    ```

Notes:
    * No locking is done here. Concurrent lookups are safe once registration
      has completed; building or tearing down the registry while it is being
      read is not.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from resultkit.config.logging import get_logger
from resultkit.errors import RegistrationError
from resultkit.formats.base import FormatFactory, FormatFlags
from resultkit.formats.sniffing import guess_format_name

if TYPE_CHECKING:
    from collections.abc import Iterator

    from resultkit.config.logging import ResultKitLogger
    from resultkit.formats.base import FormatDescriptor, RegisterFactory

logger: ResultKitLogger = get_logger(__name__)


class FormatRegistry:
    """Ordered collection of `FormatFactory` objects."""

    def __init__(self) -> None:
        self._factories: list[FormatFactory] = []

    def register(self, register_factory: RegisterFactory) -> FormatFactory:
        """Create a factory and let a plugin populate it.

        The factory is appended only after the plugin returned successfully and
        declared at least one name and a label; on any failure nothing is added.

        Args:
            register_factory (RegisterFactory): The plugin's registration function.
                It may signal failure by raising or by returning ``False``.

        Returns:
            FormatFactory: The registered factory.

        Raises:
            RegistrationError: If the plugin failed or left required fields unset.
        """
        factory = FormatFactory()
        plugin_name: str = getattr(register_factory, "__qualname__", repr(register_factory))

        try:
            ok: bool | None = register_factory(factory)
        except Exception as exc:
            raise RegistrationError(f"Result format plugin {plugin_name} failed: {exc}") from exc
        if ok is False:
            raise RegistrationError(f"Result format plugin {plugin_name} reported failure")

        try:
            factory.desc = factory.freeze()
        except ValueError as exc:
            logger.error(
                "Result format %s failed to register required names and label fields",
                plugin_name,
            )
            raise RegistrationError(str(exc)) from exc

        self._factories.append(factory)
        logger.debug(
            "Registered result format %s (%s) flags=%s",
            factory.name,
            factory.desc.label,
            factory.desc.flags,
        )
        return factory

    def lookup(
        self,
        name: str | None = None,
        uri: str | None = None,
        mime_type: str | None = None,
        flags: FormatFlags = FormatFlags.NONE,
    ) -> FormatFactory | None:
        """Find a factory by name, syntax URI or MIME type.

        Factories are scanned in registration order. With a non-zero ``flags``
        filter, only factories whose capabilities are *exactly* ``flags`` are
        considered. For each remaining factory:

        * if neither ``name`` nor ``uri`` is given, it is the answer (the first
          registered format is the default; ``mime_type`` is not consulted);
        * a declared name equal to ``name`` is a match;
        * a declared syntax URI equal to ``uri`` is a match;
        * a declared MIME type equal to ``mime_type`` is a match.

        Args:
            name (str | None): Format name (case-sensitive).
            uri (str | None): Syntax URI.
            mime_type (str | None): MIME type.
            flags (FormatFlags): Required capabilities, ``NONE`` for any.

        Returns:
            FormatFactory | None: The matching factory, or ``None`` if no factory matched.
        """
        for factory in self._factories:
            if flags and factory.flags != flags:
                continue

            if name is None and uri is None:
                return factory

            if name is not None and factory.has_name(name):
                return factory

            if uri is not None and factory.declares_uri(uri):
                return factory

            if mime_type is not None and factory.mime_quality(mime_type) is not None:
                return factory

        return None

    def check(
        self,
        name: str | None = None,
        uri: str | None = None,
        mime_type: str | None = None,
        flags: FormatFlags = FormatFlags.NONE,
    ) -> bool:
        """Return True if `lookup` finds a factory for the given criteria."""
        return self.lookup(name=name, uri=uri, mime_type=mime_type, flags=flags) is not None

    def describe(self, index: int) -> FormatDescriptor | None:
        """Return the descriptor of the ``index``-th registered format, or None if out of range."""
        if not 0 <= index < len(self._factories):
            return None
        return self._factories[index].desc

    def guess_format_name(
        self,
        *,
        uri: str | None = None,
        mime_type: str | None = None,
        buffer: bytes | None = None,
        identifier: str | None = None,
    ) -> str | None:
        """Guess a format name from partial evidence.

        See `resultkit.formats.sniffing.guess_format_name`.
        """
        return guess_format_name(
            self._factories,
            uri=uri,
            mime_type=mime_type,
            buffer=buffer,
            identifier=identifier,
        )

    def remove(self, name: str) -> bool:
        """Unregister the format declaring ``name``; return False if there is none."""
        for index, factory in enumerate(self._factories):
            if factory.has_name(name):
                del self._factories[index]
                logger.debug("Removed result format %s", factory.name)
                return True
        return False

    def names(self) -> tuple[str, ...]:
        """Canonical names of all formats, in registration order."""
        return tuple(f.name for f in self._factories)

    def descriptors(self) -> tuple[FormatDescriptor, ...]:
        """Descriptors of all formats, in registration order."""
        return tuple(f.desc for f in self._factories if f.desc is not None)

    def __iter__(self) -> Iterator[FormatFactory]:
        return iter(self._factories)

    def __len__(self) -> int:
        return len(self._factories)

    def clear(self) -> None:
        """Drop every factory (teardown)."""
        self._factories.clear()
