# topmark:header:start
#
#   project      : ResultKit
#   file         : formatter.py
#   file_relpath : src/resultkit/formats/formatter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Formatter: a handle bound to one result format.

A `Formatter` references a `FormatFactory` owned by the registry and owns the
private context that factory asked for. It is the uniform entry point for
reading and writing results, whatever the concrete syntax:

```python
with Formatter.create(world.formats, name="json") as fmt:
    fmt.write(sys.stdout, results)

with Formatter.create_for_content(world.formats, buffer=data, identifier="r.srx") as fmt:
    fmt.read(world, io.StringIO(data.decode()), results, base_uri)
```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from resultkit.config.logging import get_logger
from resultkit.errors import (
    FormatNotFoundError,
    FormatterInitError,
    NoSniffResultError,
    UnsupportedOperationError,
)
from resultkit.formats.base import FormatFlags
from resultkit.results.model import ResultKind

if TYPE_CHECKING:
    from types import TracebackType
    from typing import TextIO

    from resultkit.config.logging import ResultKitLogger
    from resultkit.formats.base import FormatFactory
    from resultkit.formats.registry import FormatRegistry
    from resultkit.results.model import ResultSet, Row, RowSource
    from resultkit.world import World

logger: ResultKitLogger = get_logger(__name__)


class Formatter:
    """Reader/writer handle for one result format.

    Use `Formatter.create` or `Formatter.create_for_content` rather than the
    constructor; they resolve the factory and run its init hook.

    Attributes:
        factory (FormatFactory): The bound format (shared, owned by the registry).
        context (Any): Private per-formatter state built by the factory's
            ``context_factory``, or ``None``.
    """

    def __init__(self, factory: FormatFactory) -> None:
        self.factory: FormatFactory = factory
        self.context: Any = None
        self._destroyed: bool = False

    @classmethod
    def create(
        cls,
        registry: FormatRegistry,
        name: str | None = None,
        mime_type: str | None = None,
        uri: str | None = None,
    ) -> Formatter:
        """Create a formatter for the format identified by name, MIME type or URI.

        All identifiers are optional; see `FormatRegistry.lookup` for precedence.
        With none of them the registry's default (first) format is used.

        Args:
            registry (FormatRegistry): Registry to resolve the format in.
            name (str | None): Format name; also handed to the init hook.
            mime_type (str | None): MIME type of the format.
            uri (str | None): Syntax URI of the format.

        Returns:
            Formatter: A ready formatter.

        Raises:
            FormatNotFoundError: If no format matches.
            FormatterInitError: If the context could not be built or the init
                hook failed; nothing is left half-initialized.
        """
        factory: FormatFactory | None = registry.lookup(name=name, uri=uri, mime_type=mime_type)
        if factory is None:
            raise FormatNotFoundError(
                f"No result format for name={name!r} mime_type={mime_type!r} uri={uri!r}"
            )

        formatter = cls(factory)
        try:
            if factory.context_factory is not None:
                formatter.context = factory.context_factory()
        except Exception as exc:
            formatter._release()
            raise FormatterInitError(
                f"Cannot create context for result format '{factory.name}': {exc}"
            ) from exc

        if factory.init is not None:
            try:
                ok: bool | None = factory.init(formatter, name)
            except Exception as exc:
                formatter.destroy()
                raise FormatterInitError(
                    f"Result format '{factory.name}' failed to initialize: {exc}"
                ) from exc
            if ok is False:
                formatter.destroy()
                raise FormatterInitError(f"Result format '{factory.name}' failed to initialize")

        logger.debug("Created formatter for result format '%s'", factory.name)
        return formatter

    @classmethod
    def create_for_content(
        cls,
        registry: FormatRegistry,
        uri: str | None = None,
        mime_type: str | None = None,
        buffer: bytes | None = None,
        identifier: str | None = None,
    ) -> Formatter:
        """Create a formatter for the format guessed from the content.

        Raises:
            NoSniffResultError: If no format could be guessed.
            FormatterInitError: If the guessed format failed to initialize.
        """
        name: str | None = registry.guess_format_name(
            uri=uri, mime_type=mime_type, buffer=buffer, identifier=identifier
        )
        if name is None:
            raise NoSniffResultError(
                f"Cannot guess result format (uri={uri!r}, mime_type={mime_type!r}, "
                f"identifier={identifier!r})"
            )
        return cls.create(registry, name=name)

    @property
    def name(self) -> str:
        return self.factory.name

    @property
    def flags(self) -> FormatFlags:
        return self.factory.flags

    def write(self, sink: TextIO, results: ResultSet, base_uri: str | None = None) -> bool:
        """Serialize ``results`` to ``sink``.

        On success the results are exhausted (`ResultSet.finished` is True),
        whether or not the writer consumed every row itself.

        Args:
            sink (TextIO): Output stream.
            results (ResultSet): Results to write.
            base_uri (str | None): Base URI of the output document.

        Returns:
            bool: The writer's own success flag.

        Raises:
            UnsupportedOperationError: If the format has no writer; ``results``
                is left untouched.
        """
        hook = self.factory.write
        if not self.flags & FormatFlags.WRITER or hook is None:
            raise UnsupportedOperationError(f"Result format '{self.name}' cannot write results")

        ok = bool(hook(self, sink, results, base_uri))
        if ok:
            results.drain()
        else:
            logger.warning("Result format '%s' failed to write results", self.name)
        return ok

    def read(
        self,
        world: World,
        source: TextIO,
        results: ResultSet,
        base_uri: str | None = None,
    ) -> bool:
        """Parse rows from ``source`` and append them to ``results``.

        The reader is bound to ``results.variables``; rows are appended in the
        order the reader produces them. A row source exposing a non-``None``
        ``boolean`` attribute turns ``results`` into a boolean result. The
        reader's row source is closed on every exit path.

        Returns:
            bool: False if the format could not produce a row source, else True.

        Raises:
            UnsupportedOperationError: If the format has no reader.
        """
        hook = self.factory.get_rowsource
        if not self.flags & FormatFlags.READER or hook is None:
            raise UnsupportedOperationError(f"Result format '{self.name}' cannot read results")

        rowsource: RowSource | None = hook(self, world, results.variables, source, base_uri)
        if rowsource is None:
            logger.warning("Result format '%s' produced no row source", self.name)
            return False

        try:
            while True:
                row: Row | None = rowsource.read_row()
                if row is None:
                    break
                results.add_row(row)
            answer: bool | None = getattr(rowsource, "boolean", None)
            if answer is not None:
                results.kind = ResultKind.BOOLEAN
                results.boolean = answer
        finally:
            rowsource.close()
        return True

    def destroy(self) -> None:
        """Run the format's finish hook and release the context.

        Calling it again is a no-op.
        """
        if self._destroyed:
            return
        try:
            if self.factory.finish is not None:
                self.factory.finish(self)
        finally:
            self._release()

    def _release(self) -> None:
        self.context = None
        self._destroyed = True

    def __enter__(self) -> Formatter:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.destroy()

    def __repr__(self) -> str:
        return f"Formatter(name={self.name!r}, flags={self.flags!r})"
