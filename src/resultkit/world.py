# topmark:header:start
#
#   project      : ResultKit
#   file         : world.py
#   file_relpath : src/resultkit/world.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The process-wide context owning the format registry and the XSD type table.

```python
with World() as world:
    fmt = Formatter.create(world.formats, name="json")
    world.xsd.uri_to_type("http://www.w3.org/2001/XMLSchema#int")
```

A world is built serially by `World.open` and is read-mostly afterwards. It
does no locking of its own.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from resultkit.config.logging import get_logger
from resultkit.config.model import Config
from resultkit.formats.instances import finish_result_formats, init_result_formats
from resultkit.xsd.datatypes import xsd_finish, xsd_init

if TYPE_CHECKING:
    from types import TracebackType

    from resultkit.config.logging import ResultKitLogger
    from resultkit.formats.registry import FormatRegistry
    from resultkit.xsd.datatypes import XsdDatatypes

logger: ResultKitLogger = get_logger(__name__)


class World:
    """Owner of the format registry and the XSD datatype table.

    Attributes:
        config (Config): Settings applied when the world opens.
        formats (FormatRegistry | None): The format registry, ``None`` while closed.
        xsd (XsdDatatypes | None): The datatype table, ``None`` while closed.
        registration_failures (int): Plugins that failed to register on `open`.
    """

    def __init__(self, config: Config | None = None) -> None:
        self.config: Config = config if config is not None else Config()
        self.formats: FormatRegistry | None = None
        self.xsd: XsdDatatypes | None = None
        self.registration_failures: int = 0

    @property
    def is_open(self) -> bool:
        return self.formats is not None and self.xsd is not None

    def open(self) -> World:
        """Build the datatype table and the format registry (no-op if open)."""
        if self.is_open:
            return self
        xsd_init(self)
        self.registration_failures = init_result_formats(self)
        logger.debug("World opened")
        return self

    def close(self) -> None:
        """Tear down the registry and the datatype table (no-op if closed)."""
        finish_result_formats(self)
        xsd_finish(self)

    def require_formats(self) -> FormatRegistry:
        """Return the format registry, opening the world if needed."""
        self.open()
        assert self.formats is not None
        return self.formats

    def require_xsd(self) -> XsdDatatypes:
        """Return the datatype table, opening the world if needed."""
        self.open()
        assert self.xsd is not None
        return self.xsd

    def __enter__(self) -> World:
        return self.open()

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
