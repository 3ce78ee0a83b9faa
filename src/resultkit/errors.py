# topmark:header:start
#
#   project      : ResultKit
#   file         : errors.py
#   file_relpath : src/resultkit/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the ResultKit core.

All failures of the format registry, the formatter lifecycle and the XSD
literal codec surface as subclasses of `ResultKitError`, so callers can catch
the whole family or pick out the recoverable kinds they care about.

Usage:
    ```python
    from resultkit.errors import FormatNotFoundError

    try:
        formatter = Formatter.create(world.formats, name="yaml")
    except FormatNotFoundError:
        formatter = Formatter.create(world.formats)  # registry default
    ```
"""

from __future__ import annotations


class ResultKitError(Exception):
    """Base class for all ResultKit errors."""


class RegistrationError(ResultKitError):
    """A format plugin could not be registered.

    Raised when the plugin's builder fails or leaves the factory without the
    required names and label. The registry is left unchanged.
    """


class FormatNotFoundError(ResultKitError, LookupError):
    """No registered format matches the requested name, URI or MIME type."""


class NoSniffResultError(FormatNotFoundError):
    """Content sniffing produced no candidate with a non-negative score."""


class UnsupportedOperationError(ResultKitError):
    """The bound format does not implement the requested capability (read or write)."""


class FormatterInitError(ResultKitError):
    """A formatter could not be constructed (context creation or init hook failed)."""


class InvalidLexicalFormError(ResultKitError, ValueError):
    """A lexical form is not valid for the requested XSD datatype.

    Attributes:
        lexical (str): The rejected lexical form.
        datatype (str): Name of the datatype it was checked against.
    """

    def __init__(self, lexical: str, datatype: str) -> None:
        super().__init__(f"Invalid lexical form for {datatype}: {lexical!r}")
        self.lexical: str = lexical
        self.datatype: str = datatype


class ConfigError(ResultKitError):
    """A configuration file is missing, unreadable or malformed."""
