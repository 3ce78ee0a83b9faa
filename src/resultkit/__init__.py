# topmark:header:start
#
#   project      : ResultKit
#   file         : __init__.py
#   file_relpath : src/resultkit/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ResultKit package.

ResultKit is the data layer of a query engine: an extensible registry of query
result formats (selected by name, URI or MIME type, or sniffed from content)
and a codec for XSD typed literals. It exposes a small typed API and a CLI.
"""

from __future__ import annotations

from resultkit.errors import (
    FormatNotFoundError,
    FormatterInitError,
    InvalidLexicalFormError,
    NoSniffResultError,
    RegistrationError,
    ResultKitError,
    UnsupportedOperationError,
)
from resultkit.formats.formatter import Formatter
from resultkit.results.model import ResultSet
from resultkit.world import World

__all__ = [
    "FormatNotFoundError",
    "Formatter",
    "FormatterInitError",
    "InvalidLexicalFormError",
    "NoSniffResultError",
    "RegistrationError",
    "ResultKitError",
    "ResultSet",
    "UnsupportedOperationError",
    "World",
]
