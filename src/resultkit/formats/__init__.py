# topmark:header:start
#
#   project      : ResultKit
#   file         : __init__.py
#   file_relpath : src/resultkit/formats/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Result format registry, content sniffing and formatter handles."""

from __future__ import annotations

from .base import FormatDescriptor, FormatFactory, FormatFlags, MimeTypeQ
from .formatter import Formatter
from .instances import finish_result_formats, init_result_formats
from .registry import FormatRegistry
from .sniffing import extract_suffix, guess_format_name

__all__ = [
    "FormatDescriptor",
    "FormatFactory",
    "FormatFlags",
    "FormatRegistry",
    "Formatter",
    "MimeTypeQ",
    "extract_suffix",
    "finish_result_formats",
    "guess_format_name",
    "init_result_formats",
]
