# topmark:header:start
#
#   project      : ResultKit
#   file         : __init__.py
#   file_relpath : src/resultkit/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ResultKit configuration: TOML loading, the config model and logging setup."""

from __future__ import annotations

from .model import Config, MutableConfig

__all__ = [
    "Config",
    "MutableConfig",
]
