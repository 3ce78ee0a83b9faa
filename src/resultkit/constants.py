# topmark:header:start
#
#   project      : ResultKit
#   file         : constants.py
#   file_relpath : src/resultkit/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ResultKit Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Final

try:
    RESULTKIT_VERSION: str = get_version("resultkit")
except PackageNotFoundError:  # running from a source checkout
    RESULTKIT_VERSION = "0.0.0"

# Names of the config files looked up in the working directory:
RESULTKIT_TOML_NAME: Final[str] = "resultkit.toml"
PYPROJECT_TOML_NAME: Final[str] = "pyproject.toml"

# Entry point group for third-party result format plugins
FORMATS_ENTRYPOINT_GROUP: Final[str] = "resultkit.formats"

XSD_NAMESPACE_URI: Final[str] = "http://www.w3.org/2001/XMLSchema#"

# Only this many leading bytes of a content sample are shown to sniff hooks.
SNIFF_WINDOW: Final[int] = 1024

# A MIME-type quality at or above this value is an authoritative match; it is
# also the ceiling applied to sniffed scores.
DECISIVE_SCORE: Final[int] = 10

NO_SCORE: Final[int] = -1
