# topmark:header:start
#
#   project      : ResultKit
#   file         : __main__.py
#   file_relpath : src/resultkit/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running ResultKit via ``python -m resultkit``.

Delegates to `resultkit.cli.main.cli`, the same entry point as the
``resultkit`` console script.
"""

from __future__ import annotations

from resultkit.cli.main import cli

if __name__ == "__main__":
    cli()
