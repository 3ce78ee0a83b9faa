# topmark:header:start
#
#   project      : ResultKit
#   file         : __init__.py
#   file_relpath : src/resultkit/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Command line interface for ResultKit (``resultkit``)."""
