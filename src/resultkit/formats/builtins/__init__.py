# topmark:header:start
#
#   project      : ResultKit
#   file         : __init__.py
#   file_relpath : src/resultkit/formats/builtins/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Built-in result format plugins.

Each module exposes a ``REGISTRARS`` list of registration functions; see
`resultkit.formats.instances` for the order in which they are registered.
"""
