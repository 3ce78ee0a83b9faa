# topmark:header:start
#
#   project      : ResultKit
#   file         : __init__.py
#   file_relpath : src/resultkit/xsd/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""XML Schema datatype support: type tags, lexical validation and canonical forms.

```python
from resultkit.xsd import LiteralType, datatype_check, format_double

datatype_check(LiteralType.INTEGER, "-42")  # True
format_double(1500.0)  # "1.5E3"
```
"""

from __future__ import annotations

from .canonical import (
    format_boolean,
    format_decimal,
    format_double,
    format_float,
    format_integer,
)
from .checks import (
    check_boolean,
    check_datetime,
    check_decimal,
    check_double,
    check_float,
    check_integer,
)
from .datatypes import (
    TypeDescriptor,
    XsdDatatypes,
    canonicalize,
    datatype_check,
    datatype_label,
    is_numeric,
    parent_type,
    require_valid,
    xsd_finish,
    xsd_init,
)
from .types import LiteralType

__all__ = [
    "LiteralType",
    "TypeDescriptor",
    "XsdDatatypes",
    "canonicalize",
    "check_boolean",
    "check_datetime",
    "check_decimal",
    "check_double",
    "check_float",
    "check_integer",
    "datatype_check",
    "datatype_label",
    "format_boolean",
    "format_decimal",
    "format_double",
    "format_float",
    "format_integer",
    "is_numeric",
    "parent_type",
    "require_valid",
    "xsd_finish",
    "xsd_init",
]
