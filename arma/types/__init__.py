from __future__ import annotations

from .value import Value, Nil, Number, Boolean, String, Array, NIL
from .number_format import format_number

__all__ = [
    "Value",
    "Nil",
    "Number",
    "Boolean",
    "String",
    "Array",
    "NIL",
    "format_number",
]
