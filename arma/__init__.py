# Public surface for arma: the Arma value model and the two conversions built on it.
#
# Naming guidance:
# - Value:        a literal the runtime understands (Nil, Number, Boolean, String, Array).
# - NativeValue:  any Python object handed to the outbound conversion (to_value).
# - ArgumentText: raw scalar argument text handed to us by the runtime (from_arma).

from typing import Any

NativeValue = Any
ArgumentText = str

from arma.errors import ArmaError, ArmaTypeError, ArmaRangeError, ArmaParseError
from arma.types.value import Value, Nil, Number, Boolean, String, Array, NIL
from arma.conversion.outbound import IntoArma, to_value, to_arma_string
from arma.conversion.inbound import FromArma, from_arma, register_parser

__all__ = [
    "NativeValue",
    "ArgumentText",
    "ArmaError",
    "ArmaTypeError",
    "ArmaRangeError",
    "ArmaParseError",
    "Value",
    "Nil",
    "Number",
    "Boolean",
    "String",
    "Array",
    "NIL",
    "IntoArma",
    "to_value",
    "to_arma_string",
    "FromArma",
    "from_arma",
    "register_parser",
]
