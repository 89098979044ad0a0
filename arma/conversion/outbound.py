"""Outbound conversion: Python objects -> Arma Values.

to_value is a singledispatch function, so new native types are supported with

    @to_value.register(MyType)
    def _(obj): ...

or by giving the type a ``to_arma(self) -> Value`` method (the IntoArma protocol).
Any Sequence (list, tuple, range, deque, ...) converts element by element, so
nested lists become nested arrays. Byte strings are rejected.
"""
from __future__ import annotations

import logging
from collections.abc import Sequence
from functools import singledispatch
from typing import Any, Protocol, runtime_checkable

import numpy as np

from arma.config import MAX_EXACT_INT, INT_POLICY_LOSSY, get_int_policy
from arma.errors import ArmaTypeError, ArmaRangeError
from arma.ext.np_helpers import to_python
from arma.types.value import Value, Nil, Number, Boolean, String, Array, NIL

logger = logging.getLogger(__name__)


@runtime_checkable
class IntoArma(Protocol):
    def to_arma(self) -> Value: ...


@singledispatch
def to_value(obj: Any) -> Value:
    """Convert a native object to the Value the runtime would see."""
    if isinstance(obj, IntoArma):
        result = obj.to_arma()
        if not isinstance(result, Value):
            raise ArmaTypeError(
                f"{type(obj).__name__}.to_arma() returned {type(result).__name__}, expected a Value"
            )
        return result
    raise ArmaTypeError(f"Cannot convert {type(obj).__name__} to an Arma value.")


@to_value.register(Value)
def _from_value(obj: Value) -> Value:
    return obj


@to_value.register(type(None))
def _from_none(obj: None) -> Nil:
    return NIL


@to_value.register(bool)
def _from_bool(obj: bool) -> Boolean:
    return Boolean(obj)


@to_value.register(int)
def _from_int(obj: int) -> Number:
    if abs(obj) > MAX_EXACT_INT:
        if get_int_policy() != INT_POLICY_LOSSY:
            raise ArmaRangeError(
                f"{obj} is outside +/-2**53 and cannot be represented exactly as an Arma number"
            )
        logger.debug("widening %d to a double loses precision", obj)
    try:
        return Number(float(obj))
    except OverflowError as exc:
        raise ArmaRangeError(f"{obj} is too large for an Arma number") from exc


@to_value.register(float)
def _from_float(obj: float) -> Number:
    return Number(obj)


@to_value.register(str)
def _from_str(obj: str) -> String:
    return String(obj)


@to_value.register(Sequence)
def _from_sequence(obj: Sequence) -> Array:
    if all(isinstance(item, Value) for item in obj):
        return Array(obj)
    return Array(tuple(to_value(item) for item in obj))


# Byte strings are sequences of ints, but the runtime has no binary literal
@to_value.register(bytes)
@to_value.register(bytearray)
def _from_bytes(obj) -> Value:
    raise ArmaTypeError(f"Cannot convert {type(obj).__name__} to an Arma value; decode it to str first.")


@to_value.register(np.generic)
@to_value.register(np.ndarray)
def _from_numpy(obj) -> Value:
    return to_value(to_python(obj))


def to_arma_string(obj: Any) -> str:
    """Convert and format in one step: the literal text handed to the runtime."""
    return str(to_value(obj))
