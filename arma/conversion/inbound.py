"""Inbound conversion: raw argument text from the runtime -> Python scalars.

The runtime hands scalar call arguments over as strings. from_arma(T, text)
parses them with the runtime's own token grammars (no surrounding whitespace,
no digit separators) and raises ArmaParseError with a readable message on
mismatch. Only scalar targets are supported; arrays are decoded by the
host-binding layer.
"""
from __future__ import annotations

import logging
import math
import re
from decimal import Decimal
from fractions import Fraction
from typing import Any, Callable, Protocol, TypeVar, runtime_checkable

import numpy as np

from arma.errors import ArmaParseError, ArmaTypeError
from arma.ext.np_helpers import INTEGER_TYPES, int_bounds, is_unsigned

logger = logging.getLogger(__name__)

T = TypeVar("T")

ParserFn = Callable[[str], Any]

INT_RE = re.compile(r"[+-]?[0-9]+")
FLOAT_RE = re.compile(
    r"[+-]?(?:"
    r"inf|infinity|nan"  # case-insensitive specials
    r"|(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:e[+-]?[0-9]+)?"
    r")",
    re.IGNORECASE,
)

EMPTY_INT = "cannot parse integer from empty string"
INVALID_DIGIT = "invalid digit found in string"
POS_OVERFLOW = "number too large to fit in target type"
NEG_OVERFLOW = "number too small to fit in target type"
EMPTY_FLOAT = "cannot parse float from empty string"
INVALID_FLOAT = "invalid float literal"
INVALID_BOOL = "provided string was not `true` or `false`"

_F32_MAX = float(np.finfo(np.float32).max)
# Anything at or past max + half an ulp rounds to infinity
_F32_OVERFLOW = Fraction(_F32_MAX) + Fraction(2) ** 103
_F32_POS_INF = np.float32(np.inf)
_F32_NEG_INF = np.float32(-np.inf)


@runtime_checkable
class FromArma(Protocol):
    @classmethod
    def from_arma(cls, text: str) -> Any: ...


def _parse_int_text(text: str, signed: bool = True) -> int:
    if not text:
        raise ValueError(EMPTY_INT)
    if not INT_RE.fullmatch(text) or (not signed and text.startswith("-")):
        raise ValueError(INVALID_DIGIT)
    return int(text)


def parse_int(text: str) -> int:
    return _parse_int_text(text)


def _int_parser(dtype: type) -> ParserFn:
    lo, hi = int_bounds(dtype)
    signed = not is_unsigned(dtype)

    def parse(text: str):
        n = _parse_int_text(text, signed)
        if n > hi:
            raise ValueError(POS_OVERFLOW)
        if n < lo:
            raise ValueError(NEG_OVERFLOW)
        return dtype(n)

    parse.__name__ = f"parse_{dtype.__name__}"
    return parse


def parse_float(text: str) -> float:
    if not text:
        raise ValueError(EMPTY_FLOAT)
    if not FLOAT_RE.fullmatch(text):
        raise ValueError(INVALID_FLOAT)
    return float(text)


def parse_float64(text: str) -> np.float64:
    return np.float64(parse_float(text))


def parse_float32(text: str) -> np.float32:
    """Round the decimal text once, straight to single precision.

    Casting the parsed double would round twice and can land one ulp off when the
    double sits on a float32 midpoint.
    """
    x = parse_float(text)
    if not math.isfinite(x) or x == 0.0:
        return np.float32(x)
    exact = Fraction(Decimal(text))
    if abs(exact) >= _F32_OVERFLOW:
        return np.float32(math.copysign(math.inf, x))
    with np.errstate(over="ignore", under="ignore"):
        near = np.float32(x)
        if np.isinf(near):
            near = np.float32(math.copysign(_F32_MAX, x))
        candidates = [
            c for c in (near, np.nextafter(near, _F32_NEG_INF), np.nextafter(near, _F32_POS_INF))
            if np.isfinite(c)
        ]
    # nearest to the exact decimal value, ties to even
    return min(candidates, key=lambda c: (abs(Fraction(float(c)) - exact), int(c.view(np.uint32)) & 1))


def parse_bool(text: str) -> bool:
    if text == "true":
        return True
    if text == "false":
        return False
    raise ValueError(INVALID_BOOL)


def parse_str(text: str) -> str:
    return text


PARSERS: dict[type, ParserFn] = {
    str: parse_str,
    bool: parse_bool,
    int: parse_int,
    float: parse_float,
}
PARSERS.update({dtype: _int_parser(dtype) for dtype in INTEGER_TYPES})
PARSERS.update({np.float32: parse_float32, np.float64: parse_float64})


def register_parser(target: type, parser: ParserFn) -> None:
    """Teach from_arma a new target type. Parsers signal failure with ValueError."""
    PARSERS[target] = parser


def from_arma(target: type[T], text: str) -> T:
    """Parse runtime text as `target`, raising ArmaParseError when it does not fit."""
    name = getattr(target, "__name__", repr(target))
    parser = PARSERS.get(target)
    if parser is None:
        if not (isinstance(target, type) and isinstance(target, FromArma)):
            raise ArmaTypeError(f"No Arma parser registered for {name}.")
        parser = target.from_arma
    try:
        return parser(text)
    except ArmaParseError:
        raise
    except ValueError as exc:
        logger.debug("cannot parse %r as %s: %s", text, name, exc)
        raise ArmaParseError(str(exc), target=target, text=text) from exc
