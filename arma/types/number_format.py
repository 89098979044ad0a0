"""Render doubles the way the runtime prints numeric literals.

Shortest round-trip digits, always positional (never exponent notation), and
no fractional part for integral values: 54.0 -> "54", 1e21 -> "1000...0",
1e-7 -> "0.0000001".
"""
from __future__ import annotations

import math
from decimal import Decimal


def format_number(x: float) -> str:
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "inf" if x > 0 else "-inf"
    # repr gives the shortest digits that round-trip; Decimal expands the exponent
    text = format(Decimal(repr(x)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
