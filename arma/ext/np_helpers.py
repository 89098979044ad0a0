"""NumPy interop helpers shared by the outbound and inbound conversions."""
from __future__ import annotations

from typing import Any

import numpy as np

# Fixed-width integer types the inbound parser knows how to range-check
INTEGER_TYPES: tuple[type, ...] = (
    np.int8, np.int16, np.int32, np.int64,
    np.uint8, np.uint16, np.uint32, np.uint64,
)


def to_python(x: Any) -> Any:
    """Convert numpy scalars and arrays to plain Python objects (arrays become nested lists)."""
    if isinstance(x, (np.ndarray, np.generic)):
        return x.tolist()
    return x


def int_bounds(dtype: type) -> tuple[int, int]:
    """(min, max) of a numpy integer type, as Python ints."""
    info = np.iinfo(dtype)
    return int(info.min), int(info.max)


def is_unsigned(dtype: type) -> bool:
    return np.issubdtype(dtype, np.unsignedinteger)
