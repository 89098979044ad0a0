"""The Arma value model.

A closed tagged union over the shapes the runtime can express as a literal:

    - Nil      -> null
    - Number   -> 64-bit float
    - Boolean  -> true / false
    - String   -> "text", quotes escaped by doubling
    - Array    -> [v0,v1,...], any mix of the above, nested arbitrarily

Values are immutable. Typed accessors are total: they return the payload for the
matching variant and None for every other one. Equality and ordering are
structural; Number follows IEEE float semantics, so NaN is unequal and unordered,
also inside arrays.
"""
from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from numbers import Real
from typing import Any, ClassVar, Optional

from arma.errors import ArmaTypeError
from arma.types.number_format import format_number


class Value:
    """Base of the five Arma variants. Never instantiated, and closed to other modules."""

    # Cross-variant ordering: Nil < Number < Array < Boolean < String
    _rank: ClassVar[int] = -1

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__:
            raise TypeError(f"Value is a closed type; cannot subclass it as {cls.__qualname__}")

    def __new__(cls, *args, **kwargs):
        if cls is Value:
            raise TypeError("Value cannot be instantiated; use Nil, Number, Boolean, String or Array")
        return super().__new__(cls)

    # ----------------- Construction -----------------
    @classmethod
    def from_native(cls, obj: Any) -> Value:
        """Build a Value from anything the outbound conversion understands."""
        from arma.conversion.outbound import to_value
        return to_value(obj)

    # ----------------- Accessors -----------------
    def as_null(self) -> Optional[tuple]:
        """() for Nil, None otherwise. Test the result with `is not None`."""
        return None

    def as_f64(self) -> Optional[float]:
        return None

    def as_bool(self) -> Optional[bool]:
        return None

    def as_str(self) -> Optional[str]:
        return None

    def as_vec(self) -> Optional[tuple[Value, ...]]:
        return None

    # ----------------- Predicates -----------------
    def is_nil(self) -> bool:
        return self.as_null() is not None

    def is_number(self) -> bool:
        return self.as_f64() is not None

    def is_boolean(self) -> bool:
        return self.as_bool() is not None

    def is_string(self) -> bool:
        return self.as_str() is not None

    def is_array(self) -> bool:
        return self.as_vec() is not None

    def is_empty(self) -> bool:
        raise NotImplementedError

    # ----------------- Formatting -----------------
    def to_string(self) -> str:
        return str(self)

    def _payload(self) -> Any:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._payload()!r})"

    # ----------------- Comparison -----------------
    def _compare_payload(self, other: Value) -> Optional[int]:
        raise NotImplementedError

    def _compare(self, other: Value) -> Optional[int]:
        """-1, 0 or 1, or None when the two values are unordered (NaN)."""
        if self._rank != other._rank:
            return -1 if self._rank < other._rank else 1
        return self._compare_payload(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self._compare(other) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        c = self._compare(other)
        return c is not None and c < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        c = self._compare(other)
        return c is not None and c <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        c = self._compare(other)
        return c is not None and c > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        c = self._compare(other)
        return c is not None and c >= 0

    def __hash__(self) -> int:
        return hash((self._rank, self._payload()))


def _cmp(a: Any, b: Any) -> Optional[int]:
    if a < b:
        return -1
    if a > b:
        return 1
    if a == b:
        return 0
    return None


@dataclass(frozen=True, eq=False, repr=False)
class Nil(Value):
    _rank: ClassVar[int] = 0

    def as_null(self) -> Optional[tuple]:
        return ()

    def is_empty(self) -> bool:
        return True

    def _payload(self) -> Any:
        return None

    def _compare_payload(self, other: Value) -> Optional[int]:
        return 0

    def __repr__(self) -> str:
        return "Nil()"

    def __str__(self) -> str:
        return "null"


@dataclass(frozen=True, eq=False, repr=False)
class Number(Value):
    value: float
    _rank: ClassVar[int] = 1

    def __post_init__(self):
        if not isinstance(self.value, Real):
            raise ArmaTypeError(f"Number expects a real number, got {type(self.value).__name__}")
        object.__setattr__(self, "value", float(self.value))

    def as_f64(self) -> Optional[float]:
        return self.value

    def is_empty(self) -> bool:
        # -0.0 == 0.0 is empty too; NaN is not
        return self.value == 0.0

    def _payload(self) -> Any:
        return self.value

    def _compare_payload(self, other: Value) -> Optional[int]:
        return _cmp(self.value, other.value)

    def __str__(self) -> str:
        return format_number(self.value)


@dataclass(frozen=True, eq=False, repr=False)
class Array(Value):
    items: tuple[Value, ...] = ()
    _rank: ClassVar[int] = 2

    def __post_init__(self):
        items = tuple(self.items)
        for item in items:
            if not isinstance(item, Value):
                raise ArmaTypeError(
                    f"Array elements must be Values, got {type(item).__name__}; "
                    f"use Value.from_native to convert native objects"
                )
        object.__setattr__(self, "items", items)

    def as_vec(self) -> Optional[tuple[Value, ...]]:
        return self.items

    def is_empty(self) -> bool:
        return len(self.items) == 0

    def _payload(self) -> Any:
        return self.items

    def _compare_payload(self, other: Value) -> Optional[int]:
        for a, b in zip(self.items, other.items):
            c = a._compare(b)
            if c != 0:
                return c
        return _cmp(len(self.items), len(other.items))

    def __repr__(self) -> str:
        return f"Array({list(self.items)!r})"

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("[")
            buffer.write(",".join(str(item) for item in self.items))
            buffer.write("]")
            return buffer.getvalue()


@dataclass(frozen=True, eq=False, repr=False)
class Boolean(Value):
    value: bool
    _rank: ClassVar[int] = 3

    def __post_init__(self):
        if not isinstance(self.value, bool):
            raise ArmaTypeError(f"Boolean expects a bool, got {type(self.value).__name__}")

    def as_bool(self) -> Optional[bool]:
        return self.value

    def is_empty(self) -> bool:
        return not self.value

    def _payload(self) -> Any:
        return self.value

    def _compare_payload(self, other: Value) -> Optional[int]:
        return _cmp(self.value, other.value)

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True, eq=False, repr=False)
class String(Value):
    value: str
    _rank: ClassVar[int] = 4

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise ArmaTypeError(f"String expects a str, got {type(self.value).__name__}")
        object.__setattr__(self, "value", str(self.value))

    def as_str(self) -> Optional[str]:
        return self.value

    def is_empty(self) -> bool:
        return len(self.value) == 0

    def _payload(self) -> Any:
        return self.value

    def _compare_payload(self, other: Value) -> Optional[int]:
        return _cmp(self.value, other.value)

    def __str__(self) -> str:
        # The runtime escapes a quote by repeating it; nothing else is escaped
        with StringIO() as buffer:
            buffer.write('"')
            buffer.write(self.value.replace('"', '""'))
            buffer.write('"')
            return buffer.getvalue()


NIL = Nil()
