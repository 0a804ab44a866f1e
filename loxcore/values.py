"""Runtime values for loxcore.

This module defines the closed set of values the interpreter produces:
nil, booleans, numbers and strings. Each variant is an immutable
dataclass, and the helpers below implement the language's truthiness,
equality and textual rendering rules over that set.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union
import math


class NilVal:
    """Marker object for the `nil` value. There is only ever one."""
    _instance: "NilVal | None" = None

    def __new__(cls) -> "NilVal":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'nil'

    def __eq__(self, other: object) -> bool:
        return isinstance(other, NilVal)

    def __hash__(self) -> int:
        return hash(NilVal)


NIL = NilVal()


@dataclass(frozen=True)
class BoolVal:
    value: bool

    def __repr__(self) -> str:
        return f"Bool({self.value})"


@dataclass(frozen=True)
class NumberVal:
    """A double-precision number. Integers are stored as floats too."""
    value: float

    def __repr__(self) -> str:
        return f"Number({self.value!r})"


@dataclass(frozen=True)
class TextVal:
    value: str

    def __repr__(self) -> str:
        return f"Text({self.value!r})"


Value = Union[NilVal, BoolVal, NumberVal, TextVal]


def from_python(obj: Any) -> Value:
    """Wrap a plain Python scalar in the matching value variant."""
    if obj is None:
        return NIL
    # bool before int: bool is an int subclass
    if isinstance(obj, bool):
        return BoolVal(obj)
    if isinstance(obj, (int, float)):
        return NumberVal(float(obj))
    if isinstance(obj, str):
        return TextVal(obj)
    raise TypeError(f"no runtime value for {type(obj).__name__}")


def is_truthy(value: Value) -> bool:
    # Only nil and false are falsy; 0 and "" are truthy.
    if isinstance(value, NilVal):
        return False
    if isinstance(value, BoolVal):
        return value.value
    return True


def is_equal(a: Value, b: Value) -> bool:
    if isinstance(a, NilVal):
        return isinstance(b, NilVal)
    if isinstance(a, NumberVal) and isinstance(b, NumberVal):
        return a.value == b.value
    if isinstance(a, TextVal) and isinstance(b, TextVal):
        return a.value == b.value
    if isinstance(a, BoolVal) and isinstance(b, BoolVal):
        return a.value == b.value
    return False


def format_number(x: float) -> str:
    """Render a number the way `print` shows it.

    Uses the shortest round-trip representation and drops a trailing
    ``.0`` so that whole numbers print without a fractional part.
    """
    if math.isnan(x):
        return 'NaN'
    if math.isinf(x):
        return 'Infinity' if x > 0 else '-Infinity'
    text = repr(x)
    if text.endswith('.0'):
        text = text[:-2]
    return text


def stringify(value: Value) -> str:
    if isinstance(value, NilVal):
        return 'nil'
    if isinstance(value, NumberVal):
        return format_number(value.value)
    if isinstance(value, BoolVal):
        return 'true' if value.value else 'false'
    if isinstance(value, TextVal):
        return value.value
    raise TypeError(f"not a runtime value: {value!r}")


def type_name(value: Value) -> str:
    if isinstance(value, NilVal):
        return 'nil'
    if isinstance(value, BoolVal):
        return 'boolean'
    if isinstance(value, NumberVal):
        return 'number'
    if isinstance(value, TextVal):
        return 'string'
    return type(value).__name__
