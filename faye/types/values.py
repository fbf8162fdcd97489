"""Runtime value helpers: the Char and Vector wrappers, structural equality,
and the two string conversions used by the printer and the string builtins.
"""

from __future__ import annotations

import math
from decimal import Decimal
from io import StringIO

from faye import Value
from faye.types.nil import NilType
from faye.types.symbol import Keyword, Symbol


class Char:
    __slots__ = ("val",)

    def __init__(self, val: str):
        if type(val) is not str:
            raise TypeError(f"Char expects a str, got {type(val).__name__}")
        if len(val) != 1:
            raise ValueError(f"Char expects exactly one character, got {val!r}")
        self.val = val

    def __str__(self) -> str:
        return self.val

    def __repr__(self) -> str:
        return f"Char({self.val!r})"

    def __eq__(self, obj: object) -> bool:
        return type(obj) is Char and self.val == obj.val

    def __hash__(self) -> int:
        return hash((Char, self.val))


class Vector(list):
    """A `[...]` sequence. Kept distinct from lists for equality and display."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"Vector({list.__repr__(self)})"


def is_callable(v: object) -> bool:
    from faye.types.functions import BuiltinFn, Closure, UserFn

    return type(v) in (BuiltinFn, UserFn, Closure)


def is_equal(a: Value, b: Value) -> bool:
    """Deep equality: same variant and same contents. Functions never compare equal."""
    pairs = [(a, b)]
    while pairs:
        x, y = pairs.pop()
        if is_callable(x) or is_callable(y):
            return False
        if type(x) is not type(y):
            return False
        if type(x) in (list, Vector):
            if len(x) != len(y):
                return False
            pairs.extend(zip(x, y))
        elif x != y:
            return False
    return True


str_escape = {
    '"': '\\"',
}


def format_number(n: float) -> str:
    if math.isnan(n):
        return "NaN"
    if math.isinf(n):
        return "inf" if n > 0 else "-inf"
    if n.is_integer():
        if n == 0 and math.copysign(1.0, n) < 0:
            return "-0"
        return str(int(n))
    # shortest round-trip digits, always written positionally
    return format(Decimal(repr(n)), "f")


def _display_atom(val: Value) -> str:
    if val is True:
        return "true"
    if val is False:
        return "false"
    if isinstance(val, NilType):
        return "nil"
    if type(val) is float:
        return format_number(val)
    if type(val) is str:
        for k, v in str_escape.items():
            val = val.replace(k, v)
        return f'"{val}"'
    if type(val) is Char:
        return f"'{val.val}'"
    if type(val) in (Symbol, Keyword):
        return str(val)
    # callables and anything foreign render themselves
    return str(val)


class _Raw(str):
    """Bracket or separator text queued while rendering a sequence."""

    __slots__ = ()


def to_display(val: Value) -> str:
    if type(val) not in (list, Vector):
        return _display_atom(val)

    # explicit stack, so arbitrarily deep sequences render without recursion
    result = StringIO()
    stack: list[Value] = [val]
    while stack:
        item = stack.pop()
        if type(item) is _Raw:
            result.write(item)
        elif type(item) in (list, Vector):
            opening, closing = ("(", ")") if type(item) is list else ("[", "]")
            result.write(opening)
            stack.append(_Raw(closing))
            for i, child in enumerate(reversed(item)):
                if i:
                    stack.append(_Raw(" "))
                stack.append(child)
        else:
            result.write(_display_atom(item))
    return result.getvalue()


def to_text(val: Value) -> str:
    """String conversion used by `str`, `join` and `println`."""
    if type(val) is str:
        return val
    if type(val) is Char:
        return val.val
    return to_display(val)


# argument checks used with Context.downcast
def is_number(v: Value) -> bool:
    return type(v) is float


def is_bool(v: Value) -> bool:
    return type(v) is bool


def is_string(v: Value) -> bool:
    return type(v) is str


def is_sequence(v: Value) -> bool:
    return type(v) in (list, Vector) or isinstance(v, NilType)
