"""Name-to-value mapping used for both globals and locals.

Unlike a chained environment, a Scope has no outer link: lookups go through
the current locals and then the globals, and nothing else. A Scope is copied
when a closure captures it, which is what gives closures value semantics.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Optional

from faye import Value
from faye.types.symbol import Symbol
from faye.types.values import to_display


class Scope:
    """Flat mapping from Symbols to values. Last definition wins."""

    __slots__ = ("vars",)

    def __init__(self, bindings: Optional[dict[Symbol, Value]] = None):
        self.vars: dict[Symbol, Value] = dict(bindings) if bindings else {}

    def define(self, name: Symbol, value: Value) -> None:
        """Bind `name` to `value`, replacing any previous binding."""
        if type(name) is not Symbol:
            raise TypeError(f"Cannot define {name!r} as a symbol")
        self.vars[name] = value

    def lookup(self, name: Symbol) -> Optional[Value]:
        """The value bound to `name`, or None if unbound."""
        return self.vars.get(name)

    def update(self, mapping: dict[Symbol, Value]) -> None:
        """Bulk-define a mapping of Symbol -> value."""
        for k, v in mapping.items():
            self.define(k, v)

    def copy(self) -> Scope:
        # values are never mutated in place, so copying the mapping is enough
        # to decouple the copy from later definitions in this scope
        return Scope(self.vars)

    def names(self) -> list[Symbol]:
        return sorted(self.vars)

    def __contains__(self, name: object) -> bool:
        return name in self.vars

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self.vars)

    def __len__(self) -> int:
        return len(self.vars)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("{")
            buffer.write(", ".join(f"{k}: {to_display(v)}" for k, v in self.vars.items()))
            buffer.write("}")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Scope {self}>"
