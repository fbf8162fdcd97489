from __future__ import annotations
import sys


class Symbol:
    __slots__ = ("id",)

    def __init__(self, name: str):
        # Intern to ensure fast equality/hash and reduce memory
        self.id = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self) and self.id == other.id

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.id))

    def __lt__(self, other: Symbol) -> bool:
        return self.id < other.id

    def __repr__(self):
        return f"{type(self).__name__}({self.id!r})"

    def __str__(self):
        return self.id


class Keyword(Symbol):
    """A self-evaluating `:name`. Never equal to the symbol of the same name."""

    __slots__ = ()

    def __str__(self):
        return f":{self.id}"
