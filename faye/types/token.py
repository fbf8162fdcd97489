from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from faye.types.span import Span


class TokenKind(Enum):
    OPEN_PAREN = auto()
    CLOSE_PAREN = auto()
    OPEN_BRACKET = auto()
    CLOSE_BRACKET = auto()
    COMMENT = auto()
    SYMBOL = auto()
    NUMBER = auto()
    BOOL = auto()
    STRING = auto()
    CHAR = auto()
    KEYWORD = auto()
    NIL = auto()


@dataclass(slots=True)
class Token:
    """A token with its payload and location.

    value holds the comment text, Symbol, float, bool, string contents, Char or
    Keyword matching `kind`; brackets and nil carry None.
    """

    kind: TokenKind
    value: Any
    span: Span
