"""
  faye Parser

Turns the token stream of a Lexer into a forest of top-level Nodes.

The parser is stack based rather than recursive: it keeps the containers that
are open but not yet closed on a `parents` stack and fills one current
container at a time. Running out of tokens with open containers left is the
distinct UnclosedBracket error, which an interactive front end takes as "read
another line" rather than as a syntax error. Deeply nested input cannot
exhaust the host stack.
"""

from __future__ import annotations

import logging
from typing import Optional

from faye.types.errors import (
    LexerError,
    ParserLexerError,
    UnclosedBracket,
    UnexpectedCloseBracket,
    UnmatchedBracket,
    Unreachable,
)
from faye.types.node import Node, NodeKind
from faye.types.span import Source
from faye.types.token import Token, TokenKind
from faye.reader.lexer import Lexer

logger = logging.getLogger(__name__)

OPENING = {
    TokenKind.OPEN_PAREN: NodeKind.LIST,
    TokenKind.OPEN_BRACKET: NodeKind.VECTOR,
}

CLOSING = {
    TokenKind.CLOSE_PAREN: NodeKind.LIST,
    TokenKind.CLOSE_BRACKET: NodeKind.VECTOR,
}


class Parser:
    __slots__ = ("lexer",)

    def __init__(self, text: str, name: Optional[str] = None):
        self.lexer = Lexer(text, name)

    @property
    def source(self) -> Source:
        return self.lexer.source

    def set_name(self, name: str) -> None:
        self.lexer.set_name(name)

    def next_token(self) -> Optional[Token]:
        try:
            return self.lexer.read()
        except LexerError as err:
            raise ParserLexerError(err) from err

    def parse(self) -> list[Node]:
        """Parse the whole input into its top-level forms.

        Raises a ParserError subclass on the first problem found.
        """
        parents: list[Node] = []
        # the root container collects the top-level forms
        current = Node.container(NodeKind.LIST, self.lexer.span())

        while (token := self.next_token()) is not None:
            kind = token.kind

            if kind is TokenKind.COMMENT:
                continue

            if kind in OPENING:
                parents.append(current)
                current = Node.container(OPENING[kind], token.span)
                continue

            if kind in CLOSING:
                if not parents:
                    raise UnexpectedCloseBracket(token.span)
                parent = parents.pop()
                current.span.extend(token.span)
                if current.kind is not CLOSING[kind]:
                    raise UnmatchedBracket(token.span)
                parent.push_node(current)
                current = parent
                continue

            current.push_node(Node.from_token(token))

        if parents:
            raise UnclosedBracket(current.span)

        if current.kind is not NodeKind.LIST:
            raise Unreachable(current.span)

        logger.debug("parsed %d top-level form(s)", len(current.value))
        return current.value
