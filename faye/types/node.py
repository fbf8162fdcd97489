"""AST nodes produced by the parser.

A Node is a literal, a symbol, or a list/vector container of child nodes,
always paired with the Span it was read from. Containers span from their
opening bracket through the matching closing bracket.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from faye import Value
from faye.types.errors import Unreachable
from faye.types.nil import Nil
from faye.types.span import Span
from faye.types.token import Token, TokenKind
from faye.types.values import Vector


class NodeKind(Enum):
    NUMBER = auto()
    BOOL = auto()
    STRING = auto()
    CHAR = auto()
    SYMBOL = auto()
    KEYWORD = auto()
    LIST = auto()
    VECTOR = auto()
    NIL = auto()


_LEAF_KINDS = {
    TokenKind.NUMBER: NodeKind.NUMBER,
    TokenKind.BOOL: NodeKind.BOOL,
    TokenKind.STRING: NodeKind.STRING,
    TokenKind.CHAR: NodeKind.CHAR,
    TokenKind.SYMBOL: NodeKind.SYMBOL,
    TokenKind.KEYWORD: NodeKind.KEYWORD,
    TokenKind.NIL: NodeKind.NIL,
}


@dataclass(slots=True)
class Node:
    kind: NodeKind
    value: Any
    span: Span

    @classmethod
    def container(cls, kind: NodeKind, span: Span) -> Node:
        """An empty list or vector node, to be filled by the parser."""
        return cls(kind, [], span)

    @classmethod
    def from_token(cls, token: Token) -> Node:
        """Leaf node for a literal or symbol token. Brackets and comments have none."""
        kind = _LEAF_KINDS.get(token.kind)
        if kind is None:
            raise Unreachable(token.span)
        return cls(kind, token.value, token.span)

    @property
    def is_container(self) -> bool:
        return self.kind in (NodeKind.LIST, NodeKind.VECTOR)

    def push_node(self, child: Node) -> None:
        """Append a child to a list or vector node."""
        if not self.is_container:
            raise Unreachable(child.span)
        self.value.append(child)

    def literal(self) -> Value:
        """This node's value on its own: a leaf value, or an empty container to fill."""
        match self.kind:
            case NodeKind.LIST if not self.value:
                return Nil
            case NodeKind.LIST:
                return []
            case NodeKind.VECTOR:
                return Vector()
            case NodeKind.NIL:
                return Nil
            case _:
                return self.value

    def to_value(self) -> Value:
        """The literal value this node denotes, without evaluating anything.

        Built with an explicit stack like the parser, so any nesting the
        parser accepts converts without exhausting the host stack.
        """
        result = self.literal()
        pending = [(self.value, result)] if self.is_container and self.value else []
        while pending:
            children, target = pending.pop()
            for child in children:
                value = child.literal()
                target.append(value)
                if child.is_container and child.value:
                    pending.append((child.value, value))
        return result
