from __future__ import annotations

from typing import TYPE_CHECKING

from faye import Value
from faye.types.node import Node

if TYPE_CHECKING:
    from faye.evaluation.context import Context


def quote_form(ctx: Context, tail: list[Node]) -> Value:
    """(quote x): x as a literal value, never evaluated."""
    (node,) = ctx.get_n(tail, 1)
    return node.to_value()
