from __future__ import annotations

from typing import TYPE_CHECKING

from faye.types.node import Node
from faye.types.values import is_bool

if TYPE_CHECKING:
    from faye.evaluation.context import Context


def and_form(ctx: Context, tail: list[Node]) -> bool:
    """Short-circuiting logical AND special form.

    (and a b c ...) evaluates each operand left-to-right and stops at the
    first false one. Every operand evaluated must be a bool. With zero
    operands, returns true.
    """
    for expr in tail:
        if not ctx.downcast(ctx.eval(expr), is_bool):
            return False
    return True


def or_form(ctx: Context, tail: list[Node]) -> bool:
    """Short-circuiting logical OR special form.

    (or a b c ...) evaluates each operand left-to-right and stops at the
    first true one. With zero operands, returns false.
    """
    for expr in tail:
        if ctx.downcast(ctx.eval(expr), is_bool):
            return True
    return False
