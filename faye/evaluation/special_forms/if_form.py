from __future__ import annotations

from typing import TYPE_CHECKING

from faye import Value
from faye.types.nil import Nil
from faye.types.node import Node
from faye.types.values import is_bool

if TYPE_CHECKING:
    from faye.evaluation.context import Context


def if_form(ctx: Context, tail: list[Node]) -> Value:
    """
    (if cond then [else])

    `cond` must evaluate to a bool; only the selected branch is evaluated.
    Without an else branch a false condition yields nil.
    """
    if len(tail) == 3:
        cond, then, or_else = tail
    else:
        cond, then = ctx.get_n(tail, 2)
        or_else = None

    if ctx.downcast(ctx.eval(cond), is_bool):
        return ctx.eval(then)
    if or_else is None:
        return Nil
    return ctx.eval(or_else)
