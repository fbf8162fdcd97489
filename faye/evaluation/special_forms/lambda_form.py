from __future__ import annotations

from typing import TYPE_CHECKING

from faye.evaluation.apply import param_names
from faye.types.functions import Closure
from faye.types.node import Node

if TYPE_CHECKING:
    from faye.evaluation.context import Context


def lambda_form(ctx: Context, tail: list[Node]) -> Closure:
    """
    (lambda params body), also spelled (λ params body)
    The closure keeps a copy of the locals current at this point; later
    changes to them are not seen by the closure.
    """
    params_node, body = ctx.get_n(tail, 2)
    params = param_names(ctx, params_node)
    return Closure(ctx.locals.copy(), params, body)
