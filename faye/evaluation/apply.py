"""Argument binding for user-defined functions and closures.

Both callable kinds bind strictly, positionally and with exact arity: each
argument node is evaluated in the caller's scope, left to right, and bound to
the matching parameter on top of the starting scope (empty for `fn`
functions, a copy of the captured scope for closures).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from faye.types.errors import InvalidArgument, MissingArguments, TooManyArguments
from faye.types.node import Node, NodeKind
from faye.types.scope import Scope
from faye.types.symbol import Symbol

if TYPE_CHECKING:
    from faye.evaluation.context import Context


def bind_arguments(
    ctx: Context,
    params: list[Symbol],
    args: list[Node],
    locals_: Scope,
) -> Scope:
    """
    Evaluate `args` and bind them to `params` inside `locals_`, returning it.

    Raises MissingArguments when the call supplies fewer arguments than there
    are parameters and TooManyArguments when it supplies more, both at the
    call site. Extra arguments are never evaluated.
    """
    for i, param in enumerate(params):
        if i >= len(args):
            raise ctx.error(MissingArguments)
        locals_.define(param, ctx.eval(args[i]))

    if len(args) > len(params):
        raise ctx.error(TooManyArguments)

    return locals_


def param_names(ctx: Context, node: Node) -> list[Symbol]:
    """
    The parameter symbols of a `fn` or `lambda` form.

    Accepts a list or vector of symbols, `()` meaning no parameters; anything
    else is an InvalidArgument carrying the literal parameter list.
    """
    if node.kind not in (NodeKind.LIST, NodeKind.VECTOR) or any(
        p.kind is not NodeKind.SYMBOL for p in node.value
    ):
        raise ctx.error(InvalidArgument, node.to_value())
    return [p.value for p in node.value]
