from __future__ import annotations

from typing import TYPE_CHECKING

from faye import Value
from faye.types.errors import InvalidArgument, MissingArguments
from faye.types.node import Node, NodeKind

if TYPE_CHECKING:
    from faye.evaluation.context import Context


def _is_group(bindings: list[Node]) -> bool:
    """True for the `((a 1) (b 2))` spelling: one list whose items are lists."""
    if len(bindings) != 1 or bindings[0].kind is not NodeKind.LIST:
        return False
    items = bindings[0].value
    return not items or items[0].kind is NodeKind.LIST


def let_form(ctx: Context, tail: list[Node]) -> Value:
    """
    (let (a 1) (b (+ a 1)) body)
    (let ((a 1) (b (+ a 1))) body)

    Bindings are evaluated in order against the locals built so far, so later
    bindings see earlier ones. The body runs with the extended locals and the
    caller's locals are back in place afterwards, whatever happens.
    """
    if not tail:
        raise ctx.error(MissingArguments)

    *bindings, body = tail
    if _is_group(bindings):
        bindings = bindings[0].value

    with ctx.scoped(ctx.locals.copy()) as locals_:
        for binding in bindings:
            if binding.kind is not NodeKind.LIST:
                raise ctx.error(InvalidArgument, binding.to_value())
            name, value = ctx.get_n(binding.value, 2)
            if name.kind is not NodeKind.SYMBOL:
                raise ctx.error(InvalidArgument, name.to_value())
            locals_.define(name.value, ctx.eval(value))

        return ctx.eval(body)
