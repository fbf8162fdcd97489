from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from faye.evaluation.apply import param_names
from faye.types.errors import InvalidArgument
from faye.types.functions import UserFn
from faye.types.nil import Nil, NilType
from faye.types.node import Node, NodeKind
from faye.types.symbol import Symbol

if TYPE_CHECKING:
    from faye.evaluation.context import Context

logger = logging.getLogger(__name__)


def _name(ctx: Context, node: Node) -> Symbol:
    if node.kind is not NodeKind.SYMBOL:
        raise ctx.error(InvalidArgument, node.to_value())
    return node.value


def fn_form(ctx: Context, tail: list[Node]) -> NilType:
    """
    (fn name params body)
    Installs a named function in globals. The function sees its arguments and
    the globals only, never the locals it was defined in.
    """
    name_node, params_node, body = ctx.get_n(tail, 3)
    name = _name(ctx, name_node)
    params = param_names(ctx, params_node)

    ctx.globals.define(name, UserFn(name, params, body))
    logger.debug("defined fn %s with %d parameter(s)", name, len(params))
    return Nil


def const_form(ctx: Context, tail: list[Node]) -> NilType:
    """(const name value): evaluate `value` and bind it in globals."""
    name_node, value_node = ctx.get_n(tail, 2)
    name = _name(ctx, name_node)

    ctx.globals.define(name, ctx.eval(value_node))
    logger.debug("defined const %s", name)
    return Nil
