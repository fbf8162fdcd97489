"""The three callable kinds of faye.

All of them expose `call(ctx, args)`, where `args` are the *unevaluated*
argument nodes of the call:

- BuiltinFn: a native callback that decides itself what to evaluate.
- UserFn: a named function installed by `fn`. It captures nothing; each call
  starts from empty locals.
- Closure: an anonymous function made by `lambda`. It owns a copy of the
  locals that were current when it was created.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from faye import Callback, Value
from faye.evaluation.apply import bind_arguments
from faye.types.node import Node
from faye.types.scope import Scope
from faye.types.symbol import Symbol

if TYPE_CHECKING:
    from faye.evaluation.context import Context


class BuiltinFn:
    __slots__ = ("name", "callback")

    def __init__(self, name: Symbol | str, callback: Callback):
        self.name: Symbol = name if isinstance(name, Symbol) else Symbol(name)
        self.callback: Callback = callback

    def call(self, ctx: Context, args: list[Node]) -> Value:
        return self.callback(ctx, args)

    def __str__(self) -> str:
        return str(self.name)

    def __repr__(self) -> str:
        return f"<builtin {self.name}>"


class UserFn:
    """A named, globally registered function with no captured environment."""

    __slots__ = ("name", "params", "body")

    def __init__(self, name: Symbol, params: list[Symbol], body: Node):
        self.name = name
        self.params = params
        self.body = body

    def call(self, ctx: Context, args: list[Node]) -> Value:
        locals_ = bind_arguments(ctx, self.params, args, Scope())
        return ctx.eval_scoped(self.body, locals_)

    def __str__(self) -> str:
        return str(self.name)

    def __repr__(self) -> str:
        params = " ".join(str(p) for p in self.params)
        return f"<fn {self.name} ({params})>"


class Closure:
    """An anonymous function over a snapshot of its defining locals."""

    __slots__ = ("scope", "params", "body")

    def __init__(self, scope: Scope, params: list[Symbol], body: Node):
        self.scope = scope
        self.params = params
        self.body = body

    def call(self, ctx: Context, args: list[Node]) -> Value:
        locals_ = bind_arguments(ctx, self.params, args, self.scope.copy())
        return ctx.eval_scoped(self.body, locals_)

    def __str__(self) -> str:
        return "#<closure>"

    def __repr__(self) -> str:
        params = " ".join(str(p) for p in self.params)
        return f"<closure ({params}) over {self.scope}>"
