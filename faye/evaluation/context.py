"""Evaluation context for faye.

A Context owns the two scopes a program can see (globals for the whole
session, locals for the function call or `let` being evaluated) and the
bookkeeping that lets errors point at the call site of the function that
failed rather than at whatever sub-expression happened to be evaluating.
"""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from typing import Callable, Iterable, Iterator, Optional

from faye import Value, config
from faye.builtin.env_builtin import register
from faye.types.errors import (
    EvalError,
    InvalidArgument,
    InvalidFunction,
    MissingArguments,
    RecursionDepthExceeded,
    TooManyArguments,
    UnknownSymbol,
)
from faye.types.functions import BuiltinFn, Closure, UserFn
from faye.types.node import Node, NodeKind
from faye.types.scope import Scope
from faye.types.span import Source, Span
from faye.types.symbol import Symbol
from faye.types.values import is_number

logger = logging.getLogger(__name__)

# host frames per call dispatch on the deepest path: strict builtins go
# eval -> dispatch -> call -> callback -> helper -> eval_args -> listcomp -> eval
_FRAMES_PER_DEPTH = 8
_FRAME_HEADROOM = 200


class Context:
    """Globals, current locals and call-site tracking for one evaluation session."""

    def __init__(self, max_depth: Optional[int] = None):
        self.globals: Scope = Scope()
        register(self.globals)
        self.locals: Scope = Scope()

        # call-site span of the innermost dispatch in progress
        self.span: Span = Span.empty(Source(""))
        self.depth: int = 0
        self.max_depth: int = max_depth if max_depth is not None else config.get_max_depth()

        needed = self.max_depth * _FRAMES_PER_DEPTH + _FRAME_HEADROOM
        if sys.getrecursionlimit() < needed:
            sys.setrecursionlimit(needed)

        logger.debug("context created with %d builtins", len(self.globals))

    # -------------------------------
    # Scopes
    # -------------------------------
    def get(self, name: Symbol) -> Optional[Value]:
        """Resolve `name` in locals, then globals."""
        value = self.locals.lookup(name)
        if value is None:
            value = self.globals.lookup(name)
        return value

    def list_globals(self) -> list[Symbol]:
        """Sorted names of every global binding."""
        return self.globals.names()

    @contextmanager
    def scoped(self, locals_: Scope) -> Iterator[Scope]:
        """Install `locals_` for the duration of the block, then restore the caller's."""
        saved = self.locals
        self.locals = locals_
        try:
            yield locals_
        finally:
            self.locals = saved

    def eval_scoped(self, node: Node, locals_: Scope) -> Value:
        """Evaluate `node` with `locals_` temporarily replacing the current locals."""
        with self.scoped(locals_):
            return self.eval(node)

    # -------------------------------
    # Evaluation
    # -------------------------------
    def eval(self, node: Node) -> Value:
        """Evaluate one node. Raises an EvalError subclass on failure."""
        match node.kind:
            case NodeKind.SYMBOL:
                value = self.get(node.value)
                if value is None:
                    raise UnknownSymbol(node.value, node.span)
                return value
            case NodeKind.LIST if node.value:
                return self.dispatch(node.value[0], node.value[1:])
            case _:
                return node.to_value()

    def dispatch(self, head: Node, args: list[Node]) -> Value:
        """Evaluate `head` and call it with the unevaluated `args`."""
        saved = self.span
        self.span = head.span
        self.depth += 1
        try:
            if self.depth > self.max_depth:
                logger.debug("depth limit %d reached at %r", self.max_depth, head.span)
                raise self.error(RecursionDepthExceeded, self.max_depth)

            fn = self.eval(head)
            match fn:
                case BuiltinFn() | UserFn() | Closure():
                    return fn.call(self, args)
                case _:
                    raise self.error(InvalidFunction, fn)
        except RecursionError:
            # the host stack ran out before the counter; unwind to the outermost
            # dispatch, where there is room to build the error
            if self.depth > 1:
                raise
            logger.debug("host recursion limit reached below %r", head.span)
            raise self.error(RecursionDepthExceeded, self.max_depth) from None
        finally:
            self.depth -= 1
            self.span = saved

    # -------------------------------
    # Helpers for builtins
    # -------------------------------
    def error(self, cls: type[EvalError], *args) -> EvalError:
        """An error of kind `cls` located at the current call site."""
        return cls(*args, self.span)

    def eval_args(self, args: Iterable[Node]) -> list[Value]:
        return [self.eval(n) for n in args]

    def downcast(self, value: Value, check: Callable[[Value], bool]) -> Value:
        """Return `value` if it passes `check`, else fail with InvalidArgument."""
        if not check(value):
            raise self.error(InvalidArgument, value)
        return value

    def downcast_all(self, values: Iterable[Value], check: Callable[[Value], bool]) -> list[Value]:
        return [self.downcast(v, check) for v in values]

    def get_n(self, args: list[Node], n: int) -> list[Node]:
        """Require exactly `n` argument nodes."""
        if len(args) < n:
            raise self.error(MissingArguments)
        if len(args) > n:
            raise self.error(TooManyArguments)
        return args

    def compare(self, args: list[Node], op: Callable[[float, float], bool]) -> bool:
        """True if `op` holds for every adjacent pair of the evaluated numeric arguments."""
        values = self.downcast_all(self.eval_args(args), is_number)
        return all(op(a, b) for a, b in zip(values, values[1:]))
