"""Built-in functions for the faye runtime environment.

Every builtin receives the context and the *unevaluated* argument nodes. The
ones defined here are strict: they evaluate all of their arguments up front,
then check their types. Special forms, which evaluate selectively, live in
faye.evaluation.special_forms and are registered alongside these.
"""

from __future__ import annotations

import math
import operator
import sys
from functools import reduce
from typing import TYPE_CHECKING

from faye import Value
from faye.evaluation import special_forms
from faye.reader.lexer import parse_number
from faye.types.errors import InvalidArgument, MissingArguments
from faye.types.functions import BuiltinFn
from faye.types.nil import Nil, NilType
from faye.types.node import Node
from faye.types.scope import Scope
from faye.types.symbol import Symbol
from faye.types.values import (
    Char,
    Vector,
    is_bool,
    is_equal,
    is_number,
    is_sequence,
    is_string,
    to_text,
)

if TYPE_CHECKING:
    from faye.evaluation.context import Context

# SGR reset written after console output
RESET = "\x1b[m"


def _numbers(ctx: Context, args: list[Node]) -> list[float]:
    return ctx.downcast_all(ctx.eval_args(args), is_number)


# -------------------------------
# Arithmetic
# -------------------------------
def add(ctx: Context, args: list[Node]) -> float:
    """Sum of all arguments; 0 with none."""
    return sum(_numbers(ctx, args), 0.0)


def mul(ctx: Context, args: list[Node]) -> float:
    """Product of all arguments; 1 with none."""
    return math.prod(_numbers(ctx, args), start=1.0)


def sub(ctx: Context, args: list[Node]) -> float:
    """Subtract every later argument from the first. A single argument is returned as is."""
    values = _numbers(ctx, args)
    if not values:
        raise ctx.error(MissingArguments)
    return reduce(operator.sub, values)


def divide(a: float, b: float) -> float:
    """IEEE-754 division: x/0 is a signed infinity and 0/0 is NaN."""
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def div(ctx: Context, args: list[Node]) -> float:
    """Divide the first argument by every later one, left to right."""
    values = _numbers(ctx, args)
    if not values:
        raise ctx.error(MissingArguments)
    return reduce(divide, values)


# -------------------------------
# Comparison and logic
# -------------------------------
def equals(ctx: Context, args: list[Node]) -> bool:
    """True if every argument is equal to the first (also with zero arguments)."""
    values = ctx.eval_args(args)
    return all(is_equal(v, values[0]) for v in values)


def lt(ctx: Context, args: list[Node]) -> bool:
    return ctx.compare(args, operator.lt)


def gt(ctx: Context, args: list[Node]) -> bool:
    return ctx.compare(args, operator.gt)


def lte(ctx: Context, args: list[Node]) -> bool:
    return ctx.compare(args, operator.le)


def gte(ctx: Context, args: list[Node]) -> bool:
    return ctx.compare(args, operator.ge)


def logical_not(ctx: Context, args: list[Node]) -> bool:
    (node,) = ctx.get_n(args, 1)
    return not ctx.downcast(ctx.eval(node), is_bool)


# -------------------------------
# Strings and sequences
# -------------------------------
def str_builtin(ctx: Context, args: list[Node]) -> str:
    """Concatenate the text of every argument."""
    return "".join(to_text(v) for v in ctx.eval_args(args))


def chars(ctx: Context, args: list[Node]) -> Value:
    """(chars s): the characters of string `s` as a list, nil when `s` is empty."""
    (node,) = ctx.get_n(args, 1)
    s = ctx.downcast(ctx.eval(node), is_string)
    return [Char(c) for c in s] or Nil


def join(ctx: Context, args: list[Node]) -> str:
    """(join sep seq): the text of every element of `seq`, separated by `sep`."""
    sep_node, seq_node = ctx.get_n(args, 2)
    sep = ctx.downcast(ctx.eval(sep_node), is_string)
    seq = ctx.downcast(ctx.eval(seq_node), is_sequence)
    if isinstance(seq, NilType):
        return ""
    return sep.join(to_text(v) for v in seq)


def vec(ctx: Context, args: list[Node]) -> Vector:
    return Vector(ctx.eval_args(args))


def nth(ctx: Context, args: list[Node]) -> Value:
    """
    (nth seq index)
    Element `index` of a list, vector or string; strings yield a Char.
    """
    seq_node, index_node = ctx.get_n(args, 2)
    seq = ctx.downcast(ctx.eval(seq_node), lambda v: type(v) in (list, Vector, str))
    index = ctx.downcast(ctx.eval(index_node), is_number)

    if not index.is_integer() or not 0 <= index < len(seq):
        raise ctx.error(InvalidArgument, index)

    item = seq[int(index)]
    return Char(item) if type(seq) is str else item


def parse_num(ctx: Context, args: list[Node]) -> float:
    (node,) = ctx.get_n(args, 1)
    s = ctx.downcast(ctx.eval(node), is_string)
    try:
        return parse_number(s)
    except ValueError:
        raise ctx.error(InvalidArgument, s)


# -------------------------------
# Output
# -------------------------------
def println(ctx: Context, args: list[Node]) -> Value:
    """
    Join the text of the arguments with spaces. On a terminal the line is
    printed (followed by an SGR reset) and nil is returned; otherwise the
    line itself is the result, for front ends that render it elsewhere.
    """
    line = " ".join(to_text(v) for v in ctx.eval_args(args))
    if sys.stdout.isatty():
        print(line + RESET)
        return Nil
    return line


BUILTINS = {
    Symbol("+"): add,
    Symbol("-"): sub,
    Symbol("*"): mul,
    Symbol("/"): div,
    Symbol("="): equals,
    Symbol("<"): lt,
    Symbol(">"): gt,
    Symbol("<="): lte,
    Symbol(">="): gte,
    Symbol("not"): logical_not,
    Symbol("str"): str_builtin,
    Symbol("chars"): chars,
    Symbol("join"): join,
    Symbol("vec"): vec,
    Symbol("nth"): nth,
    Symbol("parse-num"): parse_num,
    Symbol("println"): println,
}


def register(scope: Scope) -> None:
    """Register all builtin functions and special forms into the given scope."""
    scope.update({name: BuiltinFn(name, fn) for name, fn in BUILTINS.items()})
    special_forms.register(scope)
