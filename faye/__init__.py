# Core type aliases and public API for faye, a pretty lil lisp.
#
# Runtime values are plain Python objects (float, bool, str, list, ...) plus a
# handful of small wrapper types (Symbol, Keyword, Char, Vector, Nil) and the
# three callable kinds. Syntax is never a runtime value: the parser produces
# located Node objects and the evaluator turns them into values.
#
# Naming guidance:
# - Value: use in evaluator/runtime code to denote evaluated values.
# - Callback: the signature of a builtin, which receives the *unevaluated*
#   argument nodes and decides itself what to evaluate.

import logging
from typing import Any, Callable

# Runtime value alias
Value = Any

# Builtin callback: (context, argument nodes) -> value
Callback = Callable[..., Value]

logging.getLogger(__name__).addHandler(logging.NullHandler())

from faye.types.span import Location, Source, Span  # noqa: E402
from faye.types.symbol import Keyword, Symbol  # noqa: E402
from faye.types.nil import Nil  # noqa: E402
from faye.types.values import Char, Vector, is_equal, to_display, to_text  # noqa: E402
from faye.types.errors import (  # noqa: E402
    FayeError,
    LexerError,
    ParserError,
    EvalError,
)
from faye.types.token import Token, TokenKind  # noqa: E402
from faye.types.node import Node, NodeKind  # noqa: E402
from faye.types.scope import Scope  # noqa: E402
from faye.types.functions import BuiltinFn, Closure, UserFn  # noqa: E402
from faye.reader.lexer import Lexer  # noqa: E402
from faye.reader.parser import Parser  # noqa: E402
from faye.evaluation.context import Context  # noqa: E402
from faye.interpreter import Interpreter  # noqa: E402

__all__ = [
    "Value",
    "Callback",
    "Location",
    "Source",
    "Span",
    "Symbol",
    "Keyword",
    "Nil",
    "Char",
    "Vector",
    "is_equal",
    "to_display",
    "to_text",
    "FayeError",
    "LexerError",
    "ParserError",
    "EvalError",
    "Token",
    "TokenKind",
    "Node",
    "NodeKind",
    "Scope",
    "BuiltinFn",
    "UserFn",
    "Closure",
    "Lexer",
    "Parser",
    "Context",
    "Interpreter",
]
