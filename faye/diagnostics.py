"""Caret diagrams for spanned errors.

    >>> print(format_error(err, color=False))
       --> <input>:1:6
        |
     1  | (+ 1 x)
        |      ^ Could not resolve symbol 'x' in scope

Line and column are shown 1-based. The carets cover the error span on its
first line, and there is always at least one.
"""

from __future__ import annotations

import sys
from io import StringIO
from typing import Optional

from faye import config
from faye.types.errors import FayeError

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_GUTTER = "\033[1;36m"
COLOR_CARET = "\033[1;31m"
COLOR_MESSAGE = "\033[1m"

DEFAULT_NAME = "<input>"


def use_color(color: Optional[bool] = None) -> bool:
    """Resolve a color request: explicit True/False wins, None follows FAYE_COLOR."""
    if color is not None:
        return color
    mode = config.get_color_mode()
    if mode == "always":
        return True
    if mode == "never":
        return False
    return sys.stderr.isatty()


def format_error(err: FayeError, color: Optional[bool] = None) -> str:
    colored = use_color(color)

    def paint(code: str, text: str) -> str:
        return f"{code}{text}{RESET}" if colored else text

    span = err.span
    start = span.location()
    end = span.end_location()
    line_text = span.source.get_line(start.line)
    name = span.source.name or DEFAULT_NAME

    if end.line == start.line:
        width = end.column - start.column
    else:
        width = len(line_text) - start.column
    carets = "^" * max(width, 1)

    gutter = paint(COLOR_GUTTER, "    |")
    with StringIO() as out:
        out.write(f"{paint(COLOR_GUTTER, '   -->')} {name}:{start.line + 1}:{start.column + 1}\n")
        out.write(f"{gutter}\n")
        out.write(f"{paint(COLOR_GUTTER, f'{start.line + 1:^4}|')} {line_text}\n")
        out.write(f"{gutter} {' ' * start.column}{paint(COLOR_CARET, carets)} ")
        out.write(paint(COLOR_MESSAGE, str(err)))
        return out.getvalue()
