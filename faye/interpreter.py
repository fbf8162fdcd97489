from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from faye import Value
from faye.evaluation.context import Context
from faye.reader.parser import Parser
from faye.types.errors import EvalError, ParserError, UnclosedBracket
from faye.types.nil import Nil
from faye.types.node import Node
from faye.types.symbol import Symbol

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Result:
    """Outcome of one top-level form: its value, or the error it raised."""

    node: Node
    value: Optional[Value] = None
    error: Optional[EvalError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class Interpreter:
    """
    Parses and evaluates whole source units against one long-lived Context,
    so definitions made by one call are visible to the next.
    """

    def __init__(self, context: Optional[Context] = None):
        self.context = context if context is not None else Context()

    def run(self, code: str, name: Optional[str] = None) -> list[Result]:
        """
        Evaluate every top-level form of `code` in order.

        A parse error is raised before anything is evaluated. An evaluation
        error is recorded on that form's Result and the next form still runs.
        """
        forms = Parser(code, name).parse()

        results = []
        for node in forms:
            try:
                results.append(Result(node, value=self.context.eval(node)))
            except EvalError as err:
                logger.debug("form at %r failed: %s", node.span, err)
                results.append(Result(node, error=err))
        return results

    def eval(self, code: str, name: Optional[str] = None) -> Value:
        """Evaluate `code` and return the value of its last form (nil if none).

        Unlike `run`, the first evaluation error is raised and stops the unit.
        """
        value = Nil
        for node in Parser(code, name).parse():
            value = self.context.eval(node)
        return value

    @staticmethod
    def needs_more_input(code: str) -> bool:
        """True when `code` only fails to parse because a bracket is still open."""
        try:
            Parser(code).parse()
        except UnclosedBracket:
            return True
        except ParserError:
            return False
        return False

    def globals(self) -> list[Symbol]:
        return self.context.list_globals()
