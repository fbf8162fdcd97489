import pytest

from faye.evaluation.context import Context
from faye.reader.parser import Parser
from faye.types.nil import Nil


@pytest.fixture
def ctx():
    """Fresh context with builtins loaded."""
    return Context()


@pytest.fixture
def run(ctx):
    """Evaluate every form of a source string in `ctx`, returning the last value."""

    def _run(source):
        result = Nil
        for node in Parser(source).parse():
            result = ctx.eval(node)
        return result

    return _run
