import io

import pytest

from sprig.builtins import register
from sprig.interpreter import Interpreter
from sprig.types.environment import Arena, Environment
from sprig.types.symbol import Symbol

S = Symbol


@pytest.fixture
def out():
    """Captures println output."""
    return io.StringIO()


@pytest.fixture
def env(out):
    """Fresh environment with builtins loaded."""
    e = Environment(Arena(output=out))
    register(e)
    return e


@pytest.fixture
def interp(out):
    return Interpreter(output=out)


@pytest.fixture
def math_interp(interp):
    """Interpreter with (define [math a b c d] (+ a (- b c) d)) already evaluated."""
    interp.eval(
        [S("define"), [S("math"), S("a"), S("b"), S("c"), S("d")],
            [S("+"), S("a"), [S("-"), S("b"), S("c")], S("d")]]
    )
    return interp
