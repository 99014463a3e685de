import pytest

from meval.builtins import make_global_environment
from meval.evaluation.evaluator import Evaluator
from meval.evaluation.strategies import Strategy
from meval.interpreter import Interpreter
from meval.types.procedure import Primitive
from meval.types.symbol import Symbol

# Tests that take the `strategy` fixture (directly or through `interp` /
# `evaluator`) run three times, once per argument-evaluation strategy. The
# core forms and derived forms must behave the same under all of them.
# Fixtures pass strategy and lookup policy explicitly, so MEVAL_* settings in
# the calling shell do not leak in.


@pytest.fixture(params=[Strategy.STRICT, Strategy.LAZY, Strategy.MIXED], ids=lambda s: s.value)
def strategy(request):
    return request.param


@pytest.fixture
def env():
    """A fresh global environment with the default primitives."""
    return make_global_environment(check_unassigned=True)


@pytest.fixture
def evaluator(strategy):
    return Evaluator(strategy=strategy)


@pytest.fixture
def interp(strategy):
    return Interpreter(strategy=strategy, check_unassigned=True)


@pytest.fixture
def calls():
    """A list that the `note` primitive appends its argument to."""
    return []


@pytest.fixture
def noting_interp(interp, calls):
    def note(x):
        calls.append(x)
        return x

    interp.env.define(Symbol("note"), Primitive(note, "note"))
    return interp
