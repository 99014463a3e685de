import pytest

from meval.errors import UnboundVariable
from meval.evaluation.strategies import (
    LazyArguments,
    MixedArguments,
    Strategy,
    StrictArguments,
    policy_for,
)
from meval.interpreter import Interpreter
from meval.reader.parser import read
from meval.types.environment import Environment
from meval.types.procedure import ParamMode, ParamSpec, Primitive, Procedure, parse_param
from meval.types.symbol import Symbol
from meval.types.thunk import Thunk, force_it


class CountingEvaluator:
    """Stands in for an evaluator; returns a fixed value and counts calls."""

    def __init__(self, value=7):
        self.value = value
        self.calls = 0

    def __call__(self, expr, env):
        self.calls += 1
        return self.value


TRY = """
    (define (try a b)
      (if (= a 0) 1 b))
"""

COUNTER = "(define count 0)"


# -----------------------------------------------------
# Thunks
# -----------------------------------------------------

def test_thunk_construction_does_not_evaluate():
    evaluate_fn = CountingEvaluator()
    thunk = Thunk(read("(/ 1 0)"), Environment(), memo=True)
    assert evaluate_fn.calls == 0
    assert not thunk.forced
    assert thunk.force(evaluate_fn) == 7
    assert evaluate_fn.calls == 1
    assert thunk.forced


def test_plain_thunk_reevaluates_on_every_force():
    evaluate_fn = CountingEvaluator()
    thunk = Thunk(Symbol("x"), Environment())
    assert thunk.force(evaluate_fn) == 7
    assert thunk.force(evaluate_fn) == 7
    assert evaluate_fn.calls == 2
    assert not thunk.forced


def test_memo_thunk_evaluates_once():
    evaluate_fn = CountingEvaluator()
    thunk = Thunk(Symbol("x"), Environment(), memo=True)
    assert thunk.force(evaluate_fn) == 7
    assert thunk.force(evaluate_fn) == 7
    assert evaluate_fn.calls == 1
    assert thunk.forced
    assert thunk.env is None


def test_force_it_unwraps_nested_thunks():
    answers = iter([Thunk(Symbol("x"), Environment()), 3])
    outer = Thunk(Symbol("y"), Environment())
    assert force_it(outer, lambda expr, env: next(answers)) == 3
    assert force_it(5, None) == 5


def test_failed_force_leaves_memo_thunk_unforced():
    def failing(expr, env):
        raise ZeroDivisionError("boom")

    thunk = Thunk(read("(/ 1 0)"), Environment(), memo=True)
    with pytest.raises(ZeroDivisionError):
        thunk.force(failing)
    assert not thunk.forced


# -----------------------------------------------------
# Parameter specs
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", ParamSpec(Symbol("a"))),
        ("(a lazy)", ParamSpec(Symbol("a"), ParamMode.LAZY)),
        ("(a lazy-memo)", ParamSpec(Symbol("a"), ParamMode.LAZY_MEMO)),
        ("(a strict)", ParamSpec(Symbol("a"), ParamMode.STRICT)),
    ],
)
def test_parse_param(source, expected):
    assert parse_param(read(source)) == expected


@pytest.mark.parametrize(
    "strategy,policy",
    [(Strategy.STRICT, StrictArguments), (Strategy.LAZY, LazyArguments), (Strategy.MIXED, MixedArguments)],
)
def test_policy_for(strategy, policy):
    assert type(policy_for(strategy)) is policy


def test_lazy_policy_wraps_procedure_operands_only():
    env = Environment({Symbol("x"): 1})
    evaluate_fn = CountingEvaluator()
    proc = Procedure([ParamSpec(Symbol("a"))], [Symbol("a")], env)
    args = LazyArguments().arguments(proc, [Symbol("x")], env, evaluate_fn)
    assert isinstance(args[0], Thunk) and evaluate_fn.calls == 0

    args = LazyArguments().arguments(Primitive(abs), [Symbol("x")], env, evaluate_fn)
    assert args == [7] and evaluate_fn.calls == 1


# -----------------------------------------------------
# Strict
# -----------------------------------------------------

def test_strict_evaluates_every_operand():
    interp = Interpreter(strategy=Strategy.STRICT)
    interp.eval(TRY)
    with pytest.raises(ZeroDivisionError):
        interp.eval("(try 0 (/ 1 0))")


def test_strict_ignores_parameter_modes():
    interp = Interpreter(strategy=Strategy.STRICT)
    interp.eval("(define (f (b lazy)) 1)")
    with pytest.raises(ZeroDivisionError):
        interp.eval("(f (/ 1 0))")


def test_strict_operand_order_is_left_to_right():
    calls = []

    def note(x):
        calls.append(x)
        return x

    interp = Interpreter(strategy=Strategy.STRICT)
    interp.env.define(Symbol("note"), Primitive(note))
    interp.eval("(define (f a b c) c)")
    assert interp.eval("(f (note 1) (note 2) (note 3))") == 3
    assert calls == [1, 2, 3]


# -----------------------------------------------------
# Lazy
# -----------------------------------------------------

@pytest.fixture
def lazy():
    return Interpreter(strategy=Strategy.LAZY)


def test_lazy_skips_unused_argument(lazy):
    lazy.eval(TRY)
    assert lazy.eval("(try 0 (/ 1 0))") == 1


def test_lazy_error_surfaces_at_use(lazy):
    lazy.eval("(define (use x) (+ x 1))")
    with pytest.raises(ZeroDivisionError):
        lazy.eval("(use (/ 1 0))")


def test_lazy_thunks_are_not_memoized(lazy):
    lazy.eval(COUNTER)
    lazy.eval("(define (twice x) x x)")
    lazy.eval("(twice (set! count (+ count 1)))")
    assert lazy.eval("count") == 2


def test_lazy_unreferenced_argument_never_runs(lazy):
    lazy.eval(COUNTER)
    lazy.eval("(define (ignore x) 'ignored)")
    lazy.eval("(ignore (set! count (+ count 1)))")
    assert lazy.eval("count") == 0


def test_lazy_thunks_capture_the_caller_frame(lazy):
    lazy.eval("(define (id x) x)")
    lazy.eval("(define (first a b) a)")
    assert lazy.eval("(let ((y 5)) (first (id y) (/ 1 0)))") == 5
    with pytest.raises(UnboundVariable):
        lazy.eval("(first (id undefined-name) 1)")


def test_lazy_primitives_receive_values(lazy):
    assert lazy.eval("(+ 1 2)") == 3
    assert lazy.eval("(car (list 1 2))") == 1


# -----------------------------------------------------
# Mixed
# -----------------------------------------------------

@pytest.fixture
def mixed():
    return Interpreter(strategy=Strategy.MIXED)


def test_mixed_lazy_parameter(mixed):
    source = """
        (begin
          (define (f a (b lazy) c)
            (if a b c))
          (f false (/ 1 0) 42))
    """
    assert mixed.eval(source) == 42


def test_mixed_strict_parameter_is_eager(mixed):
    mixed.eval("(define (f a (b lazy)) b)")
    with pytest.raises(ZeroDivisionError):
        mixed.eval("(f (/ 1 0) 1)")


def test_mixed_lazy_memo_forces_once(mixed):
    source = """
        (begin
          (define foo 0)
          (define (f (b lazy-memo))
            b
            b
            'ok)
          (f (set! foo (+ foo 1)))
          foo)
    """
    assert mixed.eval(source) == 1


def test_mixed_plain_lazy_reruns_every_reference(mixed):
    source = """
        (begin
          (define foo 0)
          (define (f (b lazy))
            b
            b
            b
            'ok)
          (f (set! foo (+ foo 1)))
          foo)
    """
    assert mixed.eval(source) == 3


def test_mixed_lazy_memo_unreferenced_never_runs(mixed):
    mixed.eval(COUNTER)
    mixed.eval("(define (g (b lazy-memo)) 'ok)")
    mixed.eval("(g (set! count (+ count 1)))")
    assert mixed.eval("count") == 0


def test_mixed_memo_value_is_the_forced_value(mixed):
    mixed.eval("(define (square (x lazy-memo)) (* x x))")
    assert mixed.eval("(square (+ 2 3))") == 25
