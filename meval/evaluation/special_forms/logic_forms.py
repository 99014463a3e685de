"""and, or and unless, evaluated through their if rewrites.

The value that decided the outcome is returned, not a boolean: (and 1 2 3)
is 3 and (or nil false) is false.
"""

from meval import SExpression, LispValue, EvaluatorFn
from meval.types.environment import Environment
from meval.evaluation.desugar import and_to_if, or_to_if, unless_to_if


def and_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    return evaluate_fn(and_to_if(tail), env)


def or_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    return evaluate_fn(or_to_if(tail), env)


def unless_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    return evaluate_fn(unless_to_if(tail), env)
