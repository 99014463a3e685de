"""let, named let, let* and letrec.

All four are rewritten before evaluation; let* and letrec rewrite into let,
which the evaluator then rewrites again through the table.
"""

from meval import SExpression, LispValue, EvaluatorFn
from meval.types.environment import Environment
from meval.evaluation.desugar import (
    let_to_combination,
    let_star_to_nested_lets,
    letrec_to_let,
    named_let_to_combination,
)


def let_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Plain let only; see named_let_form for (let name bindings body...)."""
    return evaluate_fn(let_to_combination(tail), env)


def named_let_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    return evaluate_fn(named_let_to_combination(tail), env)


def let_star_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    return evaluate_fn(let_star_to_nested_lets(tail), env)


def letrec_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    return evaluate_fn(letrec_to_let(tail), env)
