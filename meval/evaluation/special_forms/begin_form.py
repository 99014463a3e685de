from meval import SExpression, LispValue, EvaluatorFn
from meval.types.environment import Environment
from meval.evaluation.apply import evaluate_sequence


def begin_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    return evaluate_sequence(tail, env, evaluate_fn)
