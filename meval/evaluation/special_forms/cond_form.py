from meval import SExpression, LispValue, EvaluatorFn
from meval.types.environment import Environment
from meval.evaluation.desugar import cond_to_if


def cond_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    return evaluate_fn(cond_to_if(tail), env)
