from meval import SExpression, LispValue, EvaluatorFn
from meval.errors import MevalSyntaxError
from meval.types.environment import Environment


def quote_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) != 1:
        raise MevalSyntaxError("quote expects exactly 1 argument")
    return tail[0]
