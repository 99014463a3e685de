from meval import SExpression, LispValue, EvaluatorFn
from meval.errors import MevalSyntaxError
from meval.types.environment import Environment
from meval.types.nil import Nil, is_true
from meval.types.thunk import force_it


def if_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) not in (2, 3):
        raise MevalSyntaxError("if requires a condition, a then-expression and an optional else")

    # truthiness needs a concrete value
    cond = force_it(evaluate_fn(tail[0], env), evaluate_fn)
    if is_true(cond):
        return evaluate_fn(tail[1], env)
    elif len(tail) > 2:
        return evaluate_fn(tail[2], env)
    else:
        return Nil
