from meval import SExpression, LispValue, EvaluatorFn
from meval.errors import MevalSyntaxError
from meval.types.environment import Environment
from meval.types.procedure import Procedure, parse_params
from meval.types.symbol import Symbol


def define_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    """
    (define name value)
    (define (name params...) body...)

    Always binds in the innermost frame and returns the defined symbol.
    """
    if not tail:
        raise MevalSyntaxError("define requires a name")

    target = tail[0]
    if isinstance(target, Symbol):
        if len(tail) != 2:
            raise MevalSyntaxError("define requires exactly 2 arguments")
        return env.define(target, evaluate_fn(tail[1], env))

    if isinstance(target, list) and target and isinstance(target[0], Symbol):
        name, *params = target
        return env.define(name, Procedure(parse_params(params), list(tail[1:]), env))

    raise MevalSyntaxError(f"Cannot define {target!r}")
