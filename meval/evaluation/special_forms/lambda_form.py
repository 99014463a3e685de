from meval import SExpression, LispValue, EvaluatorFn
from meval.errors import MevalSyntaxError
from meval.types.environment import Environment
from meval.types.procedure import Procedure, parse_params


def lambda_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    # (lambda (params) body...) with zero or more body forms; an empty body
    # makes the procedure return nil.
    if not tail:
        raise MevalSyntaxError("lambda requires at least a parameter list")
    return Procedure(parse_params(tail[0]), list(tail[1:]), env)
