from meval import SExpression, LispValue, EvaluatorFn
from meval.errors import MevalSyntaxError
from meval.types.environment import Environment
from meval.types.symbol import Symbol


def set_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    """(set! name value): assign the nearest existing binding of name."""
    if len(tail) != 2:
        raise MevalSyntaxError("set! requires exactly 2 arguments: (set! var value)")
    var_sym, val_expr = tail
    if not isinstance(var_sym, Symbol):
        raise MevalSyntaxError(f"set! first argument must be a Symbol, got {var_sym!r}")
    return env.set(var_sym, evaluate_fn(val_expr, env))
