"""Classification and decomposition of expression trees.

- atoms (numbers, strings, booleans, nil, the empty list) evaluate to themselves
- a Symbol is a variable
- any non-empty list is a combination: (operator operand ...)
"""

from __future__ import annotations

from numbers import Number

from meval import SExpression
from meval.errors import MevalSyntaxError
from meval.types.nil import NilType
from meval.types.procedure import Primitive, Procedure
from meval.types.symbol import Symbol


def is_self_evaluating(expr: SExpression) -> bool:
    if isinstance(expr, (Number, str, NilType, Procedure, Primitive)) or expr is None:
        return True
    return isinstance(expr, list) and not expr


def is_variable(expr: SExpression) -> bool:
    return isinstance(expr, Symbol)


def is_combination(expr: SExpression) -> bool:
    return isinstance(expr, list) and bool(expr)


def operator(expr: list[SExpression]) -> SExpression:
    return expr[0]


def operands(expr: list[SExpression]) -> list[SExpression]:
    return expr[1:]


def check_combination(expr: SExpression) -> list[SExpression]:
    if not is_combination(expr):
        raise MevalSyntaxError(f"Cannot evaluate {expr!r}")
    return expr
