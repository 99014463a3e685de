"""Default primitive library and global environment construction.

Primitives are plain Python callables wrapped as `Primitive`; the evaluator
treats them as opaque. Their failures (ZeroDivisionError, TypeError, ...)
surface unmodified.
"""
from __future__ import annotations

import operator
from functools import reduce
from typing import Callable, Mapping

from meval import LispValue
from meval.config import get_check_unassigned
from meval.errors import MevalArityError, MevalTypeError
from meval.types.environment import Environment
from meval.types.nil import Nil, is_nil, is_true
from meval.types.procedure import Primitive
from meval.types.symbol import Symbol


def car(xs: list[LispValue]) -> LispValue:
    """First element of a list; nil for nil or the empty list."""
    if is_nil(xs) or not xs:
        return Nil
    return xs[0]


def cdr(xs: list[LispValue]) -> list[LispValue]:
    if is_nil(xs) or not xs:
        return []
    return xs[1:]


def cons(head: LispValue, tail: LispValue) -> list[LispValue]:
    """Prepend head to tail, non-destructively; a nil tail is the empty list."""
    if is_nil(tail):
        return [head]
    if isinstance(tail, list):
        return [head, *tail]
    return [head, tail]


def is_null(xs: LispValue) -> bool:
    return is_nil(xs) or (isinstance(xs, list) and not xs)


def add(*args: LispValue) -> LispValue:
    return sum(args)


def sub(first: LispValue, *rest: LispValue) -> LispValue:
    """Subtract rest from first; unary negation for one argument."""
    if not rest:
        return -first
    return reduce(operator.sub, rest, first)


def mul(*args: LispValue) -> LispValue:
    return reduce(operator.mul, args, 1)


def div(first: LispValue, *rest: LispValue) -> LispValue:
    """Divide left to right; reciprocal for one argument. Exact when possible."""
    if not rest:
        rest, first = (first,), 1
    result = first
    for x in rest:
        if isinstance(result, int) and isinstance(x, int) and x and result % x == 0:
            result //= x
        else:
            result /= x
    return result


def equals(a: LispValue, b: LispValue) -> bool:
    """Equality that keeps booleans apart from the numbers 0 and 1."""
    if isinstance(a, bool) or isinstance(b, bool):
        return a is b
    return a == b


def _ordered(op: Callable[[LispValue, LispValue], bool]) -> Callable[[LispValue, LispValue], bool]:
    def compare(a: LispValue, b: LispValue) -> bool:
        if isinstance(a, bool) or isinstance(b, bool):
            raise MevalTypeError(f"Cannot order booleans: {a!r}, {b!r}")
        return op(a, b)
    return compare


def _chain(op: Callable[[LispValue, LispValue], bool]) -> Callable[..., bool]:
    def compare(*args: LispValue) -> bool:
        if not args:
            raise MevalArityError("comparison requires at least 1 argument")
        return all(op(a, b) for a, b in zip(args, args[1:]))
    return compare


def logical_not(value: LispValue) -> bool:
    return not is_true(value)


def list_builtin(*args: LispValue) -> list[LispValue]:
    return list(args)


def display(*args: LispValue) -> LispValue:
    print(*args)
    return Nil


def _wrap(mapping: Mapping[str, Callable[..., LispValue]]) -> dict[Symbol, Primitive]:
    return {Symbol(name): Primitive(fn, name) for name, fn in mapping.items()}


PRISTINE_PRIMITIVES: dict[Symbol, Primitive] = _wrap(
    {
        "car": car,
        "cdr": cdr,
        "cons": cons,
        "null?": is_null,
        "+": add,
        "-": sub,
        "*": mul,
        "/": div,
        "=": _chain(equals),
        "<": _chain(_ordered(operator.lt)),
        ">": _chain(_ordered(operator.gt)),
        "<=": _chain(_ordered(operator.le)),
        ">=": _chain(_ordered(operator.ge)),
        "not": logical_not,
        "list": list_builtin,
        "display": display,
    }
)


def make_global_environment(
    primitives: Mapping[Symbol, LispValue] | None = None,
    check_unassigned: bool | None = None,
) -> Environment:
    """Create the global frame from a primitive-name-to-value mapping.

    Plain callables in `primitives` are wrapped as Primitive.
    """
    if primitives is None:
        primitives = PRISTINE_PRIMITIVES
    if check_unassigned is None:
        check_unassigned = get_check_unassigned()
    env = Environment(check_unassigned=check_unassigned)
    env.update(
        {
            name: Primitive(value, str(name))
            if callable(value) and not isinstance(value, Primitive)
            else value
            for name, value in primitives.items()
        }
    )
    return env
