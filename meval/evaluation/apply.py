"""Application engine for meval.

Centralizes application semantics for every strategy:
- Procedures get a fresh frame, child of their captured frame (static
  scoping), and their body runs through `evaluate_sequence`.
- Primitives are invoked directly on concrete argument values; no frame is
  created.

Strategies only decide how operands become arguments; everything here is
shared.
"""

from __future__ import annotations

import logging

from meval import LispValue, SExpression, EvaluatorFn
from meval.errors import MevalTypeError
from meval.types.environment import Environment
from meval.types.nil import Nil
from meval.types.procedure import Primitive, Procedure
from meval.types.thunk import force_it

_log = logging.getLogger(__name__)


def evaluate_sequence(
    exprs: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    """Evaluate every expression left to right and return the last value.

    An empty sequence yields Nil.
    """
    result: LispValue = Nil
    for e in exprs:
        result = evaluate_fn(e, env)
    return result


def apply_procedure(
    fn: Procedure, args: list[LispValue], evaluate_fn: EvaluatorFn
) -> LispValue:
    new_env = fn.bind(args)
    _log.debug("apply %s to %d argument(s)", fn, len(args))
    return evaluate_sequence(fn.body, new_env, evaluate_fn)


def apply_primitive(
    fn: Primitive, args: list[LispValue], evaluate_fn: EvaluatorFn
) -> LispValue:
    return fn(*(force_it(a, evaluate_fn) for a in args))


def apply(fn: LispValue, args: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply either a Procedure or a Primitive; anything else is a type error."""
    if isinstance(fn, Procedure):
        return apply_procedure(fn, args, evaluate_fn)
    elif isinstance(fn, Primitive):
        return apply_primitive(fn, args, evaluate_fn)
    else:
        raise MevalTypeError(f"Cannot apply non-procedure {fn!r}")
