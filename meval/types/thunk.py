"""Suspended computations for the lazy and mixed strategies."""

from __future__ import annotations

import logging

from meval import SExpression, LispValue, EvaluatorFn
from meval.types.environment import Environment

_log = logging.getLogger(__name__)

_ABSENT = object()


class Thunk:
    """An expression paired with the frame it must be evaluated in.

    Construction never evaluates. A memoizing thunk caches the first forced
    value and drops its expression and frame; a plain thunk re-evaluates on
    every force.
    """

    __slots__ = ("expr", "env", "memo", "value")

    def __init__(self, expr: SExpression, env: Environment, memo: bool = False):
        self.expr = expr
        self.env = env
        self.memo = memo
        self.value = _ABSENT

    @property
    def forced(self) -> bool:
        return self.value is not _ABSENT

    def force(self, evaluate_fn: EvaluatorFn) -> LispValue:
        if self.value is not _ABSENT:
            return self.value
        _log.debug("forcing %r (memo=%s)", self.expr, self.memo)
        value = force_it(evaluate_fn(self.expr, self.env), evaluate_fn)
        if self.memo:
            self.value = value
            self.expr = None
            self.env = None
        return value

    def __repr__(self) -> str:
        if self.value is _ABSENT:
            return f"<thunk {self.expr!r}>"
        return f"<thunk = {self.value!r}>"


def force_it(value: LispValue, evaluate_fn: EvaluatorFn) -> LispValue:
    """Return the concrete value behind `value`, forcing thunks."""
    while isinstance(value, Thunk):
        value = value.force(evaluate_fn)
    return value
