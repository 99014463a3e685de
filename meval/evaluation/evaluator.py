"""Core eval/apply loop for meval.

The evaluator classifies an expression, dispatches special forms through the
special-form table, and otherwise performs application. The active strategy
turns operands into arguments; everything else is shared between strategies.
"""

from __future__ import annotations

import logging
from typing import Callable, Mapping

from meval import SExpression, LispValue
from meval.config import get_default_strategy
from meval.types.environment import Environment
from meval.types.symbol import Symbol
from meval.types.thunk import Thunk
from meval.evaluation.apply import apply
from meval.evaluation.expressions import (
    check_combination,
    is_self_evaluating,
    is_variable,
    operands,
    operator,
)
from meval.evaluation.special_forms import SPECIAL_FORMS
from meval.evaluation.strategies import Strategy, policy_for

_log = logging.getLogger(__name__)

SpecialForm = Callable[[list, Environment, Callable], LispValue]


class Evaluator:
    """An evaluate function bound to a special-form table and a strategy.

    Instances are callable as `evaluator(expr, env)`, which is also the
    `evaluate_fn` handed to special forms, thunks and apply.
    """

    def __init__(
        self,
        special_forms: Mapping[Symbol, SpecialForm] | None = None,
        strategy: Strategy | None = None,
    ):
        self.special_forms: dict[Symbol, SpecialForm] = dict(
            SPECIAL_FORMS if special_forms is None else special_forms
        )
        self.strategy: Strategy = strategy if strategy is not None else get_default_strategy()
        self.arguments = policy_for(self.strategy).arguments

    def with_forms(self, forms: Mapping[Symbol, SpecialForm]) -> Evaluator:
        """Return a new evaluator whose table also holds `forms`."""
        table = dict(self.special_forms)
        table.update(forms)
        return Evaluator(table, self.strategy)

    def __call__(self, expr: SExpression, env: Environment) -> LispValue:
        return self.evaluate(expr, env)

    def evaluate(self, expr: SExpression, env: Environment) -> LispValue:
        if is_self_evaluating(expr):
            return expr

        if is_variable(expr):
            value = env.lookup(expr)
            if isinstance(value, Thunk):
                # a reference is a use: plain thunks re-run here every time
                value = env.check_assigned(expr, value.force(self))
            return value

        expr = check_combination(expr)
        head = operator(expr)
        if isinstance(head, Symbol) and head in self.special_forms:
            _log.debug("special form %s", head)
            return self.special_forms[head](operands(expr), env, self)

        fn = self.evaluate(head, env)
        args = self.arguments(fn, operands(expr), env, self)
        return apply(fn, args, self)

    def __repr__(self) -> str:
        return f"<Evaluator {self.strategy.value} forms={len(self.special_forms)}>"


def evaluate(expr: SExpression, env: Environment, strategy: Strategy | None = None) -> LispValue:
    """Evaluate `expr` in `env` with the full special-form table."""
    return Evaluator(strategy=strategy)(expr, env)
