from __future__ import annotations

import logging
from typing import Mapping

from meval import LispValue, SExpression
from meval.builtins import make_global_environment
from meval.config import parse_strategy
from meval.evaluation.evaluator import Evaluator
from meval.evaluation.strategies import Strategy
from meval.reader.parser import read_all
from meval.types.nil import Nil
from meval.types.symbol import Symbol

_log = logging.getLogger(__name__)


class Interpreter:
    """
    Owns a global environment and an evaluator, and evaluates source text
    form by form. Any error unwinds the current top-level form; bindings made
    by earlier forms are kept.
    """
    def __init__(
        self,
        strategy: Strategy | str | None = None,
        check_unassigned: bool | None = None,
        primitives: Mapping[Symbol, LispValue] | None = None,
        prelude: str | None = None,
    ):
        if isinstance(strategy, str):
            strategy = parse_strategy(strategy)
        self.evaluator = Evaluator(strategy=strategy)
        self.env = make_global_environment(primitives, check_unassigned)
        _log.debug("interpreter ready: %r", self.evaluator)

        if prelude:
            self.eval(prelude)

    @property
    def strategy(self) -> Strategy:
        return self.evaluator.strategy

    def eval_expr(self, expr: SExpression) -> LispValue:
        """Evaluate an already-parsed expression in the global environment."""
        return self.evaluator(expr, self.env)

    def eval(self, code: str) -> LispValue:
        """Evaluate every form in `code`; return the last value (nil if none)."""
        result: LispValue = Nil
        for expr in read_all(code):
            _log.debug("eval %r", expr)
            result = self.eval_expr(expr)
        return result
