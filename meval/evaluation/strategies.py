"""Argument-evaluation strategies.

A strategy only decides how the operands of an application become argument
values. Environments, special forms and desugaring are shared by all of them.

- strict: every operand evaluated left to right before apply
- lazy:   operands of compound procedures are wrapped as plain (unmemoized)
          thunks; primitives still receive evaluated operands
- mixed:  each parameter's declared mode decides: strict, lazy or lazy-memo
"""

from __future__ import annotations

from enum import Enum

from meval import LispValue, SExpression, EvaluatorFn
from meval.types.environment import Environment
from meval.types.procedure import ParamMode, Procedure
from meval.types.thunk import Thunk


class Strategy(Enum):
    STRICT = "strict"
    LAZY = "lazy"
    MIXED = "mixed"


class StrictArguments:
    def arguments(
        self,
        fn: LispValue,
        operands: list[SExpression],
        env: Environment,
        evaluate_fn: EvaluatorFn,
    ) -> list[LispValue]:
        # explicit loop: left-to-right order does not depend on the host
        args = []
        for operand in operands:
            args.append(evaluate_fn(operand, env))
        return args


class LazyArguments(StrictArguments):
    def arguments(self, fn, operands, env, evaluate_fn):
        if not isinstance(fn, Procedure):
            return super().arguments(fn, operands, env, evaluate_fn)
        return [Thunk(operand, env) for operand in operands]


class MixedArguments(StrictArguments):
    def arguments(self, fn, operands, env, evaluate_fn):
        if not isinstance(fn, Procedure) or len(operands) != fn.arity:
            # arity errors are reported by apply
            return super().arguments(fn, operands, env, evaluate_fn)
        args = []
        for param, operand in zip(fn.params, operands):
            if param.mode is ParamMode.STRICT:
                args.append(evaluate_fn(operand, env))
            else:
                args.append(Thunk(operand, env, memo=param.mode is ParamMode.LAZY_MEMO))
        return args


ARGUMENT_POLICIES = {
    Strategy.STRICT: StrictArguments,
    Strategy.LAZY: LazyArguments,
    Strategy.MIXED: MixedArguments,
}


def policy_for(strategy: Strategy) -> StrictArguments:
    return ARGUMENT_POLICIES[strategy]()
