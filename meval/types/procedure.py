"""Applicable values: compound procedures and primitives."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from io import StringIO
from typing import Callable

from meval import SExpression, LispValue
from meval.errors import MevalArityError, MevalSyntaxError
from meval.types.environment import Environment
from meval.types.symbol import Symbol


class ParamMode(Enum):
    STRICT = "strict"
    LAZY = "lazy"
    LAZY_MEMO = "lazy-memo"


@dataclass(frozen=True)
class ParamSpec:
    name: Symbol
    mode: ParamMode = ParamMode.STRICT

    def __str__(self) -> str:
        if self.mode is ParamMode.STRICT:
            return str(self.name)
        return f"({self.name} {self.mode.value})"


def parse_param(spec: SExpression) -> ParamSpec:
    """Parse `name` or `(name mode)` into a ParamSpec."""
    if isinstance(spec, Symbol):
        return ParamSpec(spec)
    if isinstance(spec, list) and len(spec) == 2 and isinstance(spec[0], Symbol):
        name, mode = spec
        try:
            return ParamSpec(name, ParamMode(str(mode)))
        except ValueError:
            raise MevalSyntaxError(f"Unknown parameter mode {mode} for {name}") from None
    raise MevalSyntaxError(f"Malformed parameter: {spec!r}")


def parse_params(params: SExpression) -> list[ParamSpec]:
    if not isinstance(params, list):
        raise MevalSyntaxError(f"Parameter list must be a list, got {params!r}")
    specs = [parse_param(p) for p in params]
    names = [s.name for s in specs]
    if len(set(names)) != len(names):
        raise MevalSyntaxError(f"Duplicate parameter in {params!r}")
    return specs


class Procedure:
    """A compound procedure: parameters, body expressions and the captured frame."""

    __slots__ = ("params", "body", "env")

    def __init__(self, params: list[ParamSpec], body: list[SExpression], env: Environment):
        self.params: list[ParamSpec] = params
        self.body: list[SExpression] = body
        self.env: Environment = env

    @property
    def arity(self) -> int:
        return len(self.params)

    def bind(self, args: list[LispValue]) -> Environment:
        """Bind `args` to the parameters in a new child of the closure frame."""
        if len(args) != self.arity:
            raise MevalArityError(
                f"{self} expects {self.arity} argument(s), got {len(args)}"
            )
        return self.env.extend({p.name: a for p, a in zip(self.params, args)})

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(λ (")
            buffer.write(" ".join(str(p) for p in self.params))
            buffer.write(") ...)")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)


class Primitive:
    """A native callable, invoked directly on argument values."""

    __slots__ = ("fn", "name")

    def __init__(self, fn: Callable[..., LispValue], name: str | None = None):
        self.fn = fn
        self.name = name or getattr(fn, "__name__", "primitive")

    def __call__(self, *args: LispValue) -> LispValue:
        return self.fn(*args)

    def __repr__(self) -> str:
        return f"<primitive {self.name}>"
