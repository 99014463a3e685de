"""Runtime environment for meval.

An Environment is one frame of bindings from Symbols to values plus an `outer`
link to the enclosing frame. Frames are shared by reference: every closure
created while a frame is active keeps that frame, and `set`/`define` mutate the
binding dict in place, visibly to every holder.

The lookup policy is a flag on the frame (`check_unassigned`) rather than a
separate class; child frames inherit it from their parent.
"""

from __future__ import annotations

from io import StringIO
from typing import Mapping, Optional

from meval import LispValue
from meval.errors import MevalSyntaxError, UnassignedVariable, UnboundVariable
from meval.types.symbol import Symbol


class _Unassigned:
    """Marker bound by letrec before the real value is assigned."""

    __slots__ = ()

    def __repr__(self):
        return "<unassigned>"

    def __eq__(self, other):
        return self is other

    def __hash__(self):
        return id(self)


UNASSIGNED = _Unassigned()


class Environment:
    """Hierarchical mapping from Symbols to values."""

    __slots__ = ("vars", "outer", "check_unassigned")

    def __init__(
        self,
        bindings: Optional[Mapping[Symbol, LispValue]] = None,
        outer: Optional[Environment] = None,
        check_unassigned: bool | None = None,
    ):
        self.vars: dict[Symbol, LispValue] = dict(bindings) if bindings else {}
        self.outer: Environment | None = outer
        if check_unassigned is None:
            check_unassigned = outer.check_unassigned if outer is not None else False
        self.check_unassigned: bool = check_unassigned

    def extend(self, bindings: Optional[Mapping[Symbol, LispValue]] = None) -> Environment:
        """Return a new child frame holding `bindings`, with this frame as outer."""
        return Environment(bindings, outer=self)

    def define(self, name: Symbol, value: LispValue) -> Symbol:
        """Bind `name` in this frame, overwriting any existing binding here.

        Never searches outward. Raises MevalSyntaxError if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise MevalSyntaxError(f"Cannot define {name!r}: not a symbol")
        self.vars[name] = value
        return name

    def find(self, name: Symbol) -> Optional[Environment]:
        """Find the nearest frame in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def set(self, name: Symbol, value: LispValue) -> Symbol:
        """Update the nearest existing binding for `name`.

        Raises UnboundVariable if no frame in the chain binds it.
        """
        env = self.find(name)
        if env is None:
            raise UnboundVariable(name, f"Cannot set unbound variable: {name}")
        env.vars[name] = value
        return name

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`.

        Raises UnboundVariable if not found, and UnassignedVariable if this
        environment checks for the unassigned marker and finds it.
        """
        env = self.find(name)
        if env is None:
            raise UnboundVariable(name)
        return self.check_assigned(name, env.vars[name])

    def check_assigned(self, name: Symbol, value: LispValue) -> LispValue:
        if self.check_unassigned and value is UNASSIGNED:
            raise UnassignedVariable(name)
        return value

    def update(self, mapping: Mapping[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def depth(self) -> int:
        n, env = 0, self.outer
        while env is not None:
            n, env = n + 1, env.outer
        return n

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Environment depth={self.depth()} vars={len(self.vars)}>"
