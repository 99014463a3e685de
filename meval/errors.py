from __future__ import annotations

class MevalError(Exception):
    """ Base class for all meval errors"""
    pass


class UnboundVariable(MevalError):
    """ Raised when lookup or set! exhausts the frame chain"""

    def __init__(self, name, message: str | None = None):
        super().__init__(message or f"Unbound variable: {name}")
        self.name = name


class UnassignedVariable(MevalError):
    """ Raised when a variable is referenced before its letrec assignment ran"""

    def __init__(self, name, message: str | None = None):
        super().__init__(message or f"Unassigned variable: {name}")
        self.name = name


class MalformedElseClause(MevalError):
    """ Raised when a cond else clause is not the last clause"""


class MevalSyntaxError(MevalError):
    """ Raised when a form or source text is malformed"""


class MevalArityError(MevalError):
    """ Raised when the number of arguments passed to a procedure is incorrect"""


class MevalTypeError(MevalError):
    """ Raised when a value cannot be used the way it is used (e.g. applied)"""
