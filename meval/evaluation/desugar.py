"""Derived forms as pure tree rewrites.

Every function here takes the operands of a derived form and returns a new
expression built from core forms (if, lambda, begin, set!, define, quote and
let, which is itself derived). Nothing is evaluated, so each rewrite can be
tested on its own and every syntax error is raised before evaluation starts.
"""

from __future__ import annotations

from meval import SExpression
from meval.errors import MalformedElseClause, MevalSyntaxError
from meval.types.environment import UNASSIGNED
from meval.types.nil import Nil
from meval.types.symbol import Symbol

IF = Symbol("if")
LAMBDA = Symbol("lambda")
BEGIN = Symbol("begin")
DEFINE = Symbol("define")
SET = Symbol("set!")
QUOTE = Symbol("quote")
LET = Symbol("let")
ELSE = Symbol("else")


def sequence_to_expression(exprs: list[SExpression]) -> SExpression:
    """Collapse a body into one expression: nil, the sole form, or a begin."""
    if not exprs:
        return Nil
    if len(exprs) == 1:
        return exprs[0]
    return [BEGIN, *exprs]


# ---------------------------------------------------------------------------
# cond
# ---------------------------------------------------------------------------

def cond_to_if(clauses: list[SExpression]) -> SExpression:
    """(cond (p a...) ... (else e...)) => nested ifs, folded right to left."""
    for i, clause in enumerate(clauses):
        if not isinstance(clause, list) or not clause:
            raise MevalSyntaxError(f"Malformed cond clause: {clause!r}")
        if clause[0] == ELSE and i != len(clauses) - 1:
            raise MalformedElseClause(f"ELSE clause isn't last: {clauses!r}")

    result: SExpression = False
    for pred, *actions in reversed(clauses):
        if pred == ELSE:
            result = sequence_to_expression(actions)
        else:
            result = [IF, pred, sequence_to_expression(actions), result]
    return result


# ---------------------------------------------------------------------------
# and / or
# ---------------------------------------------------------------------------

def and_to_if(exprs: list[SExpression]) -> SExpression:
    """(and) => true, (and x) => x, (and x y...) => (if x (and y...) x)."""
    if not exprs:
        return True
    first, *rest = exprs
    if not rest:
        return first
    return [IF, first, and_to_if(rest), first]


def or_to_if(exprs: list[SExpression]) -> SExpression:
    """(or) => nil, (or x) => x, (or x y...) => (if x x (or y...))."""
    if not exprs:
        return Nil
    first, *rest = exprs
    if not rest:
        return first
    return [IF, first, first, or_to_if(rest)]


def unless_to_if(operands: list[SExpression]) -> SExpression:
    """(unless c a b) => (if c b a)."""
    if len(operands) not in (2, 3):
        raise MevalSyntaxError("unless requires a condition and one or two branches")
    cond, usual, *exceptional = operands
    return [IF, cond, exceptional[0] if exceptional else Nil, usual]


# ---------------------------------------------------------------------------
# let family
# ---------------------------------------------------------------------------

def _split_bindings(bindings: SExpression) -> tuple[list[Symbol], list[SExpression]]:
    if not isinstance(bindings, list):
        raise MevalSyntaxError(f"Bindings must be a list, got {bindings!r}")
    names, values = [], []
    for binding in bindings:
        if (
            not isinstance(binding, list)
            or len(binding) != 2
            or not isinstance(binding[0], Symbol)
        ):
            raise MevalSyntaxError(f"Malformed binding: {binding!r}")
        names.append(binding[0])
        values.append(binding[1])
    return names, values


def _bindings_and_body(operands: list[SExpression], form: str):
    if not operands:
        raise MevalSyntaxError(f"{form} requires a binding list")
    return operands[0], operands[1:]


def let_to_combination(operands: list[SExpression]) -> SExpression:
    """(let ((n v) ...) body...) => ((lambda (n ...) body...) v ...)."""
    bindings, body = _bindings_and_body(operands, "let")
    names, values = _split_bindings(bindings)
    return [[LAMBDA, names, *body], *values]


def let_star_to_nested_lets(operands: list[SExpression]) -> SExpression:
    """(let* ((a 1) (b a)) body...) => (let ((a 1)) (let ((b a)) body...))."""
    bindings, body = _bindings_and_body(operands, "let*")
    _split_bindings(bindings)
    if len(bindings) <= 1:
        return [LET, bindings, *body]
    return [LET, [bindings[0]], let_star_to_nested_lets([bindings[1:], *body])]


def named_let_to_combination(operands: list[SExpression]) -> SExpression:
    """(let name ((n v) ...) body...) =>
    (((lambda () (define (name n ...) body...) name)) v ...)

    Plain let is passed through to let_to_combination.
    """
    if not operands or not isinstance(operands[0], Symbol):
        return let_to_combination(operands)
    name, *rest = operands
    bindings, body = _bindings_and_body(rest, "named let")
    names, values = _split_bindings(bindings)
    make_loop = [LAMBDA, [], [DEFINE, [name, *names], *body], name]
    return [[make_loop], *values]


def letrec_to_let(operands: list[SExpression]) -> SExpression:
    """(letrec ((n v) ...) body...) =>
    (let ((n '<unassigned>) ...) (set! n v) ... body...)

    Every binding lives in one frame before any value is computed, so the
    lambdas among the values can refer to each other.
    """
    bindings, body = _bindings_and_body(operands, "letrec")
    names, values = _split_bindings(bindings)
    placeholders = [[n, [QUOTE, UNASSIGNED]] for n in names]
    assignments = [[SET, n, v] for n, v in zip(names, values)]
    return [LET, placeholders, *assignments, *body]
