"""
  Reader: lexer and parser

- Streaming, lazy parsing
- Emits the expression trees the evaluator consumes, as Python data:

    - nil -> Nil
    - true / false -> True / False
    - () -> []
    - lists -> Python list
    - symbols -> Symbol
    - strings -> str
    - numbers -> int/float
    - 'x -> [quote, x]
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from meval import SExpression
from meval.errors import MevalSyntaxError
from meval.types.nil import Nil
from meval.types.symbol import Symbol

TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<quote>')"  # '
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<symbol>[^\s()\'";]+)'  # fallback: symbols and numbers
    r")",
    re.DOTALL,
)

STRING_ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    '"': '"',
    "\\": "\\",
}

INT_RE = re.compile(r"^[+-]?\d+$")
FLOAT_RE = re.compile(r"^[+-]?(\d+\.\d*|\.\d+|\d+)([eE][+-]?\d+)?$")

QUOTE = Symbol("quote")

CONSTANTS: dict[str, SExpression] = {
    "nil": Nil,
    "true": True,
    "false": False,
}


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        if source[pos].isspace():
            pos += 1
            continue
        m = TOKEN_RE.match(source, pos)
        if not m:
            raise MevalSyntaxError(f"Unexpected char at {pos}: {source[pos]!r}")
        pos = m.end()
        if m.group("comment"):
            continue
        for nm in ("quote", "lparen", "rparen", "string", "symbol"):
            if m.group(nm):
                yield nm, m.group(nm)
                break


def _unescape(literal: str) -> str:
    body = literal[1:-1]
    return re.sub(r"\\(.)", lambda m: STRING_ESCAPES.get(m.group(1), m.group(1)), body)


def parse_atom(token: str) -> SExpression:
    if token in CONSTANTS:
        return CONSTANTS[token]
    if INT_RE.match(token):
        return int(token)
    if FLOAT_RE.match(token):
        return float(token)
    return Symbol(token)


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_expr(self) -> SExpression:
        tok_type, tok_val = self.advance()
        if tok_type is None:
            raise MevalSyntaxError("Unexpected end of input")

        if tok_type == "symbol":
            return parse_atom(tok_val)

        if tok_type == "string":
            return _unescape(tok_val)

        if tok_type == "quote":
            return [QUOTE, self.parse_expr()]

        if tok_type == "lparen":
            items = []
            while True:
                next_type, _ = self.peek()
                if next_type is None:
                    raise MevalSyntaxError("Unmatched '('")
                if next_type == "rparen":
                    self.advance()
                    return items
                items.append(self.parse_expr())

        raise MevalSyntaxError(f"Unexpected {tok_val!r}")

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def read_all(source: str) -> list[SExpression]:
    """Parse every top-level form in `source`."""
    return list(TokenStream(lex(source)).parse_all())


def read(source: str) -> SExpression:
    """Parse exactly one form."""
    forms = read_all(source)
    if len(forms) != 1:
        raise MevalSyntaxError(f"Expected exactly one form, got {len(forms)}")
    return forms[0]
