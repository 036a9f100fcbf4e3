"""
Arithmetic evaluator for the `calculate` tool.

Input is sanitised first: every character outside digits, `+ - * / . ( )`
and whitespace is dropped. What remains is parsed by a small
recursive-descent parser:

    expression := term (('+' | '-') term)*
    term       := unary (('*' | '/') unary)*
    unary      := ('+' | '-') unary | primary
    primary    := NUMBER | '(' expression ')'

Named math functions (abs, round, min, max, sqrt, pow, floor, ceil) are NOT
callable. Sanitising strips their letters, so they were never reachable from
user input. Rather than quietly evaluating the argument of something like
`sqrt(4)` or `alert(1)` as `(4)` / `(1)`, a name written directly in front of
a parenthesised group is rejected as an unsupported function. Other stray
letters are still stripped silently.

Two adjacent `-` or `+` signs with nothing between them (`--4`, `2--3`)
are a syntax error, as in JavaScript, where they read as decrement /
increment. Separated signs such as `- -4` or `2 - -3` are ordinary unary
operators.

Nesting of parentheses and unary signs is capped at MAX_DEPTH levels.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import List

ALLOWED_FUNCTIONS = frozenset(
    {"abs", "round", "min", "max", "sqrt", "pow", "floor", "ceil"}
)

_DISALLOWED = re.compile(r"[^0-9+\-*/.()\s]")
_CALL = re.compile(r"([A-Za-z_][A-Za-z0-9_]*)\s*\(")
_NUMBER = re.compile(r"\d+\.?\d*|\.\d+")

OPERATORS = "+-*/()"
MAX_DEPTH = 100


class CalculationError(ValueError):
    """Expression could not be evaluated."""


@dataclass(frozen=True)
class Token:
    kind: str  # "num", "op" or "end"
    text: str
    position: int


def sanitize(expression: str) -> str:
    return _DISALLOWED.sub("", expression)


def tokenize(source: str) -> List[Token]:
    tokens: List[Token] = []
    pos = 0
    while pos < len(source):
        char = source[pos]
        if char.isspace():
            pos += 1
            continue
        if char in "+-" and source.startswith(char * 2, pos):
            raise CalculationError(f"Unexpected token '{char * 2}' at position {pos}")
        if char in OPERATORS:
            tokens.append(Token("op", char, pos))
            pos += 1
            continue
        match = _NUMBER.match(source, pos)
        if match is None:
            raise CalculationError(f"Unexpected character '{char}' at position {pos}")
        tokens.append(Token("num", match.group(), pos))
        pos = match.end()
    tokens.append(Token("end", "", len(source)))
    return tokens


class _Parser:
    def __init__(self, tokens: List[Token]):
        self.tokens = tokens
        self.index = 0
        self.depth = 0

    @property
    def current(self) -> Token:
        return self.tokens[self.index]

    def _advance(self) -> Token:
        token = self.tokens[self.index]
        self.index += 1
        return token

    def _accept(self, *ops: str) -> str | None:
        token = self.current
        if token.kind == "op" and token.text in ops:
            self.index += 1
            return token.text
        return None

    def parse(self) -> float:
        if self.current.kind == "end":
            raise CalculationError("Empty expression")
        value = self.expression()
        if self.current.kind != "end":
            raise CalculationError(self._unexpected())
        return value

    def expression(self) -> float:
        value = self.term()
        while True:
            op = self._accept("+", "-")
            if op is None:
                return value
            right = self.term()
            value = value + right if op == "+" else value - right

    def term(self) -> float:
        value = self.unary()
        while True:
            op = self._accept("*", "/")
            if op is None:
                return value
            right = self.unary()
            if op == "*":
                value = value * right
            else:
                if right == 0:
                    raise CalculationError("Division by zero")
                value = value / right

    def unary(self) -> float:
        op = self._accept("+", "-")
        if op is None:
            return self.primary()
        self._descend()
        try:
            value = self.unary()
        finally:
            self.depth -= 1
        return -value if op == "-" else value

    def primary(self) -> float:
        token = self.current
        if token.kind == "num":
            self._advance()
            try:
                return float(token.text)
            except ValueError:
                raise CalculationError(f"Invalid number '{token.text}'") from None
        if self._accept("("):
            self._descend()
            try:
                value = self.expression()
            finally:
                self.depth -= 1
            if self._accept(")") is None:
                raise CalculationError(self._unexpected(expected="')'"))
            return value
        raise CalculationError(self._unexpected())

    def _descend(self) -> None:
        self.depth += 1
        if self.depth > MAX_DEPTH:
            raise CalculationError("Expression is too deeply nested")

    def _unexpected(self, expected: str | None = None) -> str:
        token = self.current
        if token.kind == "end":
            message = "Unexpected end of expression"
        else:
            message = f"Unexpected token '{token.text}' at position {token.position}"
        if expected:
            message += f", expected {expected}"
        return message


def evaluate(expression: str) -> float:
    """
    Sanitise and evaluate `expression`.

    Raises CalculationError for anything that is not a finite arithmetic
    result.
    """
    call = _CALL.search(expression)
    if call is not None:
        name = call.group(1)
        if name in ALLOWED_FUNCTIONS:
            raise CalculationError(f"Function '{name}' is not available")
        raise CalculationError(f"Unsupported function '{name}'")

    value = _Parser(tokenize(sanitize(expression))).parse()
    if not math.isfinite(value):
        raise CalculationError("Result is not a finite number")
    return value


def format_number(value: float) -> str:
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)
