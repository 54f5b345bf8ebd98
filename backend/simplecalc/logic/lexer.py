"""
Lexer for calculator expressions.

Splits a raw line into token strings and classifies each one into a
tagged Token. Classification is the only place an unknown token can be
detected; everything downstream works on typed tokens.

Numbers are whatever Python's float() accepts for the whole token:
an optional sign, integer or fractional decimals, an exponent,
digit-group underscores and the special values inf, infinity and nan.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, List, Union

from ..errors import ErrorKind, IllegalExpressionError


TOKEN_DELIMITER = re.compile(r"[ \t]+")

LEFT_PAREN = "("
RIGHT_PAREN = ")"

# Operator precedence; all operators are left-associative.
PRECEDENCE: Dict[str, int] = {
    "+": 0,
    "-": 0,
    "*": 1,
    "/": 1,
}


@dataclass(frozen=True)
class Number:
    """A numeric literal."""
    text: str
    value: float = field(init=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "value", float(self.text))


@dataclass(frozen=True)
class Variable:
    """A single lowercase letter naming a variable."""
    text: str

    @property
    def name(self) -> str:
        return self.text


@dataclass(frozen=True)
class Operator:
    """One of the four binary operators."""
    text: str

    @property
    def symbol(self) -> str:
        return self.text

    @property
    def precedence(self) -> int:
        return PRECEDENCE[self.text]


@dataclass(frozen=True)
class LeftParen:
    text: str = LEFT_PAREN


@dataclass(frozen=True)
class RightParen:
    text: str = RIGHT_PAREN


Token = Union[Number, Variable, Operator, LeftParen, RightParen]


def tokenize(line: str) -> List[str]:
    """
    Split a line into token strings.

    Parentheses are padded with spaces so they always stand alone, then
    the line is split on runs of spaces and tabs.

    Args:
        line: The raw input line.

    Returns:
        The non-empty token strings, in order. A blank line gives [].
    """
    line = line.replace(LEFT_PAREN, f" {LEFT_PAREN} ")
    line = line.replace(RIGHT_PAREN, f" {RIGHT_PAREN} ")
    line = line.strip(" \t")
    if not line:
        return []
    return TOKEN_DELIMITER.split(line)


def is_number(text: str) -> bool:
    """Check whether float() accepts the whole string."""
    try:
        float(text)
    except ValueError:
        return False
    return True


def is_variable(text: str) -> bool:
    """Check whether the string is a single ASCII lowercase letter."""
    return len(text) == 1 and "a" <= text <= "z"


def is_operand(text: str) -> bool:
    return is_number(text) or is_variable(text)


def is_operator(text: str) -> bool:
    return len(text) == 1 and text in PRECEDENCE


def is_left_paren(text: str) -> bool:
    return text == LEFT_PAREN


def is_right_paren(text: str) -> bool:
    return text == RIGHT_PAREN


def precedence(symbol: str) -> int:
    """
    Get the precedence of an operator.

    Raises:
        IllegalExpressionError: If the symbol is not an operator.
    """
    if not is_operator(symbol):
        raise IllegalExpressionError(ErrorKind.BAD_TOKEN, token=symbol)
    return PRECEDENCE[symbol]


def classify(text: str) -> Token:
    """
    Turn a token string into a typed token.

    Raises:
        IllegalExpressionError: If the string is not a known token.
    """
    if is_variable(text):
        return Variable(text)
    if is_operator(text):
        return Operator(text)
    if is_left_paren(text):
        return LeftParen()
    if is_right_paren(text):
        return RightParen()
    if is_number(text):
        return Number(text)
    raise IllegalExpressionError(ErrorKind.BAD_TOKEN, token=text)


def lex(line: str) -> List[Token]:
    """Tokenize and classify a line."""
    return [classify(text) for text in tokenize(line)]


def is_operand_token(token: Token) -> bool:
    return isinstance(token, (Number, Variable))


def render(tokens: List[Token]) -> str:
    """Join tokens back into space separated text."""
    return " ".join(token.text for token in tokens)
