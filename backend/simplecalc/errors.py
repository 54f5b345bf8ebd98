"""
Error channel for SimpleCalc.

Every rejected line surfaces as a single IllegalExpressionError; the
ErrorKind it carries says which rule the line broke.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Reasons a line can be rejected."""

    TOO_MANY_EQUALS = "too_many_equals"
    BAD_ASSIGN_LHS = "bad_assign_lhs"
    BAD_TOKEN = "bad_token"
    BAD_PAREN = "bad_paren"
    STACK_UNDERFLOW = "stack_underflow"
    STACK_RESIDUE = "stack_residue"
    EMPTY_EXPRESSION = "empty_expression"


_DEFAULT_MESSAGES = {
    ErrorKind.TOO_MANY_EQUALS: "More than one assignment sign",
    ErrorKind.BAD_ASSIGN_LHS: "Assignment target is not a single lowercase letter",
    ErrorKind.BAD_TOKEN: "Unknown token",
    ErrorKind.BAD_PAREN: "Unbalanced parentheses",
    ErrorKind.STACK_UNDERFLOW: "Operator is missing an operand",
    ErrorKind.STACK_RESIDUE: "Operands left over after evaluation",
    ErrorKind.EMPTY_EXPRESSION: "Empty expression",
}


class IllegalExpressionError(ValueError):
    """
    Raised when a line is not a legal expression.

    Attributes:
        kind: The rule that was broken.
        token: The offending token text, if there is one.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: Optional[str] = None,
        token: Optional[str] = None,
    ):
        self.kind = kind
        self.token = token
        if message is None:
            message = _DEFAULT_MESSAGES[kind]
            if token is not None:
                message = f"{message}: '{token}'"
        super().__init__(message)

    def __repr__(self) -> str:
        return f"IllegalExpressionError({self.kind.name}, {str(self)!r})"
