"""
Calculator front end.

Routes each line to plain evaluation or to assignment, reusing the same
expression engine for the right-hand side of an assignment.
"""

from __future__ import annotations

import logging
from typing import Optional

from .environment import Environment
from .errors import ErrorKind, IllegalExpressionError
from .logic.evaluator import PostfixEvaluator
from .logic.lexer import is_variable
from .logic.parser import PostfixConverter

logger = logging.getLogger(__name__)

ASSIGNMENT_SIGN = "="


class SimpleCalculator:
    """
    A calculator with single-letter variables.

    Lines are either expressions ("1 + 2 * 3") or assignments
    ("x = 2 + 3"). Variables keep their values for the lifetime of the
    calculator.
    """

    def __init__(self, environment: Optional[Environment] = None, strict: bool = True):
        """
        Initialize the calculator.

        Args:
            environment: Variable values to start from.
            strict: Reject expressions that leave extra operands behind.
        """
        self._environment = environment if environment is not None else Environment()
        self.converter = PostfixConverter()
        self.evaluator = PostfixEvaluator(self._environment, strict=strict)

    @property
    def environment(self) -> Environment:
        return self._environment

    @property
    def strict(self) -> bool:
        """Whether leftover operands are rejected."""
        return self.evaluator.strict

    def evaluate(self, line: str) -> float:
        """
        Evaluate an expression or perform an assignment.

        Args:
            line: One input line, without the trailing newline.

        Returns:
            The value of the expression, or the assigned value.

        Raises:
            IllegalExpressionError: If the line is not a legal expression.
                The environment is left unchanged.
        """
        equals_count = line.count(ASSIGNMENT_SIGN)

        if equals_count == 0:
            return self._evaluate_infix(line)

        if equals_count == 1:
            left_hand_side, right_hand_side = line.split(ASSIGNMENT_SIGN)
            value = self._evaluate_infix(right_hand_side)
            self._assign(left_hand_side, value)
            return value

        raise IllegalExpressionError(
            ErrorKind.TOO_MANY_EQUALS, f"Found {equals_count} assignment signs"
        )

    def _evaluate_infix(self, expression: str) -> float:
        postfix = self.converter.convert_text(expression)
        return self.evaluator.evaluate(postfix)

    def _assign(self, left_hand_side: str, value: float) -> None:
        name = left_hand_side.strip()
        if not is_variable(name):
            raise IllegalExpressionError(ErrorKind.BAD_ASSIGN_LHS, token=name)
        self._environment.set(name, value)
        logger.debug("Assigned %s = %r", name, value)

    def to_postfix(self, expression: str) -> str:
        """Render an infix expression in postfix notation."""
        return self.converter.to_postfix_text(expression)

    def evaluate_postfix(self, postfix_expression: str) -> float:
        """Evaluate an expression written in postfix notation."""
        return self.evaluator.evaluate_text(postfix_expression)
