"""
Postfix Evaluator for calculator expressions.

Evaluates postfix token sequences over a numeric stack.
"""

from __future__ import annotations

import logging
import math
import operator
from typing import TYPE_CHECKING, Callable, Dict, List, Optional

from ..errors import ErrorKind, IllegalExpressionError
from .lexer import Number, Operator, Token, Variable, classify, render, tokenize

if TYPE_CHECKING:
    from ..environment import Environment

logger = logging.getLogger(__name__)


def _divide(left: float, right: float) -> float:
    """IEEE-754 division: x/0 is +-inf and 0/0 is nan."""
    if right == 0.0:
        if left == 0.0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


_BINARY_OPS: Dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _divide,
}


class PostfixEvaluator:
    """
    Evaluator for postfix token sequences.

    Operands are pushed on a numeric stack; each operator pops its right
    operand, then its left operand, and pushes the result.
    """

    def __init__(self, environment: Optional["Environment"] = None, strict: bool = True):
        """
        Initialize the evaluator.

        Args:
            environment: Variable values; a fresh, empty one if omitted.
            strict: If True, reject expressions that leave more than one
                value on the stack. If False, return the top of the stack.
        """
        if environment is None:
            from ..environment import Environment
            environment = Environment()
        self.environment = environment
        self.strict = strict

    def evaluate(self, postfix: List[Token]) -> float:
        """
        Evaluate a postfix token sequence.

        Args:
            postfix: The postfix tokens.

        Returns:
            The value of the expression.

        Raises:
            IllegalExpressionError: On a missing operand, a leftover
                operand in strict mode, an empty sequence or a
                parenthesis in the sequence.
        """
        stack: List[float] = []

        for token in postfix:
            if isinstance(token, Number):
                stack.append(token.value)
            elif isinstance(token, Variable):
                stack.append(self.environment.get(token.name))
            elif isinstance(token, Operator):
                if len(stack) < 2:
                    raise IllegalExpressionError(ErrorKind.STACK_UNDERFLOW, token=token.text)
                right = stack.pop()
                left = stack.pop()
                stack.append(_BINARY_OPS[token.symbol](left, right))
            else:
                raise IllegalExpressionError(
                    ErrorKind.BAD_TOKEN, token=getattr(token, "text", repr(token))
                )

        if not stack:
            raise IllegalExpressionError(ErrorKind.EMPTY_EXPRESSION)

        if len(stack) > 1:
            if self.strict:
                raise IllegalExpressionError(
                    ErrorKind.STACK_RESIDUE,
                    f"Expected one value after evaluation, found {len(stack)}",
                )
            logger.debug(
                "Discarding %d leftover values in %r", len(stack) - 1, render(postfix)
            )

        return stack[-1]

    def evaluate_text(self, postfix_expression: str) -> float:
        """
        Evaluate a postfix expression given as text, e.g. "1 2 3 * +".

        Raises:
            IllegalExpressionError: If the text is not a legal postfix expression.
        """
        return self.evaluate([classify(text) for text in tokenize(postfix_expression)])
