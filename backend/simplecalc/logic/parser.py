"""
Infix to postfix conversion for calculator expressions.

Implements the shunting-yard algorithm for the four left-associative
binary operators and parentheses.
"""

from __future__ import annotations

import logging
from typing import List, Union

from ..errors import ErrorKind, IllegalExpressionError
from .lexer import (
    LeftParen,
    Operator,
    RightParen,
    Token,
    is_operand_token,
    lex,
    render,
)

logger = logging.getLogger(__name__)


class PostfixConverter:
    """
    Converter from infix token sequences to postfix token sequences.

    Converts expressions like:
        "1 + 2 * 3"
        "(1 + 2) * 3"

    Into postfix form:
        1 2 3 * +
        1 2 + 3 *
    """

    def convert(self, tokens: List[Token]) -> List[Token]:
        """
        Convert an infix token sequence to postfix.

        Args:
            tokens: The classified infix tokens.

        Returns:
            The postfix tokens; never contains a parenthesis.

        Raises:
            IllegalExpressionError: On unbalanced parentheses or a token
                that does not belong in an expression.
        """
        stack: List[Union[Operator, LeftParen]] = []
        output: List[Token] = []

        for token in tokens:
            if is_operand_token(token):
                output.append(token)
            elif isinstance(token, LeftParen):
                stack.append(token)
            elif isinstance(token, RightParen):
                self._close_group(stack, output)
            elif isinstance(token, Operator):
                while stack:
                    top = stack[-1]
                    if isinstance(top, Operator) and top.precedence >= token.precedence:
                        output.append(stack.pop())
                    else:
                        break
                stack.append(token)
            else:
                raise IllegalExpressionError(
                    ErrorKind.BAD_TOKEN, token=getattr(token, "text", repr(token))
                )

        while stack:
            top = stack.pop()
            if isinstance(top, LeftParen):
                raise IllegalExpressionError(
                    ErrorKind.BAD_PAREN, "Unclosed left parenthesis"
                )
            output.append(top)

        return output

    def _close_group(
        self,
        stack: List[Union[Operator, LeftParen]],
        output: List[Token],
    ) -> None:
        """Pop operators into output until the matching left parenthesis."""
        while stack:
            top = stack.pop()
            if isinstance(top, LeftParen):
                return
            output.append(top)

        raise IllegalExpressionError(
            ErrorKind.BAD_PAREN, "Right parenthesis without a matching left parenthesis"
        )

    def convert_text(self, expression: str) -> List[Token]:
        """Lex an infix expression and convert it to postfix."""
        return self.convert(lex(expression))

    def to_postfix_text(self, expression: str) -> str:
        """
        Render an infix expression in postfix notation.

        Returns:
            Space separated postfix tokens, e.g. "1 2 3 * +".
        """
        postfix = self.convert_text(expression)
        logger.debug("Converted %r to postfix %r", expression, render(postfix))
        return render(postfix)
