"""
Expression engine for SimpleCalc.

Provides lexing, infix to postfix conversion and postfix evaluation.
"""

from .lexer import (
    LeftParen,
    Number,
    Operator,
    RightParen,
    Token,
    Variable,
    classify,
    is_left_paren,
    is_number,
    is_operand,
    is_operator,
    is_right_paren,
    is_variable,
    lex,
    precedence,
    tokenize,
)
from .parser import PostfixConverter
from .evaluator import PostfixEvaluator

__all__ = [
    "LeftParen",
    "Number",
    "Operator",
    "RightParen",
    "Token",
    "Variable",
    "classify",
    "is_left_paren",
    "is_number",
    "is_operand",
    "is_operator",
    "is_right_paren",
    "is_variable",
    "lex",
    "precedence",
    "tokenize",
    "PostfixConverter",
    "PostfixEvaluator",
]
