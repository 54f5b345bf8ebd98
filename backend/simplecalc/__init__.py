"""
SimpleCalc: a line-oriented calculator with single-letter variables.

Each input line is an arithmetic expression ("1 + 2 * 3") or an
assignment ("x = 2 + 3"); each produces one output line holding the
value, or the sentinel CHYBA when the line is not a legal expression.
"""

from .errors import ErrorKind, IllegalExpressionError
from .environment import Environment
from .calculator import SimpleCalculator
from .settings import CalculatorSettings
from .session import Session, format_value

__version__ = "1.0.0"
__all__ = [
    "ErrorKind",
    "IllegalExpressionError",
    "Environment",
    "SimpleCalculator",
    "CalculatorSettings",
    "Session",
    "format_value",
]
