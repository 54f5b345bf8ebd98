"""
Line-by-line calculator session.

Turns each input line into exactly one output line: the value, or the
sentinel when the line is illegal.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, TextIO

from .calculator import SimpleCalculator
from .errors import IllegalExpressionError
from .settings import CalculatorSettings

logger = logging.getLogger(__name__)


def format_value(value: float) -> str:
    """Format a value with Python's default float formatting (7.0, inf, nan)."""
    return str(float(value))


class Session:
    """
    A calculator session over a stream of lines.

    The calculator (and so the variable environment) lives as long as
    the session.
    """

    def __init__(
        self,
        settings: Optional[CalculatorSettings] = None,
        calculator: Optional[SimpleCalculator] = None,
    ):
        """
        Initialize the session.

        Args:
            settings: Session settings; when omitted alongside a calculator,
                strict_residue follows that calculator.
            calculator: Calculator to drive; built from the settings if omitted.

        Raises:
            ValueError: If the calculator's residue handling contradicts
                settings.strict_residue.
        """
        if calculator is None:
            settings = settings or CalculatorSettings()
            calculator = SimpleCalculator(strict=settings.strict_residue)
        elif settings is None:
            settings = CalculatorSettings(strict_residue=calculator.strict)
        elif settings.strict_residue != calculator.strict:
            raise ValueError(
                f"Calculator strict={calculator.strict} contradicts "
                f"strict_residue={settings.strict_residue}"
            )
        self.settings = settings
        self.calculator = calculator
        self.halted = False
        self.lines_processed = 0
        self.errors = 0

    def process_line(self, line: str) -> str:
        """
        Evaluate one line and format the result.

        Args:
            line: The input line; a trailing newline is stripped.

        Returns:
            The formatted value, or the sentinel for an illegal line.
        """
        self.lines_processed += 1
        line = line.rstrip("\r\n")
        try:
            value = self.calculator.evaluate(line)
        except IllegalExpressionError as e:
            self.errors += 1
            logger.debug("Rejected line %d (%s): %s", self.lines_processed, e.kind.value, e)
            if self.settings.halt_on_error:
                self.halted = True
            return self.settings.sentinel
        return format_value(value)

    def run(self, lines: Iterable[str], out: TextIO) -> int:
        """
        Process lines until they run out, writing one output line each.

        With halt_on_error set, output stops after the first sentinel.

        Args:
            lines: Input lines; trailing newlines are stripped.
            out: Stream receiving the output lines.

        Returns:
            The number of illegal lines seen.
        """
        for line in lines:
            if self.halted:
                break
            out.write(self.process_line(line) + "\n")
        return self.errors

    def process_lines(self, lines: Iterable[str]) -> List[str]:
        """Process lines and collect the output lines."""
        outputs = []
        for line in lines:
            if self.halted:
                break
            outputs.append(self.process_line(line))
        return outputs
