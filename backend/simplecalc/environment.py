"""
Variable environment for SimpleCalc.

Holds the values of the single-letter variables across lines.
"""

from __future__ import annotations

from typing import Dict, Iterator, Optional

from .errors import ErrorKind, IllegalExpressionError
from .logic.lexer import is_variable


class Environment:
    """
    Mapping from variable letter (a-z) to its value.

    Reading a variable that was never assigned gives 0.0 and does not
    create it.
    """

    def __init__(self, values: Optional[Dict[str, float]] = None):
        self._values: Dict[str, float] = {}
        for name, value in (values or {}).items():
            self.set(name, value)

    def get(self, name: str) -> float:
        """Get the value of a variable, 0.0 if it was never assigned."""
        return self._values.get(name, 0.0)

    def set(self, name: str, value: float) -> None:
        """
        Assign a value to a variable, overwriting any previous value.

        Raises:
            IllegalExpressionError: If the name is not a single lowercase letter.
        """
        if not is_variable(name):
            raise IllegalExpressionError(ErrorKind.BAD_ASSIGN_LHS, token=name)
        self._values[name] = float(value)

    def snapshot(self) -> Dict[str, float]:
        """Return a copy of the current assignments."""
        return dict(self._values)

    def clear(self) -> None:
        self._values.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._values))

    def __repr__(self) -> str:
        return f"Environment({self._values!r})"
