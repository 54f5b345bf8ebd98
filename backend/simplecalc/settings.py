"""
Settings for SimpleCalc sessions.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_SENTINEL = "CHYBA"


class CalculatorSettings(BaseModel):
    """
    Behaviour switches for a calculator session.

    Attributes:
        sentinel: Output line written in place of a value for an illegal line.
        strict_residue: Reject expressions that leave extra operands behind
            (e.g. "1 2") instead of returning the last one.
        halt_on_error: Stop producing output after the first illegal line.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    sentinel: str = Field(default=DEFAULT_SENTINEL, min_length=1)
    strict_residue: bool = True
    halt_on_error: bool = False

    @field_validator("sentinel")
    @classmethod
    def sentinel_single_line(cls, value: str) -> str:
        if "\n" in value or "\r" in value:
            raise ValueError("sentinel must be a single line")
        return value
