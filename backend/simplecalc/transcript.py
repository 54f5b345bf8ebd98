"""
Session transcripts.

A transcript records a calculator session as YAML: the input lines and
the output line expected for each. Transcripts can be replayed against a
fresh session to check the calculator still behaves the same way.

Example:
    name: assignment-then-use
    settings:
      halt_on_error: false
    steps:
      - input: "x = 2 + 3"
        output: "5.0"
      - input: "x * 4"
        output: "20.0"
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel, Field

from .session import Session
from .settings import CalculatorSettings


class TranscriptStep(BaseModel):
    """
    One input line and the output line expected for it.

    An output of None means no output is expected, i.e. the session has
    already halted on an earlier illegal line.
    """

    input: str
    output: Optional[str] = None


class Transcript(BaseModel):
    """A named sequence of steps sharing one session."""

    name: str = "transcript"
    description: str = ""
    settings: CalculatorSettings = Field(default_factory=CalculatorSettings)
    steps: List[TranscriptStep] = Field(default_factory=list)


@dataclass
class Mismatch:
    """A step whose actual output differed from the expected one."""
    step: int
    input: str
    expected: Optional[str]
    actual: Optional[str]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "step": self.step,
            "input": self.input,
            "expected": self.expected,
            "actual": self.actual,
        }


@dataclass
class ReplayResult:
    """Result of replaying a transcript."""
    name: str
    steps_run: int = 0
    mismatches: List[Mismatch] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.mismatches

    def summary(self) -> str:
        status = "PASSED" if self.passed else "FAILED"
        lines = [f"Transcript {self.name}: {status}"]
        lines.append(f"  Steps: {self.steps_run}")
        for m in self.mismatches:
            lines.append(
                f"  Step {m.step} {m.input!r}: expected {m.expected!r}, got {m.actual!r}"
            )
        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "passed": self.passed,
            "steps_run": self.steps_run,
            "mismatches": [m.to_dict() for m in self.mismatches],
        }


def parse_transcript(data: Dict[str, Any]) -> Transcript:
    """Build a transcript from already-loaded YAML data."""
    return Transcript.model_validate(data)


def load_transcript(path: Path) -> Transcript:
    """
    Load a transcript from a YAML file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is empty or not valid YAML.
        pydantic.ValidationError: If the document is not a transcript.
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"YAML parse error in {path}: {e}") from e

    if data is None:
        raise ValueError(f"Transcript file is empty: {path}")
    if not isinstance(data, dict):
        raise ValueError(f"Transcript must be a mapping: {path}")

    data.setdefault("name", path.stem)
    return parse_transcript(data)


def load_transcripts(directory: Path) -> List[Transcript]:
    """Load every *.yaml transcript in a directory, sorted by file name."""
    directory = Path(directory)
    return [load_transcript(p) for p in sorted(directory.glob("*.yaml"))]


def replay(transcript: Transcript) -> ReplayResult:
    """
    Replay a transcript against a fresh session.

    Once the session halts, later steps produce no output (None) and only
    match steps whose expected output is None.
    """
    session = Session(settings=transcript.settings)
    result = ReplayResult(name=transcript.name)

    for index, step in enumerate(transcript.steps, start=1):
        actual = None if session.halted else session.process_line(step.input)
        result.steps_run += 1
        if actual != step.output:
            result.mismatches.append(Mismatch(
                step=index,
                input=step.input,
                expected=step.output,
                actual=actual,
            ))

    return result
