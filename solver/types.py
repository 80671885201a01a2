"""Result dataclasses shared by the solver, statistics and export modules."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from solver.formatting import fmt_num


class SolutionKind(str, Enum):
    UNIQUE = "unique"
    INFINITE = "infinite"
    NONE = "none"


@dataclass(frozen=True)
class LinearForm:
    """One side of an equation, read as ``a·x + b``."""

    a: float
    b: float


@dataclass
class SolveResult:
    """Outcome of solving one linear equation.

    ``solution`` is only set when ``kind`` is ``UNIQUE``.  ``steps`` is the
    derivation trace; ``verification_steps`` is the substitution check that
    follows a unique solution and stays empty otherwise.
    """

    kind: SolutionKind
    steps: list[str]
    left: LinearForm
    right: LinearForm
    solution: float | None = None
    verification_steps: list[str] = field(default_factory=list)
    verified: bool | None = None

    @property
    def final_answer(self) -> str:
        if self.kind is SolutionKind.UNIQUE:
            return f"x = {fmt_num(self.solution)}"
        if self.kind is SolutionKind.INFINITE:
            return "∞ (infinitely many solutions)"
        return "∅ (no solution)"

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "solution": self.solution,
            "final_answer": self.final_answer,
            "steps": list(self.steps),
            "left": {"a": self.left.a, "b": self.left.b},
            "right": {"a": self.right.a, "b": self.right.b},
            "verification_steps": list(self.verification_steps),
            "verified": self.verified,
        }


@dataclass(frozen=True)
class StatisticsReport:
    """Population descriptive statistics for one dataset."""

    count: int
    mean: float
    median: float
    standard_deviation: float
    variance: float
    min: float
    max: float
    range: float
    sum: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "count": self.count,
            "mean": self.mean,
            "median": self.median,
            "standard_deviation": self.standard_deviation,
            "variance": self.variance,
            "min": self.min,
            "max": self.max,
            "range": self.range,
            "sum": self.sum,
        }


@dataclass(frozen=True)
class StatExplanation:
    title: str
    value: str
    formula: str
    description: str
    interpretation: str

    def to_dict(self) -> dict[str, str]:
        return {
            "title": self.title,
            "value": self.value,
            "formula": self.formula,
            "description": self.description,
            "interpretation": self.interpretation,
        }
