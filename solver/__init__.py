"""MathPanel computation core: linear equations and descriptive statistics."""

from solver.engine import solve_equation
from solver.errors import (
    CsvFormatError,
    DataIngestionError,
    EmptyDatasetError,
    NoValidDataError,
    NonFiniteValueError,
    SolverError,
    StatisticsError,
    ValidationError,
)
from solver.statistics import compute_statistics, explain_statistics
from solver.types import (
    LinearForm,
    SolutionKind,
    SolveResult,
    StatExplanation,
    StatisticsReport,
)

__all__ = [
    "solve_equation",
    "compute_statistics",
    "explain_statistics",
    "LinearForm",
    "SolutionKind",
    "SolveResult",
    "StatExplanation",
    "StatisticsReport",
    "SolverError",
    "ValidationError",
    "StatisticsError",
    "EmptyDatasetError",
    "NonFiniteValueError",
    "DataIngestionError",
    "NoValidDataError",
    "CsvFormatError",
]
