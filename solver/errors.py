"""Exceptions raised by the equation solver, the statistics engine and CSV ingestion."""


class SolverError(Exception):
    """Base class for every error the computation core raises."""

    default_code = "SOLVER_ERROR"

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.default_code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class ValidationError(SolverError):
    """Raised when an equation string is malformed."""

    default_code = "VALIDATION_ERROR"


# ── Statistics ──────────────────────────────────────────────────────────

class StatisticsError(SolverError):
    default_code = "STATISTICS_ERROR"


class EmptyDatasetError(StatisticsError):
    """Raised when statistics are requested for zero values.

    Callers are expected to filter their data upstream, so reaching this is a
    contract violation rather than a user mistake.
    """

    default_code = "EMPTY_DATASET"


class NonFiniteValueError(StatisticsError):
    default_code = "NON_FINITE_VALUE"


# ── CSV ingestion ───────────────────────────────────────────────────────

class DataIngestionError(SolverError):
    default_code = "INGESTION_ERROR"


class NoValidDataError(DataIngestionError):
    """Raised when a file contains no numeric token at all."""

    default_code = "NO_VALID_DATA"


class CsvFormatError(DataIngestionError):
    default_code = "CSV_FORMAT_ERROR"
