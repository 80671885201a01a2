"""
Descriptive statistics for a single column of numbers.

All measures are population statistics (divisor ``n``), computed with NumPy
on a float64 array and returned as plain floats.  ``explain_statistics``
turns a report into the canned explanation cards shown next to the numbers.
"""

import logging

import numpy as np

from solver.errors import EmptyDatasetError, NonFiniteValueError
from solver.formatting import fmt_fixed
from solver.types import StatExplanation, StatisticsReport

logger = logging.getLogger(__name__)


def compute_statistics(values) -> StatisticsReport:
    """Return mean, median, standard deviation, variance, min, max, range and sum.

    Raises ``EmptyDatasetError`` for an empty sequence and
    ``NonFiniteValueError`` if any value is NaN or infinite, or if a
    measure overflows float64.
    """
    data = np.asarray(list(values), dtype=float)
    if data.size == 0:
        raise EmptyDatasetError("Cannot compute statistics of an empty dataset.")
    if not np.all(np.isfinite(data)):
        bad = int(np.count_nonzero(~np.isfinite(data)))
        raise NonFiniteValueError(
            f"Dataset contains {bad} non-finite value(s) (NaN or infinity)."
        )

    # Finite inputs can still overflow float64 in the sum or squared deviations.
    with np.errstate(over="ignore", invalid="ignore"):
        total = float(np.sum(data))
        mean = float(np.mean(data))
        variance = float(np.var(data))
        median = float(np.median(data))
    lo = float(np.min(data))
    hi = float(np.max(data))

    report = StatisticsReport(
        count=int(data.size),
        mean=mean,
        median=median,
        standard_deviation=float(np.sqrt(variance)),
        variance=variance,
        min=lo,
        max=hi,
        range=hi - lo,
        sum=total,
    )
    overflowed = [name for name, value in report.to_dict().items()
                  if not np.isfinite(value)]
    if overflowed:
        raise NonFiniteValueError(
            f"Values are too large to summarise: {', '.join(overflowed)} "
            f"overflow double precision."
        )

    logger.debug("computed statistics over %d values", data.size)
    return report


def explain_statistics(report: StatisticsReport) -> list[StatExplanation]:
    """Build the eight explanation cards, in display order."""
    mean = fmt_fixed(report.mean)
    sd = report.standard_deviation
    spread = ("highly dispersed" if report.variance > report.mean
              else "relatively grouped")
    return [
        StatExplanation(
            title="Mean",
            value=mean,
            formula="Σ(xi) / n",
            description="The arithmetic average of all values",
            interpretation=(
                f"The average value of your dataset is {mean}. "
                f"It is the centre of gravity of your distribution."
            ),
        ),
        StatExplanation(
            title="Median",
            value=fmt_fixed(report.median),
            formula="Middle value of the sorted data",
            description="The value that splits the dataset into two equal halves",
            interpretation=(
                f"50% of your values are below {fmt_fixed(report.median)} "
                f"and 50% are above."
            ),
        ),
        StatExplanation(
            title="Standard deviation",
            value=fmt_fixed(sd),
            formula="√( Σ(xi - μ)² / n )",
            description="How spread out the data is around the mean",
            interpretation=(
                f"About 68% of the values lie between "
                f"{fmt_fixed(report.mean - sd)} and {fmt_fixed(report.mean + sd)}."
            ),
        ),
        StatExplanation(
            title="Variance",
            value=fmt_fixed(report.variance),
            formula="Σ(xi - μ)² / n",
            description="Square of the standard deviation, measures dispersion",
            interpretation=(
                f"A variance of {fmt_fixed(report.variance)} indicates that "
                f"the data is {spread}."
            ),
        ),
        StatExplanation(
            title="Minimum",
            value=fmt_fixed(report.min),
            formula="min(xi)",
            description="The smallest value in the dataset",
            interpretation=f"Your lowest value is {fmt_fixed(report.min)}.",
        ),
        StatExplanation(
            title="Maximum",
            value=fmt_fixed(report.max),
            formula="max(xi)",
            description="The largest value in the dataset",
            interpretation=f"Your highest value is {fmt_fixed(report.max)}.",
        ),
        StatExplanation(
            title="Range",
            value=fmt_fixed(report.range),
            formula="max(xi) - min(xi)",
            description="Difference between the extreme values",
            interpretation=(
                f"Your data spans an interval of {fmt_fixed(report.range)} units."
            ),
        ),
        StatExplanation(
            title="Sum",
            value=fmt_fixed(report.sum),
            formula="Σ(xi)",
            description="Total of all values",
            interpretation=(
                f"The total of all your values is {fmt_fixed(report.sum)}."
            ),
        ),
    ]
