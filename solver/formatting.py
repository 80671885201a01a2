"""Number formatting used in step traces, answers and exports."""

import math


def fmt_num(value: float, max_decimals: int = 10) -> str:
    """Format a float into a clean decimal string.

    - Removes trailing zeros after the decimal point.
    - Uses up to *max_decimals* digits of precision.
    - Returns integers without a decimal point (e.g. ``7`` not ``7.0``).
    """
    if not math.isfinite(value):
        return str(value)
    if abs(value - round(value)) < 1e-12:
        return str(int(round(value)))
    formatted = f"{value:.{max_decimals}f}".rstrip("0").rstrip(".")
    if formatted in ("-0", ""):
        return "0"
    return formatted


def fmt_fixed(value: float, decimals: int = 2) -> str:
    """Fixed-point rendering for statistics (``3.14159`` → ``3.14``)."""
    text = f"{value:.{decimals}f}"
    # -0.00 reads oddly in a report
    if float(text) == 0:
        return f"{0:.{decimals}f}"
    return text
