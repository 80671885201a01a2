"""
CSV ingestion for the statistics panel.

Reads delimited text, flattens every cell row by row, keeps the tokens that
parse as finite numbers and drops everything else (headers, blanks, labels).
"""

import io
import logging

import numpy as np
import pandas as pd

from solver.errors import CsvFormatError, NoValidDataError

logger = logging.getLogger(__name__)

NO_VALID_DATA_MESSAGE = "No valid numeric data found."


def _decode(source) -> str:
    if isinstance(source, (bytes, bytearray)):
        try:
            return bytes(source).decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise CsvFormatError(
                f"The file is not valid UTF-8 text: {e}"
            ) from e
    return source


def _read_frame(text: str, delimiter: str) -> pd.DataFrame:
    options = dict(
        sep=delimiter,
        header=None,
        dtype=str,
        keep_default_na=False,
        skip_blank_lines=True,
        engine="python",
    )
    # Rows may be longer than the first one. The first pass records the
    # field count of every such row so the second can make room for it.
    wider: list[int] = []
    try:
        frame = pd.read_csv(
            io.StringIO(text),
            on_bad_lines=lambda fields: wider.append(len(fields)),
            **options,
        )
        if wider:
            width = max(frame.shape[1], *wider)
            frame = pd.read_csv(io.StringIO(text), names=list(range(width)), **options)
    except pd.errors.EmptyDataError as e:
        raise NoValidDataError(NO_VALID_DATA_MESSAGE) from e
    except (pd.errors.ParserError, ValueError) as e:
        raise CsvFormatError(f"Could not read the file as CSV: {e}") from e
    return frame


def load_numbers(source, delimiter: str = ",") -> list[float]:
    """Return every finite number found in *source* (text or UTF-8 bytes).

    Raises ``NoValidDataError`` when nothing numeric is found and
    ``CsvFormatError`` when the text cannot be parsed at all.
    """
    text = _decode(source)
    if not text.strip():
        raise NoValidDataError(NO_VALID_DATA_MESSAGE)

    frame = _read_frame(text, delimiter)
    tokens = pd.Series(frame.to_numpy().ravel(), dtype=object).fillna("").astype(str)
    numbers = pd.to_numeric(tokens.str.strip(), errors="coerce").to_numpy(dtype=float)
    numbers = numbers[np.isfinite(numbers)]

    logger.debug("kept %d numeric tokens out of %d cells", numbers.size, tokens.size)
    if numbers.size == 0:
        raise NoValidDataError(NO_VALID_DATA_MESSAGE)
    return [float(v) for v in numbers]
