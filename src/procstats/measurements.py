"""Reading measurements from a delimited text file.

The file has a header row. The measurement is one field of each data row
(index 1, i.e. the second column, by default), parsed as a 64-bit float.

A data row with fewer or more fields than the header, or whose field is not
a number, aborts the whole read with ParseError; there is no partial result.
Text such as nan or inf parses, and is rejected later as non-finite.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

import pandas as pd

from procstats.errors import InputFileError, ParseError
from procstats.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_COLUMN = 1
DEFAULT_DELIMITER = ","

# Spellings float() accepts that to_numeric coercion would turn into NaN or
# miss. They parse here; StatisticalPopulation rejects the non-finite values.
SPECIAL_FLOATS = frozenset(
    sign + word for sign in ("", "+", "-") for word in ("nan", "inf", "infinity")
)


def read_measurements(
    path: Union[str, Path],
    *,
    column: int = DEFAULT_COLUMN,
    delimiter: str = DEFAULT_DELIMITER,
) -> tuple[float, ...]:
    """
    Read one numeric column from a delimited file with a header row.

    Args:
        path: Input file.
        column: 0-based field index of the measurement.
        delimiter: Field separator.

    Returns:
        Measurements in file order. Empty if the file holds only a header.

    Raises:
        InputFileError: If the file is missing or unreadable.
        ParseError: If the file is malformed or a field is not a float.
    """
    path = Path(path)
    if column < 0:
        raise ValueError(f"column must be >= 0, got {column}")
    try:
        # header=None keeps the header as row 0, so the C parser checks every
        # row against its field count and rejects longer rows.
        df = pd.read_csv(
            path,
            sep=delimiter,
            header=None,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
        )
    except (FileNotFoundError, IsADirectoryError, PermissionError) as e:
        raise InputFileError(f"cannot read input file {str(path)!r}: {e}") from e
    except pd.errors.EmptyDataError as e:
        raise ParseError(f"{str(path)!r} is empty; expected a header row") from e
    except (pd.errors.ParserError, UnicodeDecodeError) as e:
        raise ParseError(f"malformed input file {str(path)!r}: {e}") from e

    n_fields = len(df.columns)
    data = df.iloc[1:].reset_index(drop=True)
    if data.empty:
        logger.warning(f"{path} has a header but no data rows")
        return ()
    if column >= n_fields:
        raise ParseError(
            f"data row 1 has no field {column} (found {n_fields} fields)",
            row=1,
        )

    # Rows shorter than the header come back padded with NaN.
    short = data.isna().any(axis=1)
    if short.any():
        pos = int(short.to_numpy().nonzero()[0][0])
        found = int(data.iloc[pos].notna().sum())
        raise ParseError(
            f"data row {pos + 1} (line {pos + 2}): expected {n_fields} fields, found {found}",
            row=pos + 1,
        )

    text = data.iloc[:, column].str.strip()
    values = pd.to_numeric(text, errors="coerce")
    special = text.str.lower().isin(SPECIAL_FLOATS)
    if special.any():
        values = values.where(~special, text[special].map(float))
    bad = values.isna() & ~special
    if bad.any():
        pos = int(bad.to_numpy().nonzero()[0][0])
        raw = str(data.iloc[pos, column])
        raise ParseError(
            f"data row {pos + 1} (line {pos + 2}): cannot parse {raw!r} as a float",
            row=pos + 1,
            text=raw,
        )

    logger.info(f"read {len(values)} measurements from {path} (column {column})")
    return tuple(float(x) for x in values.to_numpy(dtype=float))
