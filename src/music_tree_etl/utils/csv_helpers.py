import logging
from pathlib import Path
from typing import List, Optional

import polars as pl

from music_tree_etl.settings import CSV_COLUMNS
from music_tree_etl.utils.models import TrackRecord


def read_library_frame(text: str) -> pl.DataFrame:
    """
    Reads library CSV text into a DataFrame with the four library columns,
    all typed as strings.

    Args:
        text: Delimited text whose first line is the header row.

    Returns:
        A DataFrame with columns CSV_COLUMNS, in file order. Missing cells
        are empty strings and cells beyond the header are dropped. No value
        is trimmed or converted, and quoted fields keep their line breaks.

    Raises:
        ValueError: If the header lacks one of the library columns, or the
            text cannot be parsed as CSV.
    """
    if not text.strip():
        return pl.DataFrame(schema={column: pl.Utf8 for column in CSV_COLUMNS})

    try:
        df = pl.read_csv(
            text.encode("utf-8"),
            has_header=True,
            infer_schema=False,  # Keep every column as text
            truncate_ragged_lines=True,
        )
    except pl.exceptions.PolarsError as e:
        raise ValueError(f"Could not parse library CSV: {e}") from e

    missing = [column for column in CSV_COLUMNS if column not in df.columns]
    if missing:
        raise ValueError(f"Library CSV is missing column(s): {', '.join(missing)}")

    return df.select(
        [pl.col(column).cast(pl.Utf8).fill_null("") for column in CSV_COLUMNS]
    )


def parse_library_csv(
    text: str, logger: Optional[logging.Logger] = None
) -> List[TrackRecord]:
    """
    Parses library CSV text into an ordered list of track records.

    Empty text, or a header with no rows, yields an empty list.

    Raises:
        ValueError: See `read_library_frame`.
    """
    df = read_library_frame(text)
    records = [
        TrackRecord.model_validate(row) for row in df.iter_rows(named=True)
    ]
    if logger:
        logger.info(f"Parsed {len(records)} track records from library CSV.")
    return records


def load_library_csv(
    file_path: Path, logger: Optional[logging.Logger] = None
) -> List[TrackRecord]:
    """
    Reads a UTF-8 library CSV file and parses it into track records.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: See `read_library_frame`.
    """
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")
    return parse_library_csv(file_path.read_text(encoding="utf-8"), logger=logger)
