from pathlib import Path

from dagster import asset, AssetExecutionContext

from music_tree_etl.settings import LIBRARY_CSV_FILE, SAMPLE_LIBRARY_CSV, TRACKS_FILE
from music_tree_etl.utils.csv_helpers import parse_library_csv
from music_tree_etl.utils.io_helpers import save_to_jsonl


def read_library_text(context: AssetExecutionContext) -> str:
    """
    Returns the raw library CSV text: the configured file when it exists,
    otherwise the built-in sample library.
    """
    if LIBRARY_CSV_FILE.exists():
        context.log.info(f"Reading library CSV from {LIBRARY_CSV_FILE}")
        # newline="" keeps line endings as they are on disk
        with open(LIBRARY_CSV_FILE, "r", encoding="utf-8", newline="") as f:
            return f.read()

    context.log.info(
        f"No library CSV at {LIBRARY_CSV_FILE}. Using the sample library."
    )
    return SAMPLE_LIBRARY_CSV


@asset(
    name="library_tracks",
    description="Parses the library CSV into track records saved as library_tracks.jsonl.",
    group_name="extraction",
)
def library_tracks(context: AssetExecutionContext) -> Path:
    """
    Materializes the track records dataset from the raw library CSV.
    Record order follows the CSV row order.
    """
    text = read_library_text(context)

    try:
        records = parse_library_csv(text, logger=context.log)
    except ValueError as e:
        context.log.error(f"Failed to parse library CSV: {e}")
        raise e

    save_to_jsonl([record.model_dump() for record in records], TRACKS_FILE)

    context.log.info(f"Saved {len(records)} track records to {TRACKS_FILE}")
    return TRACKS_FILE
