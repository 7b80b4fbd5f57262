from pathlib import Path

from dagster import asset, AssetExecutionContext

from music_tree_etl.assets.extraction.library_csv_extraction_assets import (
    read_library_text,
)
from music_tree_etl.settings import EXPORT_FILE
from music_tree_etl.utils.io_helpers import save_text


@asset(
    name="library_csv_export",
    description="Offers the raw library CSV for download, unchanged.",
    group_name="loading",
)
def library_csv_export(context: AssetExecutionContext) -> Path:
    text = read_library_text(context)
    save_text(text, EXPORT_FILE)
    context.log.info(f"Exported library CSV to {EXPORT_FILE}")
    return EXPORT_FILE
