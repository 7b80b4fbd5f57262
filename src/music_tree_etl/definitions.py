from dagster import Definitions, load_assets_from_modules

from music_tree_etl.assets.extraction import library_csv_extraction_assets
from music_tree_etl.assets.transformation import library_tree_assets
from music_tree_etl.assets.loading import (
    library_export_assets,
    library_outline_assets,
)


# Create a list of all asset modules
asset_modules = [
    library_csv_extraction_assets,
    library_tree_assets,
    library_outline_assets,
    library_export_assets,
]

# Load all assets from the specified modules
all_assets = load_assets_from_modules(asset_modules)

defs = Definitions(assets=all_assets)
