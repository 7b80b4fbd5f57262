from dagster import AssetExecutionContext, Config, MaterializeResult, asset
from pydantic import Field, ValidationError

from music_tree_etl.settings import LIBRARY_TREE_FILE, TRACKS_FILE
from music_tree_etl.utils.io_helpers import load_jsonl, save_json
from music_tree_etl.utils.models import TrackRecord
from music_tree_etl.utils.tree_helpers import (
    build_library_tree,
    count_nodes_by_kind,
    find_duplicate_ids,
)


class LibraryTreeConfig(Config):
    """Run configuration for building the library tree."""
    disambiguate_ids: bool = Field(
        False,
        description="Append the record position to track ids so repeated artist/track pairs get distinct ids.",
    )


@asset(
    name="library_tree",
    deps=["library_tracks"],
    description="Groups track records into the Artist -> Track -> Year/Genre tree.",
    group_name="transformation",
)
def library_tree(context: AssetExecutionContext, config: LibraryTreeConfig) -> MaterializeResult:
    """
    Dagster asset that builds the library tree from the track records.

    This asset performs the following steps:
    1. Loads the track records, skipping lines that fail validation.
    2. Builds the tree in record order.
    3. Reports identity strings shared by several nodes.
    4. Saves the tree as JSON.

    Args:
        context: The Dagster asset execution context.
        config: Tree building options.

    Returns:
        MaterializeResult: Node counts, collision count and output path.
    """
    raw_records = load_jsonl(TRACKS_FILE)
    context.log.info(f"Loading {len(raw_records)} track records...")

    records = []
    for raw_record in raw_records:
        try:
            records.append(TrackRecord.model_validate(raw_record))
        except ValidationError as e:
            context.log.warning(f"Skipping invalid track record: {e}")

    root = build_library_tree(records, disambiguate_ids=config.disambiguate_ids)
    counts = count_nodes_by_kind(root)
    context.log.info(
        f"Built tree with {counts['artist']} artists and {counts['track']} tracks."
    )

    duplicate_ids = find_duplicate_ids(root)
    if duplicate_ids:
        context.log.warning(
            f"{len(duplicate_ids)} node id(s) are shared by several nodes, "
            f"e.g. '{next(iter(duplicate_ids))}'. "
            "Set disambiguate_ids to give each record its own ids."
        )

    save_json(root.to_dict(), LIBRARY_TREE_FILE)
    context.log.info(f"Library tree saved to {LIBRARY_TREE_FILE}")

    return MaterializeResult(
        metadata={
            "records": len(records),
            "nodes": {
                "artists": counts["artist"],
                "tracks": counts["track"],
                "years": counts["year"],
                "genres": counts["genre"],
            },
            "duplicate_ids": len(duplicate_ids),
            "path": str(LIBRARY_TREE_FILE),
        }
    )
