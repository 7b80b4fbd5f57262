from pathlib import Path

from dagster import asset, AssetExecutionContext

from music_tree_etl.settings import LIBRARY_OUTLINE_FILE, LIBRARY_TREE_FILE
from music_tree_etl.utils.io_helpers import load_json, save_text
from music_tree_etl.utils.models import LibraryNode
from music_tree_etl.utils.tree_view import render_outline


@asset(
    name="library_outline",
    deps=["library_tree"],
    description="Renders the library tree as a fully expanded text outline.",
    group_name="loading",
)
def library_outline(context: AssetExecutionContext) -> Path:
    """
    Reads the saved library tree and writes its outline, one node per line.
    """
    root = LibraryNode.from_dict(load_json(LIBRARY_TREE_FILE))
    lines = render_outline(root)

    save_text("\n".join(lines) + "\n", LIBRARY_OUTLINE_FILE)

    context.log.info(f"Wrote {len(lines)} outline lines to {LIBRARY_OUTLINE_FILE}")
    return LIBRARY_OUTLINE_FILE
