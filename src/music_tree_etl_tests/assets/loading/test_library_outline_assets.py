from unittest.mock import patch

from dagster import build_asset_context

from music_tree_etl.assets.loading.library_outline_assets import library_outline
from music_tree_etl.utils.io_helpers import save_json
from music_tree_etl.utils.models import TrackRecord
from music_tree_etl.utils.tree_helpers import build_library_tree

MODULE = "music_tree_etl.assets.loading.library_outline_assets"


def test_library_outline_writes_expanded_outline(tmp_path):
    tree_file = tmp_path / "library_tree.json"
    outline_file = tmp_path / "out" / "library_outline.txt"
    root = build_library_tree(
        [TrackRecord(artist="Queen", track_name="Kashmir", year="1975", genre="Rock;Funk")]
    )
    save_json(root.to_dict(), tree_file)

    with patch(f"{MODULE}.LIBRARY_TREE_FILE", tree_file), \
         patch(f"{MODULE}.LIBRARY_OUTLINE_FILE", outline_file):
        result = library_outline(build_asset_context())

    assert result == outline_file
    assert outline_file.read_text(encoding="utf-8").splitlines() == [
        "- Music Library",
        "  - Queen",
        "    - Kashmir",
        "      * 1975",
        "      * Rock",
        "      * Funk",
    ]
