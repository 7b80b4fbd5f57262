import sys
from collections import defaultdict
from pathlib import Path

from music_tree_etl.settings import LIBRARY_CSV_FILE
from music_tree_etl.utils.csv_helpers import load_library_csv
from music_tree_etl.utils.tree_helpers import build_library_tree, iter_nodes


def validate_node_ids(csv_path: Path) -> bool:
    """
    Builds the library tree from a CSV file and reports every identity
    string carried by more than one node.

    Returns:
        True when all ids are unique.
    """
    if not csv_path.exists():
        print(f"Error: File not found at {csv_path}")
        print("Pass a library CSV path or set MUSIC_LIBRARY_CSV.")
        return False

    print(f"--- Checking node ids for {csv_path} ---\n")

    records = load_library_csv(csv_path)
    root = build_library_tree(records)

    nodes_by_id = defaultdict(list)
    total_nodes = 0
    for node in iter_nodes(root):
        total_nodes += 1
        nodes_by_id[node.id].append(node)

    duplicates = {node_id: nodes for node_id, nodes in nodes_by_id.items() if len(nodes) > 1}

    print("--- Analysis Complete ---")
    print(f"Records: {len(records)}, nodes: {total_nodes}\n")

    if not duplicates:
        print("✅ Every node id is unique.")
        return True

    num_dupes = sum(len(nodes) for nodes in duplicates.values())
    print(f"🔴 Found {num_dupes} node(s) sharing {len(duplicates)} id(s):")
    for node_id, nodes in duplicates.items():
        kinds = ", ".join(node.kind for node in nodes)
        print(f"\n  - Id: '{node_id}'")
        print(f"    - Used by {len(nodes)} nodes ({kinds})")

    print("\n⚠️ Repeated artist/track pairs, or a year equal to a genre, share ids.")
    print("   Build with disambiguate_ids=True to give each record its own ids.")
    return False


if __name__ == "__main__":
    path = Path(sys.argv[1]) if len(sys.argv) > 1 else LIBRARY_CSV_FILE
    sys.exit(0 if validate_node_ids(path) else 1)
