"""
Prints the library tree built from a CSV file as a text outline.

Usage:
    python -m scripts.print_library_tree data_volume/datasets/music_library.csv
    python -m scripts.print_library_tree --collapse Queen --collapse "The Beatles-Hey Jude"
    python -m scripts.print_library_tree --json
"""

import argparse
import json
import sys
from pathlib import Path

from music_tree_etl.settings import SAMPLE_LIBRARY_CSV
from music_tree_etl.utils.csv_helpers import load_library_csv, parse_library_csv
from music_tree_etl.utils.tree_helpers import build_library_tree
from music_tree_etl.utils.tree_view import TreeViewState, render_outline


def _setup_arg_parser() -> argparse.ArgumentParser:
    """
    Sets up the argument parser for the command-line interface.

    Returns:
        argparse.ArgumentParser: The configured argument parser.
    """
    parser = argparse.ArgumentParser(
        description="Print a music library CSV as an Artist -> Track -> Year/Genre tree."
    )
    parser.add_argument(
        "csv_path",
        type=Path,
        nargs="?",
        help="Library CSV with an Artist,TrackName,Year,Genre header. Defaults to the sample library.",
    )
    parser.add_argument(
        "--collapse",
        action="append",
        default=[],
        metavar="NODE_ID",
        help="Collapse the node with this id. Can be given several times.",
    )
    parser.add_argument(
        "--disambiguate-ids",
        action="store_true",
        help="Give every record its own track id, even for repeated artist/track pairs.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the tree as JSON instead of an outline.",
    )
    return parser


def main() -> None:
    args = _setup_arg_parser().parse_args()

    try:
        if args.csv_path:
            records = load_library_csv(args.csv_path)
        else:
            records = parse_library_csv(SAMPLE_LIBRARY_CSV)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    root = build_library_tree(records, disambiguate_ids=args.disambiguate_ids)

    if args.json:
        print(json.dumps(root.to_dict(), ensure_ascii=False, indent=2))
        return

    state = TreeViewState(collapsed=args.collapse)
    for line in render_outline(root, state):
        print(line)


if __name__ == "__main__":
    main()
