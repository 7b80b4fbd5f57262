from collections import Counter
from typing import Dict, Iterator, List, Sequence

from music_tree_etl.settings import (
    GENRE_SEPARATOR,
    NODE_ID_SEPARATOR,
    ROOT_NODE_ID,
    ROOT_NODE_LABEL,
)
from music_tree_etl.utils.models import LibraryNode, TrackRecord


def make_node_id(*labels: str) -> str:
    """
    Builds a node identity string from the path of labels leading to it.

    Example:
        make_node_id("Queen", "Bohemian Rhapsody") -> "Queen-Bohemian Rhapsody"
    """
    return NODE_ID_SEPARATOR.join(labels)


def split_genres(genre_field: str) -> List[str]:
    """
    Splits a genre field into its tokens. Tokens are returned verbatim:
    no trimming, no deduplication, and an empty field yields [""].
    """
    return genre_field.split(GENRE_SEPARATOR)


def build_library_tree(
    records: Sequence[TrackRecord], disambiguate_ids: bool = False
) -> LibraryNode:
    """
    Converts an ordered sequence of track records into the library tree
    (root -> artist -> track -> year, genre...).

    Artists are merged by exact name in order of first appearance. Every
    record creates its own track node, even when the artist and track name
    repeat. The input sequence is not modified.

    Args:
        records: The records to group, in input order.
        disambiguate_ids: When True, track ids get a "#<position>" suffix so
            repeated artist/track pairs produce distinct ids. The default
            keeps plain label-path ids, which collide for such pairs.

    Returns:
        The root node. It always exists, even for an empty input.
    """
    root = LibraryNode(id=ROOT_NODE_ID, label=ROOT_NODE_LABEL, kind="artist")
    artists: Dict[str, LibraryNode] = {}

    for position, record in enumerate(records):
        artist_node = artists.get(record.artist)
        if artist_node is None:
            artist_node = root.add_child(
                LibraryNode(id=record.artist, label=record.artist, kind="artist")
            )
            artists[record.artist] = artist_node

        track_id = make_node_id(record.artist, record.track_name)
        if disambiguate_ids:
            track_id = f"{track_id}#{position}"
        track_node = artist_node.add_child(
            LibraryNode(id=track_id, label=record.track_name, kind="track")
        )

        year_node = track_node.add_child(
            LibraryNode(
                id=make_node_id(track_id, record.year), label=record.year, kind="year"
            )
        )
        year_node.link_track(track_node)

        for genre in split_genres(record.genre):
            genre_node = track_node.add_child(
                LibraryNode(id=make_node_id(track_id, genre), label=genre, kind="genre")
            )
            genre_node.link_track(track_node)

    return root


def iter_nodes(root: LibraryNode) -> Iterator[LibraryNode]:
    """Yields every node of the tree in depth-first pre-order, root first."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def count_nodes_by_kind(root: LibraryNode) -> Counter:
    """Counts the nodes below the root, grouped by kind."""
    counts = Counter(node.kind for node in iter_nodes(root))
    counts[root.kind] -= 1
    return +counts


def find_nodes(root: LibraryNode, node_id: str) -> List[LibraryNode]:
    # Ids are not guaranteed unique, so every match is returned.
    return [node for node in iter_nodes(root) if node.id == node_id]


def find_duplicate_ids(root: LibraryNode) -> Dict[str, int]:
    """
    Returns the identity strings shared by more than one node, mapped to the
    number of nodes carrying each.
    """
    counts = Counter(node.id for node in iter_nodes(root))
    return {node_id: count for node_id, count in counts.items() if count > 1}
