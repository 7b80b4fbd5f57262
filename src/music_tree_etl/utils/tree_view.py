"""
Open/closed view state and a plain-text outline renderer for library trees.

The state is keyed by node identity and lives outside the tree, so one tree
can be browsed with any number of independent views.
"""

from typing import Iterable, List, Optional, Set

from music_tree_etl.utils.models import LibraryNode
from music_tree_etl.utils.tree_helpers import iter_nodes


class TreeViewState:
    """
    Tracks which nodes are collapsed. Nodes start open.

    Nodes sharing an identity string share their open/closed flag.
    """

    def __init__(self, collapsed: Iterable[str] = ()):
        self._collapsed: Set[str] = set(collapsed)

    def is_open(self, node_id: str) -> bool:
        return node_id not in self._collapsed

    def toggle(self, node_id: str) -> bool:
        """Flips the flag for `node_id` and returns the new open state."""
        if node_id in self._collapsed:
            self._collapsed.discard(node_id)
            return True
        self._collapsed.add(node_id)
        return False

    def collapse(self, node_id: str) -> None:
        self._collapsed.add(node_id)

    def expand(self, node_id: str) -> None:
        self._collapsed.discard(node_id)

    def collapse_all(self, root: LibraryNode) -> None:
        self._collapsed.update(node.id for node in iter_nodes(root) if node.children)

    def expand_all(self) -> None:
        self._collapsed.clear()

    @property
    def collapsed(self) -> Set[str]:
        return set(self._collapsed)


def render_outline(
    root: LibraryNode,
    state: Optional[TreeViewState] = None,
    indent: str = "  ",
) -> List[str]:
    """
    Renders the visible part of the tree as indented text lines.

    Markers: "-" open node with children, "+" collapsed node with children,
    "*" leaf. Children of collapsed nodes are omitted.

    Args:
        root: The tree to render.
        state: View state to honour. Defaults to everything open.
        indent: The string repeated once per depth level.

    Returns:
        One line per visible node, root first.
    """
    state = state or TreeViewState()
    lines: List[str] = []
    stack = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        if not node.children:
            marker = "*"
        elif state.is_open(node.id):
            marker = "-"
        else:
            marker = "+"
        lines.append(f"{indent * depth}{marker} {node.label}")
        if node.children and state.is_open(node.id):
            stack.extend((child, depth + 1) for child in reversed(node.children))
    return lines
