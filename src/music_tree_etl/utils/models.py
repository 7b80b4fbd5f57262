import weakref
from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

NodeKind = Literal["artist", "track", "year", "genre"]


class TrackRecord(BaseModel):
    """One flat row of the library CSV. All fields are kept as raw text."""

    model_config = ConfigDict(populate_by_name=True)

    artist: str = Field(alias="Artist")
    track_name: str = Field(alias="TrackName")
    year: str = Field(alias="Year")
    genre: str = Field(alias="Genre")


@dataclass
class LibraryNode:
    """
    A node of the library tree.

    Children are owned by their parent. The `parent` and `track` links are
    weak references, so they never keep a node alive on their own. Keep a
    reference to the root while navigating: once the root is released,
    `parent` and `track` of the remaining nodes return None.
    """

    id: str
    label: str
    kind: NodeKind
    children: List["LibraryNode"] = field(default_factory=list)
    _parent: Optional[weakref.ref] = field(
        default=None, init=False, repr=False, compare=False
    )
    _track: Optional[weakref.ref] = field(
        default=None, init=False, repr=False, compare=False
    )

    @property
    def parent(self) -> Optional["LibraryNode"]:
        return self._parent() if self._parent is not None else None

    @property
    def track(self) -> Optional["LibraryNode"]:
        """The track a year or genre node belongs to."""
        return self._track() if self._track is not None else None

    def add_child(self, child: "LibraryNode") -> "LibraryNode":
        child._parent = weakref.ref(self)
        self.children.append(child)
        return child

    def link_track(self, track: "LibraryNode") -> None:
        self._track = weakref.ref(track)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-serialisable dictionary."""
        data: Dict[str, Any] = {
            "id": self.id,
            "label": self.label,
            "kind": self.kind,
            "children": [child.to_dict() for child in self.children],
        }
        track = self.track
        if track is not None:
            data["track_id"] = track.id
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LibraryNode":
        """
        Rebuilds a tree from the output of `to_dict`.

        Track links are restored from the owning parent, which is always the
        track for year and genre nodes.
        """
        node = cls(id=data["id"], label=data["label"], kind=data["kind"])
        for child_data in data.get("children", []):
            child = node.add_child(cls.from_dict(child_data))
            if "track_id" in child_data:
                child.link_track(node)
        return node
