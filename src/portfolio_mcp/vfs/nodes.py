"""Virtual tree node types.

The tree is a tagged union of directories and files. Directories own their
children through a read-only mapping (insertion order is the listing
order); files own a zero-argument renderer that produces their text on
every read. There are no parent pointers, so a tree built bottom-up cannot
contain cycles.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Union


class NodeKind(str, Enum):
    DIRECTORY = "directory"
    FILE = "file"


@dataclass(frozen=True)
class FileNode:
    """Leaf node whose text is rendered lazily.

    The renderer is called on every `read()`; nothing is cached, so a file
    always reflects the content record it was built from.
    """

    name: str
    renderer: Callable[[], str] = field(repr=False, compare=False)

    @property
    def kind(self) -> NodeKind:
        return NodeKind.FILE

    def read(self) -> str:
        return self.renderer()


@dataclass(frozen=True)
class DirectoryNode:
    """Directory node with named children."""

    name: str
    children: Mapping[str, Node] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def of(cls, name: str, nodes: Iterable[Node]) -> DirectoryNode:
        """Build a directory from child nodes, keeping their order.

        Raises:
            ValueError: If two children share a name
        """
        children: dict[str, Node] = {}
        for node in nodes:
            if node.name in children:
                raise ValueError(f"Duplicate entry '{node.name}' in directory '{name or '/'}'")
            children[node.name] = node
        return cls(name=name, children=MappingProxyType(children))

    @property
    def kind(self) -> NodeKind:
        return NodeKind.DIRECTORY

    def child(self, name: str) -> Node | None:
        return self.children.get(name)

    def directories(self) -> list[DirectoryNode]:
        return [node for node in self.children.values() if isinstance(node, DirectoryNode)]

    def files(self) -> list[FileNode]:
        return [node for node in self.children.values() if isinstance(node, FileNode)]

    def directory_names(self) -> list[str]:
        return [node.name for node in self.directories()]

    def file_names(self) -> list[str]:
        return [node.name for node in self.files()]

    def resolve(self, segments: Sequence[str]) -> Node | None:
        """Walk child names from this directory; None when any step is missing."""
        node: Node = self
        for segment in segments:
            if not isinstance(node, DirectoryNode):
                return None
            next_node = node.child(segment)
            if next_node is None:
                return None
            node = next_node
        return node


Node = Union[DirectoryNode, FileNode]
