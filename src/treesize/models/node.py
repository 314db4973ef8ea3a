"""Result tree node dataclass."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(slots=True)
class FileNode:
    """Single file or directory in a scan result tree.

    For directories ``size`` is the aggregate of the children that survived
    size filtering.  ``children`` stays empty for files and for directories
    that were not expanded because of the depth limit.
    """

    name: str
    path: str
    size: int = 0
    is_dir: bool = False
    children: list[FileNode] = field(default_factory=list)

    def walk(self) -> Iterator[FileNode]:
        """Yield this node and every descendant, depth-first."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))
