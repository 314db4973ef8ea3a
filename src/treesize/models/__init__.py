"""treesize data models."""

from treesize.models.node import FileNode
from treesize.models.options import ScanOptions

__all__ = [
    "FileNode",
    "ScanOptions",
]
