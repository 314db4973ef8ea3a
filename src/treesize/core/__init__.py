"""Scanning core: tree builder, size aggregation and concurrency gate."""

from treesize.core.builder import TreeBuilder, build_tree
from treesize.core.errors import ScanError
from treesize.core.gate import AdmissionGate
from treesize.core.sizes import total_size

__all__ = [
    "AdmissionGate",
    "ScanError",
    "TreeBuilder",
    "build_tree",
    "total_size",
]
