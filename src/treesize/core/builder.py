"""Concurrent construction of the size-ranked result tree."""

from __future__ import annotations

import asyncio
import logging
import os
import stat
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable

from treesize.core.errors import ScanError
from treesize.core.gate import AdmissionGate
from treesize.core.sizes import total_size
from treesize.models.node import FileNode
from treesize.models.options import ScanOptions
from treesize.utils import format_elapsed

log = logging.getLogger(__name__)


class TreeBuilder:
    """Builds a :class:`FileNode` tree for one scan.

    Siblings are built concurrently.  Every blocking filesystem call runs in
    a thread pool and holds one slot of a single :class:`AdmissionGate`, so
    ``options.threads`` caps filesystem work across the whole traversal.
    A task never holds a slot while it waits for its children.
    """

    def __init__(self, options: ScanOptions | None = None) -> None:
        self.options = options or ScanOptions()
        self.gate = AdmissionGate(self.options.threads)
        self._executor: ThreadPoolExecutor | None = None

    async def scan(self, path: str) -> FileNode | None:
        """Build the tree rooted at *path*.

        Returns None when the root itself falls below ``min_size``.

        Raises:
            ScanError: if *path* cannot be stat'ed.
        """
        started = time.monotonic()
        log.info("Scanning %s with %s", path, self.options)
        with ThreadPoolExecutor(max_workers=self.options.threads) as executor:
            self._executor = executor
            try:
                root = await self.build(path)
            except OSError as e:
                raise ScanError(path, f"cannot access {path}: {e.strerror or e}") from e
            finally:
                self._executor = None
        log.info(
            "Scanned %s in %s (peak concurrency %d of %d)",
            path,
            format_elapsed(time.monotonic() - started),
            self.gate.peak,
            self.gate.limit,
        )
        return root

    async def build(self, path: str, depth: int = 0) -> FileNode | None:
        """Build the node for *path* found at recursion *depth*.

        Returns None when the entry is elided by the minimum size filter.

        Raises:
            OSError: if *path* cannot be stat'ed.
        """
        opts = self.options
        st = await self._io(os.lstat, path)
        node = FileNode(
            name=os.path.basename(os.path.normpath(path)) or path,
            path=path,
            is_dir=stat.S_ISDIR(st.st_mode),
        )

        if not node.is_dir:
            node.size = st.st_size
            return node if node.size >= opts.min_size else None

        if not opts.unlimited_depth and depth >= opts.max_depth:
            try:
                node.size = await self._io(total_size, path)
            except OSError as e:
                log.debug("Cannot size %s: %s", path, e)
            return node if node.size >= opts.min_size else None

        try:
            names = await self._io(os.listdir, path)
        except OSError as e:
            log.debug("Cannot list %s: %s", path, e)
            return node if node.size >= opts.min_size else None

        tasks = [
            asyncio.ensure_future(self._build_child(os.path.join(path, name), depth + 1))
            for name in names
        ]
        for finished in asyncio.as_completed(tasks):
            child = await finished
            if child is not None:
                node.children.append(child)
                node.size += child.size

        if node.size < opts.min_size:
            return None

        node.children.sort(key=lambda c: (-c.size, c.name))
        if opts.top > 0:
            del node.children[opts.top:]
        return node

    async def _build_child(self, path: str, depth: int) -> FileNode | None:
        try:
            return await self.build(path, depth)
        except OSError as e:
            log.debug("Skipping %s: %s", path, e)
            return None

    async def _io(self, func: Callable[..., Any], *args: Any) -> Any:
        """Run a blocking filesystem call while holding a gate slot."""
        async with self.gate:
            loop = asyncio.get_running_loop()
            return await loop.run_in_executor(self._executor, func, *args)


def build_tree(path: str, options: ScanOptions | None = None) -> FileNode | None:
    """Scan *path* synchronously and return the root node.

    Raises:
        ScanError: if *path* cannot be stat'ed.
    """
    return asyncio.run(TreeBuilder(options).scan(path))
