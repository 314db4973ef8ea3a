"""Recursive size aggregation for directories that are not expanded."""

from __future__ import annotations

import logging
import os
import stat

log = logging.getLogger(__name__)


def total_size(path: str) -> int:
    """Return the total size in bytes of everything under *path*.

    Every non-directory entry counts with its own ``lstat`` size; symlinks
    are not followed.  Entries that cannot be read are skipped.

    Raises:
        OSError: if *path* itself cannot be stat'ed.
    """
    st = os.lstat(path)
    if not stat.S_ISDIR(st.st_mode):
        return st.st_size

    total = 0
    stack = [path]
    while stack:
        current = stack.pop()
        try:
            with os.scandir(current) as it:
                for entry in it:
                    try:
                        if entry.is_dir(follow_symlinks=False):
                            stack.append(entry.path)
                        else:
                            total += entry.stat(follow_symlinks=False).st_size
                    except OSError:
                        log.debug("Skipping unreadable entry: %s", entry.path)
        except OSError:
            log.debug("Cannot list %s", current)
    return total
