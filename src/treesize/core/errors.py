"""Scan errors."""

from __future__ import annotations


class ScanError(Exception):
    """Raised when the scan root itself cannot be accessed."""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(message)
        self.path = path
