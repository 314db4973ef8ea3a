"""Scan configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ScanOptions:
    """Immutable scan settings passed down every recursive call.

    ``max_depth=-1`` means unlimited depth and ``top=0`` keeps every child.
    """

    max_depth: int = -1
    top: int = 0
    min_size: int = 0
    threads: int = 4

    def __post_init__(self) -> None:
        if self.max_depth < -1:
            raise ValueError(f"max_depth must be -1 or greater, got {self.max_depth}")
        if self.top < 0:
            raise ValueError(f"top must not be negative, got {self.top}")
        if self.min_size < 0:
            raise ValueError(f"min_size must not be negative, got {self.min_size}")
        if self.threads < 1:
            raise ValueError(f"threads must be at least 1, got {self.threads}")

    @property
    def unlimited_depth(self) -> bool:
        return self.max_depth < 0
