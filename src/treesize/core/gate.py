"""Global limiter for concurrent filesystem work during a scan."""

from __future__ import annotations

import asyncio


class AdmissionGate:
    """Counting permit pool shared by every task of one scan.

    Use as ``async with gate:``.  The slot is released when the block exits,
    whether it finished normally, raised or was cancelled.
    """

    def __init__(self, limit: int) -> None:
        if limit < 1:
            raise ValueError(f"limit must be at least 1, got {limit}")
        self.limit = limit
        self._semaphore = asyncio.Semaphore(limit)
        self._in_flight = 0
        self._peak = 0

    @property
    def in_flight(self) -> int:
        """Number of slots currently held."""
        return self._in_flight

    @property
    def peak(self) -> int:
        """Highest number of slots held at the same time so far."""
        return self._peak

    async def __aenter__(self) -> AdmissionGate:
        await self._semaphore.acquire()
        self._in_flight += 1
        self._peak = max(self._peak, self._in_flight)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self._in_flight -= 1
        self._semaphore.release()
