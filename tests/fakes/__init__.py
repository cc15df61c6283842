"""Shared test doubles: a fake clock and the memory backends."""

from __future__ import annotations

from greenroom.persistence.memory_backend import MemoryCacheBackend, MemorySubmissionGateway


class FakeClock:
    """Manually advanced clock for TTL tests."""

    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


__all__ = ["FakeClock", "MemoryCacheBackend", "MemorySubmissionGateway"]
