"""In-memory backends: dict-backed gateway and cache for local runs and tests."""

from __future__ import annotations

import asyncio
import time
from typing import Any, Callable

from greenroom.core.exceptions import SubmissionError
from greenroom.models.submission import SubmissionReceipt


class MemorySubmissionGateway:
    """List-backed ISubmissionGateway.

    ``latency`` simulates the round trip; ``fail_with`` makes every submit
    raise SubmissionError with that message.
    """

    def __init__(self, latency: float = 0.0, fail_with: str | None = None) -> None:
        self._latency = latency
        self.fail_with = fail_with
        self.submissions: list[tuple[str, dict[str, Any], SubmissionReceipt]] = []

    async def submit(self, kind: str, payload: dict[str, Any]) -> SubmissionReceipt:
        if self._latency:
            await asyncio.sleep(self._latency)
        if self.fail_with is not None:
            raise SubmissionError(f"Submission of {kind!r} failed: {self.fail_with}")
        receipt = SubmissionReceipt(kind=kind)
        receipt.location = f"memory://{kind}/{receipt.reference}"
        self.submissions.append((kind, payload, receipt))
        return receipt

    def payloads(self, kind: str) -> list[dict[str, Any]]:
        return [payload for k, payload, _ in self.submissions if k == kind]


class MemoryCacheBackend:
    """Dict-backed ICacheBackend honouring TTLs against an injectable clock."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._store: dict[str, tuple[str, float]] = {}

    def get(self, key: str) -> str | None:
        entry = self._store.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if self._clock() >= expires_at:
            del self._store[key]
            return None
        return value

    def setex(self, key: str, ttl: int, value: str) -> None:
        self._store[key] = (value, self._clock() + ttl)

    def delete(self, key: str) -> None:
        self._store.pop(key, None)

    def ping(self) -> bool:
        return True
