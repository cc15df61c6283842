"""Protocol interfaces for the Greenroom persistence boundary.

All inter-layer communication uses these Protocols: structural typing,
no inheritance required, easy to test with isinstance().
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from greenroom.models.submission import SubmissionReceipt


# ---------------------------------------------------------------------------
# Submission Gateway
# ---------------------------------------------------------------------------

@runtime_checkable
class ISubmissionGateway(Protocol):
    """Accepts one payload per user submit action."""

    async def submit(self, kind: str, payload: dict[str, Any]) -> SubmissionReceipt: ...


# ---------------------------------------------------------------------------
# Cache Backend
# ---------------------------------------------------------------------------

@runtime_checkable
class ICacheBackend(Protocol):
    """Redis-compatible cache interface."""

    def get(self, key: str) -> str | None: ...

    def setex(self, key: str, ttl: int, value: str) -> None: ...

    def delete(self, key: str) -> None: ...

    def ping(self) -> bool: ...
