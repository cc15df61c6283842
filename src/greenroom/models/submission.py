"""Receipts returned by the submission gateway."""

from __future__ import annotations

from datetime import UTC, datetime
from uuid import uuid4

from pydantic import BaseModel, Field


class SubmissionReceipt(BaseModel):
    """Acknowledgement for one accepted payload."""

    kind: str
    reference: str = Field(default_factory=lambda: uuid4().hex)
    submitted_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    location: str = ""  # storage key for durable backends
