"""Shared fixtures."""

from __future__ import annotations

import pytest

from greenroom.core.logging_config import reset_logging


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    reset_logging()
