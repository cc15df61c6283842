"""Fixtures for screen tests."""

from __future__ import annotations

import pytest

from greenroom.core.config import AppSettings
from tests.fakes import FakeClock, MemoryCacheBackend, MemorySubmissionGateway


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def gateway():
    return MemorySubmissionGateway()


@pytest.fixture
def deps(clock, gateway):
    return {
        "settings": AppSettings(),
        "gateway": gateway,
        "cache": MemoryCacheBackend(clock=clock),
    }
