"""Request dependencies resolved from application state."""

from __future__ import annotations

from fastapi import Request

from greenroom.core.config import AppSettings
from greenroom.core.protocols import ICacheBackend, ISubmissionGateway


def get_settings(request: Request) -> AppSettings:
    return request.app.state.settings


def get_gateway(request: Request) -> ISubmissionGateway:
    return request.app.state.gateway


def get_cache(request: Request) -> ICacheBackend:
    return request.app.state.cache
