"""Health check endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from greenroom.api.deps import get_cache, get_settings
from greenroom.core.config import AppSettings
from greenroom.core.exceptions import CacheError
from greenroom.core.protocols import ICacheBackend

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "healthy"}


@router.get("/ready")
async def ready(
    settings: AppSettings = Depends(get_settings),
    cache: ICacheBackend = Depends(get_cache),
) -> dict[str, str]:
    try:
        reachable = cache.ping()
    except CacheError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc
    if not reachable:
        raise HTTPException(status_code=503, detail="Cache did not answer ping")
    return {"status": "ready", "environment": settings.environment}
