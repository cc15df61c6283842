"""Pluggable persistence backends behind Protocol interfaces."""

from __future__ import annotations

from greenroom.core.config import AppSettings
from greenroom.core.protocols import ICacheBackend, ISubmissionGateway
from greenroom.persistence.memory_backend import MemoryCacheBackend, MemorySubmissionGateway
from greenroom.persistence.redis_backend import RedisCacheBackend
from greenroom.persistence.s3_backend import S3SubmissionGateway


def create_persistence(
    settings: AppSettings | None = None,
) -> tuple[ISubmissionGateway, ICacheBackend]:
    """Create wired-up persistence backends from application settings.

    Returns:
        Tuple of (gateway, cache).
    """
    if settings is None:
        settings = AppSettings()

    if settings.submission.cache_backend == "redis":
        cache: ICacheBackend = RedisCacheBackend.from_config(settings.redis)
    else:
        cache = MemoryCacheBackend()

    if settings.submission.backend == "s3":
        gateway: ISubmissionGateway = S3SubmissionGateway(
            bucket=settings.s3.bucket,
            prefix=settings.s3.prefix,
            region=settings.s3.region,
            endpoint_url=settings.s3.endpoint_url,
        )
    else:
        gateway = MemorySubmissionGateway(latency=settings.submission.simulated_latency_seconds)

    return gateway, cache
