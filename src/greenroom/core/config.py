"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class SubmissionConfig(BaseSettings):
    """Submission gateway configuration."""

    model_config = {"env_prefix": "GREENROOM_SUBMIT_"}

    backend: Literal["memory", "s3"] = "memory"
    simulated_latency_seconds: float = 1.5  # matches the screens' save spinner
    success_display_seconds: int = 3
    cache_backend: Literal["memory", "redis"] = "memory"


class RedisConfig(BaseSettings):
    """Redis cache configuration."""

    model_config = {"env_prefix": "GREENROOM_REDIS_"}

    host: str = "localhost"
    port: int = 6379
    db: int = 0
    decode_responses: bool = True
    key_prefix: str = "greenroom:"


class S3Config(BaseSettings):
    """S3 submission storage configuration."""

    model_config = {"env_prefix": "GREENROOM_S3_"}

    bucket: str = "greenroom-submissions"
    prefix: str = "submissions/"
    region: str = "us-east-1"
    endpoint_url: str | None = None  # LocalStack override


class WizardConfig(BaseSettings):
    """Onboarding wizard behaviour."""

    model_config = {"env_prefix": "GREENROOM_WIZARD_"}

    enforce_validation: bool = False
    invitation_send_seconds: float = 1.5


class PayrollConfig(BaseSettings):
    """Payroll scheduling configuration."""

    model_config = {"env_prefix": "GREENROOM_PAYROLL_"}

    start_date_lead_days: int = 3
    run_submit_seconds: float = 2.0


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "GREENROOM_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"

    submission: SubmissionConfig = SubmissionConfig()
    redis: RedisConfig = RedisConfig()
    s3: S3Config = S3Config()
    wizard: WizardConfig = WizardConfig()
    payroll: PayrollConfig = PayrollConfig()
