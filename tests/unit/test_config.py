"""Tests for configuration defaults and env overrides."""

from __future__ import annotations

from greenroom.core.config import AppSettings, PayrollConfig, S3Config, SubmissionConfig


def test_default_settings():
    settings = AppSettings()
    assert settings.environment == "dev"
    assert settings.submission.backend == "memory"
    assert settings.submission.cache_backend == "memory"


def test_submission_config_defaults():
    config = SubmissionConfig()
    assert config.success_display_seconds == 3
    assert config.simulated_latency_seconds == 1.5


def test_payroll_config_defaults():
    config = PayrollConfig()
    assert config.start_date_lead_days == 3


def test_s3_env_override(monkeypatch):
    monkeypatch.setenv("GREENROOM_S3_BUCKET", "other-bucket")
    monkeypatch.setenv("GREENROOM_S3_ENDPOINT_URL", "http://localhost:4566")
    config = S3Config()
    assert config.bucket == "other-bucket"
    assert config.endpoint_url == "http://localhost:4566"


def test_submission_env_override(monkeypatch):
    monkeypatch.setenv("GREENROOM_SUBMIT_SUCCESS_DISPLAY_SECONDS", "5")
    assert SubmissionConfig().success_display_seconds == 5
