"""Integration tests for S3SubmissionGateway against LocalStack."""

from __future__ import annotations

import asyncio

import pytest

from greenroom.persistence.s3_backend import S3SubmissionGateway
from tests.integration.conftest import LOCALSTACK_URL, skip_no_localstack


@skip_no_localstack
class TestS3GatewayIntegration:
    @pytest.fixture
    def gateway(self, submission_bucket):
        return S3SubmissionGateway(
            bucket=submission_bucket,
            region="us-east-1",
            endpoint_url=LOCALSTACK_URL,
        )

    def test_submission_round_trips(self, gateway):
        receipt = asyncio.run(gateway.submit("payroll_run", {"pay_period": "pp1"}))
        stored = gateway.read(gateway.key_for(receipt))
        assert stored["payload"] == {"pay_period": "pp1"}
        assert stored["reference"] == receipt.reference

    def test_submission_listed_under_kind(self, gateway):
        receipt = asyncio.run(gateway.submit("onboarding", {"email": "a@b.co"}))
        assert gateway.key_for(receipt) in gateway.list_submissions("onboarding")
