"""Tests for the submission bucket setup script."""

from __future__ import annotations

import sys
from pathlib import Path

import boto3
import pytest
from moto import mock_aws

# Make scripts/ importable
sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent.parent / "scripts"))

from create_submission_bucket import SUBMISSION_KINDS, create_bucket, create_prefixes  # noqa: E402


@pytest.fixture
def s3():
    with mock_aws():
        yield boto3.client("s3", region_name="us-east-1")


class TestCreateBucket:
    def test_creates_bucket(self, s3):
        assert create_bucket(s3, bucket="gr-test")
        names = [b["Name"] for b in s3.list_buckets()["Buckets"]]
        assert names == ["gr-test"]

    def test_idempotent_skips_existing(self, s3):
        create_bucket(s3, bucket="gr-test")
        assert not create_bucket(s3, bucket="gr-test")

    def test_other_region_sets_location(self):
        with mock_aws():
            client = boto3.client("s3", region_name="eu-west-1")
            create_bucket(client, bucket="gr-eu", region="eu-west-1")
            location = client.get_bucket_location(Bucket="gr-eu")["LocationConstraint"]
            assert location == "eu-west-1"


class TestCreatePrefixes:
    def test_one_marker_per_kind(self, s3):
        create_bucket(s3, bucket="gr-test")
        keys = create_prefixes(s3, bucket="gr-test")
        assert len(keys) == len(SUBMISSION_KINDS)
        listed = s3.list_objects_v2(Bucket="gr-test", Prefix="submissions/")["KeyCount"]
        assert listed == len(SUBMISSION_KINDS)
