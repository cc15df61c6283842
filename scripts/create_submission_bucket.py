"""Create the S3 bucket that receives screen, onboarding and payroll submissions.

Usage:
    python scripts/create_submission_bucket.py --endpoint-url http://localhost:4566
"""

from __future__ import annotations

import argparse
from typing import Any

import boto3

DEFAULT_BUCKET = "greenroom-submissions"
SUBMISSION_KINDS: list[str] = [
    "company_information",
    "payroll_details",
    "terms_review",
    "account_activation",
    "bank_setup",
    "union_setup",
    "signature_setup",
    "onboarding",
    "onboarding_invitation",
    "payroll_run",
]


def create_bucket(s3: Any, bucket: str = DEFAULT_BUCKET, region: str = "us-east-1") -> bool:
    """Create ``bucket``. Returns False if it already exists."""
    existing = [b["Name"] for b in s3.list_buckets().get("Buckets", [])]
    if bucket in existing:
        print(f"  Bucket {bucket} already exists, skipping")
        return False
    kwargs: dict[str, Any] = {"Bucket": bucket}
    # us-east-1 rejects an explicit location constraint
    if region != "us-east-1":
        kwargs["CreateBucketConfiguration"] = {"LocationConstraint": region}
    s3.create_bucket(**kwargs)
    print(f"  Created bucket {bucket}")
    return True


def create_prefixes(s3: Any, bucket: str = DEFAULT_BUCKET, prefix: str = "submissions/") -> list[str]:
    """Write an empty marker object under each submission kind's prefix."""
    keys = [f"{prefix}{kind}/" for kind in SUBMISSION_KINDS]
    for key in keys:
        s3.put_object(Bucket=bucket, Key=key, Body=b"")
    print(f"  Created {len(keys)} submission prefixes")
    return keys


def main() -> None:
    parser = argparse.ArgumentParser(description="Create the Greenroom submission bucket")
    parser.add_argument("--endpoint-url", default=None, help="S3 endpoint (e.g. http://localhost:4566)")
    parser.add_argument("--bucket", default=DEFAULT_BUCKET, help="Bucket name")
    parser.add_argument("--prefix", default="submissions/", help="Key prefix for submissions")
    parser.add_argument("--region", default="us-east-1", help="AWS region")
    args = parser.parse_args()

    kwargs: dict[str, Any] = {"region_name": args.region}
    if args.endpoint_url:
        kwargs["endpoint_url"] = args.endpoint_url

    s3 = boto3.client("s3", **kwargs)

    print("Creating bucket...")
    create_bucket(s3, bucket=args.bucket, region=args.region)

    print("Creating prefixes...")
    create_prefixes(s3, bucket=args.bucket, prefix=args.prefix)

    print("Done!")


if __name__ == "__main__":
    main()
