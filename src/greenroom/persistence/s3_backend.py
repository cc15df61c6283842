"""S3 submission backend implementing ISubmissionGateway."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

import boto3
from botocore.exceptions import ClientError

from greenroom.core.exceptions import SubmissionError
from greenroom.models.submission import SubmissionReceipt

logger = logging.getLogger(__name__)


class S3SubmissionGateway:
    """Production ISubmissionGateway that stores each payload as a JSON object in S3."""

    def __init__(self, bucket: str, prefix: str = "submissions/", region: str = "us-east-1",
                 endpoint_url: str | None = None) -> None:
        self._bucket = bucket
        self._prefix = prefix
        self._region = region
        self._endpoint_url = endpoint_url
        kwargs: dict = {"region_name": region}
        if endpoint_url:
            kwargs["endpoint_url"] = endpoint_url
        self._client = boto3.client("s3", **kwargs)

    def key_for(self, receipt: SubmissionReceipt) -> str:
        return f"{self._prefix}{receipt.kind}/{receipt.reference}.json"

    def _put(self, key: str, body: bytes) -> None:
        try:
            self._client.put_object(
                Bucket=self._bucket, Key=key, Body=body, ContentType="application/json",
            )
        except ClientError as exc:
            raise SubmissionError(f"S3 write failed for {key!r}: {exc}") from exc

    async def submit(self, kind: str, payload: dict[str, Any]) -> SubmissionReceipt:
        receipt = SubmissionReceipt(kind=kind)
        key = self.key_for(receipt)
        document = {
            "kind": kind,
            "reference": receipt.reference,
            "submitted_at": receipt.submitted_at.isoformat(),
            "payload": payload,
        }
        body = json.dumps(document, default=str).encode()
        await asyncio.to_thread(self._put, key, body)
        receipt.location = f"s3://{self._bucket}/{key}"
        logger.info("Stored submission", extra={"kind": kind, "key": key})
        return receipt

    def read(self, key: str) -> dict[str, Any]:
        try:
            resp = self._client.get_object(Bucket=self._bucket, Key=key)
            return json.loads(resp["Body"].read())
        except ClientError as exc:
            raise SubmissionError(f"S3 read failed for {key!r}: {exc}") from exc

    def list_submissions(self, kind: str) -> list[str]:
        try:
            keys: list[str] = []
            paginator = self._client.get_paginator("list_objects_v2")
            for page in paginator.paginate(Bucket=self._bucket, Prefix=f"{self._prefix}{kind}/"):
                for obj in page.get("Contents", []):
                    keys.append(obj["Key"])
            return keys
        except ClientError as exc:
            raise SubmissionError(f"S3 list failed for kind={kind!r}: {exc}") from exc
