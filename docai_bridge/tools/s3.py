"""
S3 Tools

Fetch source documents from S3 and write extracted text back.
Failures are translated into pipeline exceptions at this boundary.
"""

from collections.abc import Iterable
from typing import Protocol

import boto3
from botocore.exceptions import BotoCoreError, ClientError
import structlog

from docai_bridge.config import get_settings
from docai_bridge.exceptions import (
    NotFoundError,
    StorageAccessError,
    StorageWriteError,
    StreamReadError,
)
from docai_bridge.models.documents import OutputRecord

log = structlog.get_logger()

NOT_FOUND_CODES = frozenset({"NoSuchKey", "NoSuchBucket", "404"})


class DocumentStore(Protocol):
    """Storage operations the pipeline needs."""

    def fetch(self, bucket: str, key: str) -> bytes:
        ...

    def put(self, bucket: str, record: OutputRecord) -> None:
        ...


def _get_client():
    """Get S3 client."""
    settings = get_settings()
    return boto3.client("s3", **settings.s3_config)


def collect_stream(chunks: Iterable[bytes | bytearray | memoryview | Iterable[int]]) -> bytes:
    """
    Drain a lazily produced sequence of chunks into one payload.

    Chunks may be bytes, bytearray, memoryview or any sequence of ints;
    each is normalized with bytes() before concatenation. The whole
    payload is buffered in memory.

    Args:
        chunks: Iterable of byte-like chunks, in order

    Returns:
        Concatenated payload

    Raises:
        StreamReadError: If the underlying stream fails mid-read
    """
    parts: list[bytes] = []
    bytes_read = 0

    try:
        for chunk in chunks:
            data = bytes(chunk)
            parts.append(data)
            bytes_read += len(data)
    except (BotoCoreError, OSError) as e:
        log.error(
            "stream_read_failed",
            bytes_read=bytes_read,
            error=str(e),
        )
        raise StreamReadError(bytes_read=bytes_read, error_message=str(e)) from e

    return b"".join(parts)


class S3DocumentStore:
    """DocumentStore backed by an S3 client."""

    def __init__(self, client=None) -> None:
        self._client = client or _get_client()

    def fetch(self, bucket: str, key: str) -> bytes:
        """
        Download an object and collect its body.

        Args:
            bucket: S3 bucket name
            key: S3 object key (decoded)

        Returns:
            Object content as bytes

        Raises:
            NotFoundError: If the bucket or key does not exist
            StorageAccessError: If the get fails for any other reason
            StreamReadError: If the body stream fails while reading
        """
        log.info("fetching_document", bucket=bucket, key=key)

        try:
            response = self._client.get_object(Bucket=bucket, Key=key)
        except ClientError as e:
            error_code = e.response.get("Error", {}).get("Code")

            if error_code in NOT_FOUND_CODES:
                log.warning("document_not_found", bucket=bucket, key=key, error_code=error_code)
                raise NotFoundError(bucket=bucket, key=key, error_message=str(e)) from e

            log.error("s3_get_failed", bucket=bucket, key=key, error_code=error_code, error=str(e))
            raise StorageAccessError(bucket=bucket, key=key, error_message=str(e)) from e
        except BotoCoreError as e:
            log.error("s3_get_failed", bucket=bucket, key=key, error=str(e))
            raise StorageAccessError(bucket=bucket, key=key, error_message=str(e)) from e

        body = response["Body"]
        try:
            content = collect_stream(body.iter_chunks())
        finally:
            body.close()

        log.info(
            "document_fetched",
            bucket=bucket,
            key=key,
            size_bytes=len(content),
        )

        return content

    def put(self, bucket: str, record: OutputRecord) -> None:
        """
        Write an output record as a text object.

        Args:
            bucket: Destination bucket
            record: Key, body and content type to write

        Raises:
            StorageWriteError: If the put fails
        """
        log.info(
            "saving_extracted_text",
            bucket=bucket,
            key=record.key,
            content_type=record.content_type,
        )

        try:
            self._client.put_object(
                Bucket=bucket,
                Key=record.key,
                Body=record.body.encode("utf-8"),
                ContentType=record.content_type,
            )
        except (ClientError, BotoCoreError) as e:
            log.error(
                "s3_put_failed",
                bucket=bucket,
                key=record.key,
                error=str(e),
            )
            raise StorageWriteError(bucket=bucket, key=record.key, error_message=str(e)) from e
