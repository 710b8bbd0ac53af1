"""
Custom Exceptions for the Document Text Extraction Pipeline

Every failure aborts the invocation and propagates to the Lambda runtime.
Each exception carries the context needed for debugging and logging.
"""

from dataclasses import dataclass
from typing import Any


class DocumentPipelineError(Exception):
    """Base exception for the document text extraction pipeline."""

    def __init__(self, message: str, **context: Any) -> None:
        self.message = message
        self.context = context
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


@dataclass
class MalformedEventError(DocumentPipelineError):
    """Trigger event does not have the expected S3 notification shape."""

    reason: str

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(
            f"Malformed S3 event: {reason}",
            reason=reason,
        )


@dataclass
class ConfigurationError(DocumentPipelineError):
    """Processor identity or credentials are missing or invalid."""

    setting: str
    error_message: str | None = None

    def __init__(
        self,
        setting: str,
        error_message: str | None = None,
    ) -> None:
        self.setting = setting
        self.error_message = error_message
        super().__init__(
            f"Invalid configuration for '{setting}': {error_message or 'value is missing'}",
            setting=setting,
            error_message=error_message,
        )


@dataclass
class StorageAccessError(DocumentPipelineError):
    """Reading the source document from S3 failed."""

    bucket: str
    key: str
    error_message: str | None = None

    def __init__(
        self,
        bucket: str,
        key: str,
        error_message: str | None = None,
    ) -> None:
        self.bucket = bucket
        self.key = key
        self.error_message = error_message
        super().__init__(
            f"S3 read failed for s3://{bucket}/{key}: {error_message or 'Unknown error'}",
            bucket=bucket,
            key=key,
            error_message=error_message,
        )


@dataclass
class NotFoundError(StorageAccessError):
    """Source document does not exist in S3."""

    def __init__(
        self,
        bucket: str,
        key: str,
        error_message: str | None = None,
    ) -> None:
        super().__init__(
            bucket=bucket,
            key=key,
            error_message=error_message or "Object not found",
        )


@dataclass
class StreamReadError(DocumentPipelineError, IOError):
    """Object body stream ended with a transport-level error."""

    bytes_read: int
    error_message: str | None = None

    def __init__(
        self,
        bytes_read: int,
        error_message: str | None = None,
    ) -> None:
        self.bytes_read = bytes_read
        self.error_message = error_message
        super().__init__(
            f"Stream read failed after {bytes_read} bytes: {error_message or 'Unknown error'}",
            bytes_read=bytes_read,
            error_message=error_message,
        )


@dataclass
class ExtractionServiceError(DocumentPipelineError):
    """Document AI call failed or returned no usable text."""

    processor_name: str
    error_code: str | None = None
    error_message: str | None = None

    def __init__(
        self,
        processor_name: str,
        error_code: str | None = None,
        error_message: str | None = None,
    ) -> None:
        self.processor_name = processor_name
        self.error_code = error_code
        self.error_message = error_message
        super().__init__(
            f"Document AI extraction failed for '{processor_name}': "
            f"{error_message or 'Unknown error'}",
            processor_name=processor_name,
            error_code=error_code,
            error_message=error_message,
        )


@dataclass
class StorageWriteError(DocumentPipelineError):
    """Writing the extracted text to S3 failed."""

    bucket: str
    key: str
    error_message: str | None = None

    def __init__(
        self,
        bucket: str,
        key: str,
        error_message: str | None = None,
    ) -> None:
        self.bucket = bucket
        self.key = key
        self.error_message = error_message
        super().__init__(
            f"S3 write failed for s3://{bucket}/{key}: {error_message or 'Unknown error'}",
            bucket=bucket,
            key=key,
            error_message=error_message,
        )
