"""
Document Models

Request-scoped values passed between the pipeline steps:
DocumentPayload -> ExtractionRequest -> ExtractionResult -> OutputRecord.
"""

import base64
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class DocumentPayload(BaseModel):
    """Fetched document bytes plus the MIME type inferred from the key."""

    model_config = ConfigDict(frozen=True)

    content: bytes
    mime_type: str = Field(..., min_length=1)

    @property
    def size_bytes(self) -> int:
        return len(self.content)


class ExtractionRequest(BaseModel):
    """Document AI process request for a single raw document."""

    model_config = ConfigDict(frozen=True)

    processor_name: str = Field(
        ...,
        pattern=r"^projects/[^/]+/locations/[^/]+/processors/[^/]+$",
        description="Fully-qualified processor resource name",
    )
    raw_content: str = Field(..., description="Base64-encoded document bytes")
    mime_type: str = Field(..., min_length=1)

    @property
    def content(self) -> bytes:
        """Document bytes, as the Python SDK expects them."""
        return base64.b64decode(self.raw_content)


class ExtractionResult(BaseModel):
    """Text extracted by the remote processor."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(..., min_length=1)


class OutputRecord(BaseModel):
    """Object written back to S3 with the extracted text."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., min_length=1)
    body: str
    content_type: Literal["text/plain"] = "text/plain"
