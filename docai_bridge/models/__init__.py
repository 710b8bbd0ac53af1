# Models
"""
Pydantic models for the S3 trigger event and the documents flowing
through the extraction pipeline.
"""

from docai_bridge.models.documents import (
    DocumentPayload,
    ExtractionRequest,
    ExtractionResult,
    OutputRecord,
)
from docai_bridge.models.events import (
    InboundEvent,
    S3Bucket,
    S3Entity,
    S3EventNotification,
    S3EventRecord,
    S3Object,
)

__all__ = [
    # Events
    "InboundEvent",
    "S3Bucket",
    "S3Entity",
    "S3EventNotification",
    "S3EventRecord",
    "S3Object",
    # Documents
    "DocumentPayload",
    "ExtractionRequest",
    "ExtractionResult",
    "OutputRecord",
]
