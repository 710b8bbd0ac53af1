"""
DocumentTextExtraction Lambda

Triggered by S3 ObjectCreated notifications.
Sends the new document to Google Document AI and stores the extracted text.

Trigger: S3 bucket notification
Output: processed_text/{key without extension}.txt (text/plain) in the same bucket

Flow:
1. Parse the S3 notification
2. Fetch the document from S3
3. Resolve its MIME type and call Document AI
4. Save the extracted text back to S3
"""

from lambdas.document_text_extraction.document_processor import (
    build_extraction_request,
    derive_output_key,
    resolve_mime_type,
)
from lambdas.document_text_extraction.handler import (
    DocumentExtractionPipeline,
    lambda_handler,
    parse_inbound_event,
)

__all__ = [
    "lambda_handler",
    "DocumentExtractionPipeline",
    "parse_inbound_event",
    "build_extraction_request",
    "derive_output_key",
    "resolve_mime_type",
]
