"""
DocumentTextExtraction Lambda Handler

Main entry point for extracting text from documents uploaded to S3.

Trigger: S3 ObjectCreated notification
Output: processed_text/{key without extension}.txt in the same bucket

Flow:
1. Parse the bucket and key from Records[0]
2. Load Document AI processor identity and credentials
3. Fetch the source object from S3
4. Collect the object body into a single payload
5. Resolve the MIME type from the key
6. Build and submit the Document AI process request
7. Derive the output key and save the text as text/plain
8. Return a success acknowledgment with the output key

Every step fails fast; errors are logged and re-raised to the Lambda
runtime, which owns retries and dead-lettering.
"""

import json
import logging
import time
from typing import Any

import structlog
from pydantic import ValidationError

from docai_bridge.config import ProcessorConfig, get_settings, load_processor_config
from docai_bridge.exceptions import DocumentPipelineError, MalformedEventError
from docai_bridge.models.documents import DocumentPayload, ExtractionResult, OutputRecord
from docai_bridge.models.events import InboundEvent, S3EventRecord
from docai_bridge.tools.document_ai import DocumentAIExtractor, TextExtractor
from docai_bridge.tools.s3 import DocumentStore, S3DocumentStore
from lambdas.document_text_extraction.document_processor import (
    build_extraction_request,
    derive_output_key,
    resolve_mime_type,
)

# Configure structured logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)

log = structlog.get_logger()


def _format_validation_error(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in error.errors()
    )


def parse_inbound_event(event: Any) -> InboundEvent:
    """
    Extract the bucket and key from an S3 event notification.

    Only Records[0] is consulted.

    Args:
        event: Lambda event payload

    Returns:
        InboundEvent with the decoded object key

    Raises:
        MalformedEventError: If Records is missing or bucket/key are absent
    """
    if not isinstance(event, dict):
        raise MalformedEventError(reason=f"expected an object, got {type(event).__name__}")

    records = event.get("Records")
    if not isinstance(records, list) or not records:
        raise MalformedEventError(reason="no Records in event")

    try:
        record = S3EventRecord.model_validate(records[0])
    except ValidationError as e:
        raise MalformedEventError(reason=_format_validation_error(e)) from e

    return InboundEvent.from_record(record)


class DocumentExtractionPipeline:
    """
    Ordered fetch -> extract -> persist steps for a single document.

    Each step raises on failure, so process() stops at the first error
    and nothing is written unless extraction succeeded.
    """

    def __init__(
        self,
        config: ProcessorConfig,
        store: DocumentStore,
        extractor: TextExtractor,
    ) -> None:
        self.config = config
        self.store = store
        self.extractor = extractor

    def fetch_document(self, inbound: InboundEvent) -> DocumentPayload:
        content = self.store.fetch(inbound.bucket, inbound.key)
        return DocumentPayload(
            content=content,
            mime_type=resolve_mime_type(inbound.key),
        )

    def extract_text(self, payload: DocumentPayload) -> ExtractionResult:
        request = build_extraction_request(
            project_id=self.config.project_id,
            location=self.config.location,
            processor_id=self.config.processor_id,
            content=payload.content,
            mime_type=payload.mime_type,
        )
        return self.extractor.submit(request)

    def persist_text(self, inbound: InboundEvent, result: ExtractionResult) -> OutputRecord:
        record = OutputRecord(
            key=derive_output_key(inbound.key),
            body=result.text,
        )
        self.store.put(inbound.bucket, record)
        return record

    def process(self, inbound: InboundEvent) -> OutputRecord:
        """
        Run all steps for one inbound document.

        Returns:
            The OutputRecord written to S3
        """
        payload = self.fetch_document(inbound)

        log.info(
            "processing_document",
            s3_uri=inbound.s3_uri,
            mime_type=payload.mime_type,
            size_bytes=payload.size_bytes,
        )

        result = self.extract_text(payload)
        return self.persist_text(inbound, result)


def _build_pipeline(config: ProcessorConfig) -> DocumentExtractionPipeline:
    return DocumentExtractionPipeline(
        config=config,
        store=S3DocumentStore(),
        extractor=DocumentAIExtractor.from_config(config),
    )


def lambda_handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """
    AWS Lambda entry point for document text extraction.

    Args:
        event: S3 event notification
        context: Lambda execution context

    Returns:
        {"statusCode": 200, "body": <JSON string naming the output key>}

    Raises:
        DocumentPipelineError: Any step failure, unchanged
        Exception: Anything unexpected, logged with its traceback and re-raised
    """
    start_time = time.time()

    settings = get_settings()
    logging.getLogger().setLevel(settings.log_level)

    records = event.get("Records") if isinstance(event, dict) else None
    log.info(
        "lambda_invoked",
        request_id=getattr(context, "aws_request_id", None),
        environment=settings.environment,
        record_count=len(records) if isinstance(records, list) else 0,
    )

    try:
        inbound = parse_inbound_event(event)
        config = load_processor_config()
        pipeline = _build_pipeline(config)
        record = pipeline.process(inbound)
    except DocumentPipelineError as e:
        log.exception(
            "document_processing_failed",
            error=str(e),
            error_type=type(e).__name__,
        )
        raise

    except Exception as e:
        log.exception("unexpected_error", error=str(e), error_type=type(e).__name__)
        raise

    duration_ms = int((time.time() - start_time) * 1000)

    log.info(
        "extracted_text_saved",
        bucket=inbound.bucket,
        source_key=inbound.key,
        output_key=record.key,
        duration_ms=duration_ms,
    )

    return {
        "statusCode": 200,
        "body": json.dumps(f"Document processed and saved successfully to {record.key}."),
    }
