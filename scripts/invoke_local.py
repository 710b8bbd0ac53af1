#!/usr/bin/env python3
"""
Invoke the DocumentTextExtraction handler locally

Builds an S3 ObjectCreated notification for the given bucket/key and runs
lambda_handler in-process against whatever AWS and Google credentials the
environment provides (GOOGLE_* and DOCAI_BRIDGE_* variables, or .env files).

Usage:
    python scripts/invoke_local.py --bucket my-docs --key invoices/invoice.pdf
"""

import argparse
import json
import sys
from pathlib import Path
from types import SimpleNamespace
from urllib.parse import quote_plus
from uuid import uuid4

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import structlog

from docai_bridge.exceptions import DocumentPipelineError
from docai_bridge.models.events import (
    S3Bucket,
    S3Entity,
    S3EventNotification,
    S3EventRecord,
    S3Object,
)
from lambdas.document_text_extraction.handler import lambda_handler

log = structlog.get_logger()


def build_s3_event(bucket: str, key: str, event_name: str = "ObjectCreated:Put") -> dict:
    """Build an S3 notification payload as Lambda would receive it."""
    notification = S3EventNotification(
        records=[
            S3EventRecord(
                event_name=event_name,
                s3=S3Entity(
                    bucket=S3Bucket(name=bucket),
                    s3_object=S3Object(key=quote_plus(key, safe="/")),
                ),
            )
        ]
    )
    return notification.model_dump(by_alias=True, exclude_none=True)


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Run the document text extraction handler for one S3 object",
    )
    parser.add_argument("--bucket", required=True, help="Source bucket name")
    parser.add_argument("--key", required=True, help="Source object key (unencoded)")
    parser.add_argument(
        "--print-event",
        action="store_true",
        help="Print the generated S3 event and exit",
    )
    args = parser.parse_args()

    event = build_s3_event(args.bucket, args.key)

    if args.print_event:
        print(json.dumps(event, indent=2))
        return 0

    context = SimpleNamespace(aws_request_id=f"local-{uuid4()}")

    try:
        response = lambda_handler(event, context)
    except DocumentPipelineError as e:
        log.error("local_invocation_failed", error=str(e), error_type=type(e).__name__)
        return 1

    print(json.dumps(response, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
