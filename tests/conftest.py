"""
Pytest Configuration and Shared Fixtures

Provides moto S3 mocking, sample S3 events, processor configuration
and in-memory fakes for the extraction pipeline.
"""

import json
import os
from typing import Any, Callable

import boto3
import pytest
from moto import mock_aws

# Set test environment before importing application modules
os.environ["DOCAI_BRIDGE_AWS_REGION"] = "us-west-2"
os.environ["DOCAI_BRIDGE_ENVIRONMENT"] = "development"
os.environ["DOCAI_BRIDGE_LOG_LEVEL"] = "DEBUG"
os.environ["AWS_DEFAULT_REGION"] = "us-west-2"
os.environ["AWS_ACCESS_KEY_ID"] = "testing"
os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
os.environ["GOOGLE_PROJECT_ID"] = "test-project"
os.environ["GOOGLE_LOCATION"] = "us"
os.environ["GOOGLE_PROCESSOR_ID"] = "test-processor"
os.environ["GOOGLE_CREDENTIALS"] = json.dumps({
    "type": "service_account",
    "project_id": "test-project",
    "client_email": "docai@test-project.iam.gserviceaccount.com",
})

from docai_bridge.config import ProcessorConfig
from tests.mocks.fake_services import FakeDocumentStore, FakeTextExtractor


TEST_BUCKET = "docs"


# --- AWS Mocking Fixtures ---


@pytest.fixture
def aws_credentials():
    """Mock AWS credentials for moto."""
    return {
        "aws_access_key_id": "testing",
        "aws_secret_access_key": "testing",
        "region_name": "us-west-2",
    }


@pytest.fixture
def mock_s3(aws_credentials):
    """Create a mocked S3 bucket named 'docs'."""
    with mock_aws():
        s3 = boto3.client("s3", **aws_credentials)
        s3.create_bucket(
            Bucket=TEST_BUCKET,
            CreateBucketConfiguration={"LocationConstraint": "us-west-2"},
        )
        yield s3


# --- Configuration Fixtures ---


@pytest.fixture
def processor_config() -> ProcessorConfig:
    """Processor identity used by the examples: p / us / proc."""
    return ProcessorConfig(
        project_id="p",
        location="us",
        processor_id="proc",
        credentials={"type": "service_account"},
    )


# --- Event Fixtures ---


@pytest.fixture
def make_s3_event() -> Callable[..., dict[str, Any]]:
    """Factory for S3 ObjectCreated notifications."""

    def _make(bucket: str = TEST_BUCKET, key: str = "invoice.pdf", size: int = 1024) -> dict[str, Any]:
        return {
            "Records": [
                {
                    "eventVersion": "2.1",
                    "eventSource": "aws:s3",
                    "awsRegion": "us-west-2",
                    "eventTime": "2025-02-06T00:00:00.000Z",
                    "eventName": "ObjectCreated:Put",
                    "s3": {
                        "s3SchemaVersion": "1.0",
                        "configurationId": "document-uploaded",
                        "bucket": {
                            "name": bucket,
                            "arn": f"arn:aws:s3:::{bucket}",
                        },
                        "object": {
                            "key": key,
                            "size": size,
                            "eTag": "0123456789abcdef0123456789abcdef",
                        },
                    },
                }
            ]
        }

    return _make


@pytest.fixture
def s3_event(make_s3_event) -> dict[str, Any]:
    """Notification for docs/invoice.pdf."""
    return make_s3_event()


# --- Fake Service Fixtures ---


@pytest.fixture
def pdf_bytes() -> bytes:
    """Small stand-in for PDF content."""
    return b"%PDF-1.7\n1 0 obj\n<< /Type /Catalog >>\nendobj\n%%EOF\n"


@pytest.fixture
def fake_store(pdf_bytes) -> FakeDocumentStore:
    """In-memory store holding docs/invoice.pdf."""
    return FakeDocumentStore({(TEST_BUCKET, "invoice.pdf"): pdf_bytes})


@pytest.fixture
def fake_extractor() -> FakeTextExtractor:
    """Extractor that returns 'Hello'."""
    return FakeTextExtractor(text="Hello")
