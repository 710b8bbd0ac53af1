"""
Integration test fixtures and configuration.

Integration tests run the Lambda handler against moto-backed S3,
with Document AI replaced by an in-memory extractor.
"""

from unittest.mock import patch

import boto3
import pytest
from moto import mock_aws

from tests.mocks.fake_services import FakeTextExtractor

INTEGRATION_BUCKET = "docs"


@pytest.fixture
def integration_s3():
    """
    Mocked S3 with the 'docs' bucket.

    The handler builds its own boto3 client, which moto intercepts
    for as long as this fixture is active.
    """
    with mock_aws():
        s3 = boto3.client("s3", region_name="us-west-2")
        s3.create_bucket(
            Bucket=INTEGRATION_BUCKET,
            CreateBucketConfiguration={"LocationConstraint": "us-west-2"},
        )
        yield s3


@pytest.fixture
def document_ai_stub():
    """
    Replace the Document AI client with a FakeTextExtractor.

    Yields the extractor so tests can set its text or error.
    """
    extractor = FakeTextExtractor(text="Hello")
    with patch(
        "lambdas.document_text_extraction.handler.DocumentAIExtractor.from_config",
        return_value=extractor,
    ):
        yield extractor
