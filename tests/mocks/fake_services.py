"""
In-memory Storage and Extraction Fakes for Testing

Stand-ins for S3DocumentStore and DocumentAIExtractor that satisfy the
DocumentStore / TextExtractor protocols without AWS or Google Cloud.

Usage:
    from tests.mocks.fake_services import FakeDocumentStore, FakeTextExtractor

    store = FakeDocumentStore({("docs", "invoice.pdf"): b"%PDF-1.7"})
    extractor = FakeTextExtractor(text="Hello")
"""

from docai_bridge.exceptions import ExtractionServiceError, NotFoundError
from docai_bridge.models.documents import ExtractionRequest, ExtractionResult, OutputRecord


class FakeDocumentStore:
    """
    Dict-backed DocumentStore.

    Records every fetch and put so tests can assert on call order
    and on what was (or was not) written.
    """

    def __init__(self, objects: dict[tuple[str, str], bytes] | None = None):
        self.objects: dict[tuple[str, str], bytes] = dict(objects or {})
        self.fetches: list[tuple[str, str]] = []
        self.writes: list[tuple[str, OutputRecord]] = []
        self.fetch_error: Exception | None = None
        self.put_error: Exception | None = None

    def fetch(self, bucket: str, key: str) -> bytes:
        self.fetches.append((bucket, key))
        if self.fetch_error:
            raise self.fetch_error
        if (bucket, key) not in self.objects:
            raise NotFoundError(bucket=bucket, key=key)
        return self.objects[(bucket, key)]

    def put(self, bucket: str, record: OutputRecord) -> None:
        if self.put_error:
            raise self.put_error
        self.writes.append((bucket, record))


class FakeTextExtractor:
    """TextExtractor returning fixed text, or raising a configured error."""

    def __init__(self, text: str = "Hello", error: Exception | None = None):
        self.text = text
        self.error = error
        self.requests: list[ExtractionRequest] = []

    def submit(self, request: ExtractionRequest) -> ExtractionResult:
        self.requests.append(request)
        if self.error:
            raise self.error
        if not self.text:
            raise ExtractionServiceError(
                processor_name=request.processor_name,
                error_message="Response contained no document text",
            )
        return ExtractionResult(text=self.text)
