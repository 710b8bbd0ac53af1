"""
Document AI Tools

Submits raw documents to a Google Document AI processor and returns the
extracted text. Uses the online (synchronous) process API only.
"""

from typing import Protocol

from google.api_core.client_options import ClientOptions
from google.api_core.exceptions import GoogleAPIError
from google.auth.exceptions import GoogleAuthError
from google.cloud import documentai_v1 as documentai
from google.oauth2 import service_account
import structlog

from docai_bridge.config import ProcessorConfig, get_settings
from docai_bridge.exceptions import ConfigurationError, ExtractionServiceError
from docai_bridge.models.documents import ExtractionRequest, ExtractionResult

log = structlog.get_logger()


class TextExtractor(Protocol):
    """Remote text extraction the pipeline needs."""

    def submit(self, request: ExtractionRequest) -> ExtractionResult:
        ...


def _api_endpoint(location: str | None) -> str | None:
    """Regional endpoint for a processor location, unless overridden."""
    override = get_settings().documentai_endpoint
    if override:
        return override
    if location:
        return f"{location}-documentai.googleapis.com"
    return None


def _get_client(config: ProcessorConfig):
    """
    Build a Document AI client from the service account in the config.

    Raises:
        ConfigurationError: If the credentials are rejected by google-auth
    """
    try:
        credentials = service_account.Credentials.from_service_account_info(config.credentials)
    except (ValueError, GoogleAuthError) as e:
        raise ConfigurationError(
            setting="GOOGLE_CREDENTIALS",
            error_message=f"not a usable service account: {e}",
        ) from e

    endpoint = _api_endpoint(config.location)
    client_options = ClientOptions(api_endpoint=endpoint) if endpoint else None

    return documentai.DocumentProcessorServiceClient(
        credentials=credentials,
        client_options=client_options,
    )


class DocumentAIExtractor:
    """TextExtractor backed by DocumentProcessorServiceClient."""

    def __init__(self, client) -> None:
        self._client = client

    @classmethod
    def from_config(cls, config: ProcessorConfig) -> "DocumentAIExtractor":
        return cls(_get_client(config))

    def submit(self, request: ExtractionRequest) -> ExtractionResult:
        """
        Process a raw document and return its text.

        Args:
            request: Processor name plus base64 document content

        Returns:
            ExtractionResult with the full document text

        Raises:
            ExtractionServiceError: If the call fails or no text comes back
        """
        process_request = documentai.ProcessRequest(
            name=request.processor_name,
            raw_document=documentai.RawDocument(
                content=request.content,
                mime_type=request.mime_type,
            ),
        )

        log.info(
            "submitting_document",
            processor_name=request.processor_name,
            mime_type=request.mime_type,
        )

        try:
            response = self._client.process_document(request=process_request)
        except (GoogleAPIError, GoogleAuthError) as e:
            error_code = getattr(e, "code", None)
            log.error(
                "documentai_process_failed",
                processor_name=request.processor_name,
                error_code=error_code,
                error=str(e),
            )
            raise ExtractionServiceError(
                processor_name=request.processor_name,
                error_code=str(error_code) if error_code is not None else None,
                error_message=str(e),
            ) from e

        document = getattr(response, "document", None)
        text = getattr(document, "text", None) if document is not None else None

        # TODO: decide with downstream consumers whether blank documents should
        # produce an empty .txt instead of failing the invocation.
        if not text:
            log.error(
                "documentai_empty_result",
                processor_name=request.processor_name,
                has_document=document is not None,
            )
            raise ExtractionServiceError(
                processor_name=request.processor_name,
                error_message="Response contained no document text",
            )

        log.info(
            "text_extracted",
            processor_name=request.processor_name,
            text_length=len(text),
        )

        return ExtractionResult(text=text)
