"""
Document Processor

Pure helpers for the extraction pipeline: MIME type inference,
Document AI request assembly and output key derivation.
"""

import base64
import re

from docai_bridge.exceptions import ConfigurationError
from docai_bridge.models.documents import ExtractionRequest


# --- MIME Types ---

DEFAULT_MIME_TYPE = "application/octet-stream"

MIME_TYPES = {
    "pdf": "application/pdf",
    "tiff": "image/tiff",
    "tif": "image/tiff",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "png": "image/png",
    "bmp": "image/bmp",
    "gif": "image/gif",
}


# --- Output Keys ---

OUTPUT_PREFIX = "processed_text/"
OUTPUT_SUFFIX = ".txt"

# Final ".ext" of the last path segment
_EXTENSION_PATTERN = re.compile(r"\.[^/.]+$")


def resolve_mime_type(filename: str) -> str:
    """
    Infer a document's MIME type from its file extension.

    Only the segment after the last '.' is considered, case-insensitively.

    Args:
        filename: Object key or filename

    Returns:
        MIME type, or application/octet-stream when unrecognized
    """
    if "." not in filename:
        return DEFAULT_MIME_TYPE

    extension = filename.rsplit(".", 1)[-1].lower()
    return MIME_TYPES.get(extension, DEFAULT_MIME_TYPE)


def derive_output_key(source_key: str) -> str:
    """
    Build the key the extracted text is stored under.

    Format: processed_text/{source_key without its last extension}.txt

    Examples:
        invoice.pdf -> processed_text/invoice.txt
        a.b.pdf     -> processed_text/a.b.txt
        noext       -> processed_text/noext.txt
    """
    stem = _EXTENSION_PATTERN.sub("", source_key)
    return f"{OUTPUT_PREFIX}{stem}{OUTPUT_SUFFIX}"


def build_processor_name(project_id: str, location: str, processor_id: str) -> str:
    return f"projects/{project_id}/locations/{location}/processors/{processor_id}"


def build_extraction_request(
    project_id: str | None,
    location: str | None,
    processor_id: str | None,
    content: bytes,
    mime_type: str,
) -> ExtractionRequest:
    """
    Assemble the Document AI request for one document.

    Args:
        project_id: Google Cloud project ID
        location: Processor location
        processor_id: Processor ID
        content: Raw document bytes
        mime_type: Resolved MIME type

    Returns:
        ExtractionRequest with base64-encoded content

    Raises:
        ConfigurationError: If any processor identity component is missing
            or contains '/'
    """
    identity = {
        "GOOGLE_PROJECT_ID": project_id,
        "GOOGLE_LOCATION": location,
        "GOOGLE_PROCESSOR_ID": processor_id,
    }
    missing = [name for name, value in identity.items() if not value]
    if missing:
        raise ConfigurationError(
            setting=", ".join(missing),
            error_message="processor identity is incomplete",
        )

    # Each component is a single resource-name segment
    nested = [name for name, value in identity.items() if "/" in value]
    if nested:
        raise ConfigurationError(
            setting=", ".join(nested),
            error_message="must not contain '/'",
        )

    return ExtractionRequest(
        processor_name=build_processor_name(project_id, location, processor_id),
        raw_content=base64.b64encode(content).decode("ascii"),
        mime_type=mime_type,
    )
