# Tools
"""
Storage and extraction clients used by the pipeline.

Each tool sits behind a narrow Protocol so tests can swap in fakes.
"""

from docai_bridge.tools.document_ai import (
    DocumentAIExtractor,
    TextExtractor,
)
from docai_bridge.tools.s3 import (
    DocumentStore,
    S3DocumentStore,
    collect_stream,
)

__all__ = [
    # S3 tools
    "DocumentStore",
    "S3DocumentStore",
    "collect_stream",
    # Document AI tools
    "DocumentAIExtractor",
    "TextExtractor",
]
