# Shared Infrastructure for the Document Text Extraction Lambda
"""
Shared infrastructure components for the document text extraction Lambda.

This package provides:
- Pydantic models for the S3 trigger event and pipeline documents
- S3 and Document AI tools behind narrow interfaces
- Configuration management
- Custom exceptions
"""

from docai_bridge.config import (
    ProcessorConfig,
    ProcessorSettings,
    Settings,
    get_settings,
    load_processor_config,
)
from docai_bridge.exceptions import (
    ConfigurationError,
    DocumentPipelineError,
    ExtractionServiceError,
    MalformedEventError,
    NotFoundError,
    StorageAccessError,
    StorageWriteError,
    StreamReadError,
)

__all__ = [
    # Exceptions
    "DocumentPipelineError",
    "MalformedEventError",
    "ConfigurationError",
    "StorageAccessError",
    "NotFoundError",
    "StreamReadError",
    "ExtractionServiceError",
    "StorageWriteError",
    # Config
    "Settings",
    "ProcessorSettings",
    "ProcessorConfig",
    "get_settings",
    "load_processor_config",
]
