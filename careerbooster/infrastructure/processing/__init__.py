"""Document processing adapters."""

from .http_document_processor import (
    HttpDocumentProcessor,
    ProcessorConnectionError,
    ProcessorResponseError,
)

__all__ = ["HttpDocumentProcessor", "ProcessorConnectionError", "ProcessorResponseError"]
