"""
DocumentProcessor Protocol

Contract for the external collaborator that performs the actual CV analysis.

Architecture Notes:
    - Protocol interface (structural typing for Dependency Injection)
    - Async interface (the default implementation calls a remote service)
    - Implementation in Infrastructure layer (HttpDocumentProcessor)
"""

from typing import Any, Optional, Protocol

from careerbooster.domain.cv.uploaded_document import UploadedDocument


class DocumentProcessorProtocol(Protocol):
    """
    Protocol for CV document processing.

    Error contract:
        - OSError (or subclass) for I/O-kind failures: reading the file,
          reaching the processing service
        - Any other exception is treated as an unexpected failure

    Examples:
        >>> processor: DocumentProcessorProtocol = HttpDocumentProcessor()
        >>> result = await processor.process(document, "user@example.com", "skills")
    """

    async def process(
        self,
        document: UploadedDocument,
        user_email: str,
        analysis_type: Optional[str],
    ) -> dict[str, Any]:
        """
        Analyse an uploaded CV on behalf of a caller.

        Args:
            document: Uploaded PDF with its declared metadata
            user_email: Resolved identity of the caller
            analysis_type: Optional processing variant, interpreted only by
                the processor

        Returns:
            JSON-serialisable result, forwarded unchanged to the client
        """
        ...
