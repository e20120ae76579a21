"""
HTTP Document Processor

Infrastructure implementation of DocumentProcessorProtocol that forwards the
uploaded CV to the remote CV analysis service.

Responsibility:
    - POST the PDF as multipart/form-data to {CV_PROCESSOR_URL}/process
    - Forward caller identity and analysis type as form fields
    - Return the service's JSON object unchanged
    - Translate transport failures into OSError (I/O-kind) for the use case

Configuration (environment):
    - CV_PROCESSOR_URL: Base URL of the analysis service (default http://localhost:8090)
    - CV_PROCESSOR_TIMEOUT: Request timeout in seconds (default 60)
    - CV_PROCESSOR_API_KEY: Optional bearer token for the analysis service
"""

import logging
import os
from typing import Any, Optional

import httpx

from careerbooster.domain.cv.uploaded_document import PDF_CONTENT_TYPE, UploadedDocument

logger = logging.getLogger(__name__)

DEFAULT_PROCESSOR_URL = "http://localhost:8090"
DEFAULT_TIMEOUT_SECONDS = 60.0


class ProcessorConnectionError(OSError):
    """Raised when the analysis service cannot be reached or times out."""


class ProcessorResponseError(Exception):
    """
    Raised when the analysis service answers with an error or a body that
    is not a JSON object.

    Attributes:
        status_code: HTTP status returned by the service, if any
    """

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class HttpDocumentProcessor:
    """
    DocumentProcessor backed by a remote HTTP service.

    A new AsyncClient is opened per call so nothing is shared between
    concurrent uploads.

    Examples:
        >>> processor = HttpDocumentProcessor(base_url="http://cv-analyzer:8090")
        >>> result = await processor.process(document, "user@example.com", "skills")
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        api_key: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = (base_url or os.getenv("CV_PROCESSOR_URL", DEFAULT_PROCESSOR_URL)).rstrip("/")
        self.timeout = timeout or float(
            os.getenv("CV_PROCESSOR_TIMEOUT", str(DEFAULT_TIMEOUT_SECONDS))
        )
        self.api_key = api_key if api_key is not None else os.getenv("CV_PROCESSOR_API_KEY")
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    async def process(
        self,
        document: UploadedDocument,
        user_email: str,
        analysis_type: Optional[str],
    ) -> dict[str, Any]:
        files = {
            "file": (
                document.filename or "document.pdf",
                document.content,
                document.content_type or PDF_CONTENT_TYPE,
            )
        }
        data = {"userEmail": user_email}
        if analysis_type is not None:
            data["analysisType"] = analysis_type

        logger.info(
            f"Forwarding CV to processor: {self.base_url}/process "
            f"({document.size} bytes, analysis_type={analysis_type})"
        )

        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers=self._headers(),
                transport=self._transport,
            ) as client:
                response = await client.post("/process", files=files, data=data)
        except httpx.TransportError as e:
            raise ProcessorConnectionError(
                f"Could not reach CV processor at {self.base_url}: {e}"
            ) from e

        if response.is_error:
            raise ProcessorResponseError(
                f"CV processor returned HTTP {response.status_code}: {response.text[:200]}",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise ProcessorResponseError(
                "CV processor returned a non-JSON response",
                status_code=response.status_code,
            ) from e

        if not isinstance(payload, dict):
            raise ProcessorResponseError(
                f"CV processor returned {type(payload).__name__}, expected a JSON object",
                status_code=response.status_code,
            )

        return payload
