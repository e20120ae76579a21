"""
CV Upload Use Case

Responsibility:
    Validates an uploaded CV, checks the caller identity and delegates the
    analysis to the DocumentProcessor. Converts collaborator failures into
    the closed set of domain errors.

Architecture Notes:
    - Part of Application Layer (Services)
    - Uses DocumentProcessorProtocol (implemented in Infrastructure Layer)
    - Called by API Layer (cv.py router)
    - Identity arrives as an explicit argument, never from global state
    - API Layer maps raised DomainException subclasses to HTTP responses

Does NOT contain:
    - HTTP concerns (belongs to API Layer)
    - CV analysis (delegated to the DocumentProcessor)
"""

import logging
import os
from typing import Any, Optional

from careerbooster.application.ports.document_processor import DocumentProcessorProtocol
from careerbooster.domain.cv.uploaded_document import UploadedDocument
from careerbooster.domain.shared.exceptions import (
    DomainException,
    FileTooLargeError,
    InvalidFileTypeError,
    NoFileUploadedError,
    ProcessingError,
    UnauthenticatedError,
    UnexpectedError,
)
from careerbooster.shared.config import env_flag

logger = logging.getLogger(__name__)

DEFAULT_MAX_UPLOAD_SIZE_MB = 10


class CVUploadUseCase:
    """
    Use case for uploading a CV and running it through the DocumentProcessor.

    Process Flow:
        1. Reject missing or empty file (NoFileUploadedError)
        2. Reject content type other than application/pdf (InvalidFileTypeError)
        3. Reject file above size limit (FileTooLargeError)
        4. Reject missing identity (UnauthenticatedError)
        5. Call processor.process() exactly once
        6. Return the processor result unchanged

    Error Handling:
        - OSError from the processor -> ProcessingError
        - Any other exception -> UnexpectedError
        - DomainException from the processor propagates unchanged

    Attributes:
        processor: DocumentProcessor implementation (injected)
        max_size_bytes: Upload size limit in bytes
        expose_error_details: Whether UnexpectedError carries the failing
            exception's class name as its type tag

    Examples:
        >>> use_case = CVUploadUseCase(processor=HttpDocumentProcessor())
        >>> result = await use_case.execute(
        ...     document=UploadedDocument("resume.pdf", "application/pdf", data),
        ...     user_email="user@example.com",
        ...     analysis_type="skills",
        ... )
    """

    def __init__(
        self,
        processor: DocumentProcessorProtocol,
        max_size_mb: Optional[float] = None,
        expose_error_details: Optional[bool] = None,
    ) -> None:
        """
        Initialize use case with dependencies.

        Args:
            processor: DocumentProcessor used for the actual analysis
            max_size_mb: Upload limit in MB (default: MAX_UPLOAD_SIZE_MB env or 10)
            expose_error_details: Default: EXPOSE_ERROR_DETAILS env or True
        """
        self.processor = processor
        limit_mb = (
            max_size_mb
            if max_size_mb is not None
            else float(os.getenv("MAX_UPLOAD_SIZE_MB", str(DEFAULT_MAX_UPLOAD_SIZE_MB)))
        )
        self.max_size_bytes = int(limit_mb * 1024 * 1024)
        self.expose_error_details = (
            expose_error_details
            if expose_error_details is not None
            else env_flag("EXPOSE_ERROR_DETAILS", True)
        )

    def validate(self, document: Optional[UploadedDocument]) -> UploadedDocument:
        """
        Check presence, content type and size of the upload.

        Returns:
            The same document, for chaining

        Raises:
            NoFileUploadedError: document is None or empty
            InvalidFileTypeError: content type is not exactly application/pdf
            FileTooLargeError: document exceeds max_size_bytes
        """
        if document is None or document.is_empty:
            logger.error("No file uploaded or file is empty")
            raise NoFileUploadedError()

        if not document.is_pdf:
            logger.error(f"Invalid file type: {document.content_type}")
            raise InvalidFileTypeError(received_type=document.content_type or "")

        if document.size > self.max_size_bytes:
            logger.error(
                f"File too large: {document.size} bytes (limit {self.max_size_bytes})"
            )
            raise FileTooLargeError(document.size, self.max_size_bytes)

        return document

    async def execute(
        self,
        document: Optional[UploadedDocument],
        user_email: Optional[str],
        analysis_type: Optional[str] = None,
    ) -> dict[str, Any]:
        """
        Validate the upload and delegate it to the DocumentProcessor.

        Args:
            document: Uploaded file, or None when no file part was sent
            user_email: Identity resolved by the authentication dependency
            analysis_type: Optional processing variant, passed through as-is

        Returns:
            Processor result, unmodified

        Raises:
            NoFileUploadedError, InvalidFileTypeError, FileTooLargeError,
            UnauthenticatedError, ProcessingError, UnexpectedError
        """
        document = self.validate(document)

        if not user_email:
            logger.error("No authenticated identity available for CV upload")
            raise UnauthenticatedError()

        logger.info(f"Processing CV for user: {user_email}")
        logger.info("Starting CV processing...")

        try:
            result = await self.processor.process(document, user_email, analysis_type)
        except OSError as e:
            logger.error(f"Error processing CV: {e}", exc_info=True)
            raise ProcessingError(str(e)) from e
        except DomainException:
            raise
        except Exception as e:
            logger.error(f"Unexpected error: {e}", exc_info=True)
            error_type = (
                e.__class__.__name__ if self.expose_error_details else "UnexpectedError"
            )
            raise UnexpectedError(str(e), error_type=error_type) from e

        logger.info("CV processing completed successfully")
        return result
