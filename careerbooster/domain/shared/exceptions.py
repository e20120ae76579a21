"""
Domain Layer Exceptions

This module defines the closed set of error kinds the CV upload boundary can
produce. All of them inherit from DomainException so the API Layer can map
them to HTTP responses in a single exception handler.

Responsibility:
    - Base exception class for domain errors
    - One exception per error kind (invalid request, unauthenticated,
      processing failure, unexpected failure)
    - Carry the public `error` label and any extra envelope fields

Architecture Notes:
    - Part of Shared Domain
    - Raised by Application Layer (CVUploadUseCase) and API Layer (auth)
    - API Layer converts to HTTP status codes (see api/main.py)
"""


class DomainException(Exception):
    """
    Base exception for all domain layer errors.

    Attributes:
        message: Human-readable error description
        error: Short public label used as the `error` field of the envelope

    Examples:
        >>> raise DomainException("Business rule violation")
    """

    error: str = "Error"

    def __init__(self, message: str) -> None:
        """
        Initialize domain exception with error message.

        Args:
            message: Human-readable error description
        """
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        """String representation of the exception."""
        return f"{self.__class__.__name__}: {self.message}"

    def __repr__(self) -> str:
        """Developer-friendly representation."""
        return f"{self.__class__.__name__}(message={self.message!r})"

    def extra_fields(self) -> dict[str, str]:
        """Additional envelope fields beyond `error` and `message`."""
        return {}


# ============================================================================
# CALLER ERRORS (4xx)
# ============================================================================


class InvalidRequestError(DomainException):
    """
    Raised when the upload request itself is malformed.

    Covers a missing or empty file and a non-PDF content type.
    Mapped to HTTP 400 Bad Request.
    """

    error = "Invalid request"


class NoFileUploadedError(InvalidRequestError):
    """
    Raised when no file part was sent or the file has zero bytes.

    Examples:
        >>> raise NoFileUploadedError()
    """

    error = "No file uploaded"

    def __init__(self, message: str = "Please select a PDF file to upload") -> None:
        super().__init__(message)


class InvalidFileTypeError(InvalidRequestError):
    """
    Raised when the declared content type is not exactly application/pdf.

    Attributes:
        received_type: Content type declared by the client, echoed back verbatim

    Examples:
        >>> raise InvalidFileTypeError(received_type="image/png")
    """

    error = "Invalid file type"

    def __init__(
        self,
        received_type: str,
        message: str = "Only PDF files are allowed",
    ) -> None:
        self.received_type = received_type
        super().__init__(message)

    def extra_fields(self) -> dict[str, str]:
        return {"receivedType": self.received_type}


class FileTooLargeError(DomainException):
    """
    Raised when the uploaded file exceeds the configured size limit.

    Mapped to HTTP 413 Payload Too Large.

    Attributes:
        file_size: Size of the uploaded file in bytes
        max_size: Maximum allowed size in bytes
    """

    error = "File too large"

    def __init__(self, file_size: int, max_size: int) -> None:
        self.file_size = file_size
        self.max_size = max_size
        max_mb = max_size / (1024 * 1024)
        super().__init__(
            f"File size ({file_size} bytes) exceeds the {max_mb:g}MB limit"
        )

    def extra_fields(self) -> dict[str, str]:
        return {"maxSizeBytes": str(self.max_size)}


class UnauthenticatedError(DomainException):
    """
    Raised when no caller identity can be resolved.

    Normally the bearer-token dependency rejects the request before the
    handler runs; the use case raises this too if it receives no identity.
    Mapped to HTTP 401 Unauthorized.
    """

    error = "Unauthorized"

    def __init__(self, message: str = "Invalid or missing authentication token") -> None:
        super().__init__(message)


# ============================================================================
# SERVER ERRORS (5xx)
# ============================================================================


class ProcessingError(DomainException):
    """
    Raised when an I/O failure occurs while handling the uploaded file.

    Wraps OSError from reading the upload or from the DocumentProcessor.
    Mapped to HTTP 500 with the underlying message.
    """

    error = "Error processing CV"


class UnexpectedError(DomainException):
    """
    Raised for any other failure during delegation to the DocumentProcessor.

    Mapped to HTTP 500. The `type` envelope field carries `error_type`.

    Attributes:
        error_type: Classification tag (failing exception's class name, or
            the generic tag when details are hidden)
    """

    error = "Unexpected error"

    def __init__(self, message: str, error_type: str = "UnexpectedError") -> None:
        self.error_type = error_type
        super().__init__(message)

    def extra_fields(self) -> dict[str, str]:
        return {"type": self.error_type}
