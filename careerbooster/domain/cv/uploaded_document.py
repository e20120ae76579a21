"""
UploadedDocument Value Object.

Represents one CV file received over HTTP: its bytes plus the metadata the
client declared for it. Lives only for the duration of a single request.

This is an immutable Value Object following DDD principles.
"""

from dataclasses import dataclass, field
from typing import Final, Optional

PDF_CONTENT_TYPE: Final[str] = "application/pdf"


@dataclass(frozen=True)
class UploadedDocument:
    """
    Immutable Value Object for an uploaded CV file.

    No validation happens here: an UploadedDocument may be empty or carry a
    non-PDF content type. CVUploadUseCase decides what is acceptable.

    Attributes:
        filename: Original filename declared by the client (may be None)
        content_type: Declared MIME type (may be None)
        content: Raw file bytes

    Examples:
        >>> doc = UploadedDocument("resume.pdf", "application/pdf", b"%PDF-1.7")
        >>> doc.size
        8
        >>> doc.is_pdf
        True
    """

    filename: Optional[str]
    content_type: Optional[str]
    content: bytes = field(repr=False)

    @property
    def size(self) -> int:
        """File size in bytes."""
        return len(self.content)

    @property
    def is_empty(self) -> bool:
        return self.size == 0

    @property
    def is_pdf(self) -> bool:
        """True only for an exact application/pdf content type."""
        return self.content_type == PDF_CONTENT_TYPE
