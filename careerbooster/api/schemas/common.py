"""
Common API Schemas

Shared Pydantic models used across all API routers.
"""

from typing import Optional

from pydantic import BaseModel, Field

from careerbooster.domain.shared.exceptions import DomainException


class ErrorResponse(BaseModel):
    """
    Standard error envelope for all API errors.

    Only `error` and `message` are always present; the optional fields are
    dropped from the JSON body when unset (see `to_content`).

    Attributes:
        error: Short error label (e.g. "No file uploaded", "Invalid file type")
        message: Human-readable error message
        receivedType: Declared content type of a rejected non-PDF upload
        type: Classification tag of an unexpected failure
        maxSizeBytes: Upload size limit, for oversized files
    """

    error: str = Field(description="Short error label")
    message: str = Field(description="Human-readable error message")
    receivedType: Optional[str] = Field(
        default=None, description="Content type received for a rejected upload"
    )
    type: Optional[str] = Field(
        default=None, description="Classification tag of an unexpected failure"
    )
    maxSizeBytes: Optional[str] = Field(
        default=None, description="Maximum accepted upload size in bytes"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "error": "Invalid file type",
                "message": "Only PDF files are allowed",
                "receivedType": "image/png",
            }
        }

    @classmethod
    def from_exception(cls, exc: DomainException) -> "ErrorResponse":
        return cls(error=exc.error, message=exc.message, **exc.extra_fields())

    def to_content(self) -> dict[str, str]:
        """JSON body with unset optional fields removed."""
        return self.model_dump(exclude_none=True)
