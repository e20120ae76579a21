"""
Shared Domain

Cross-cutting domain concepts (exception hierarchy).
"""

from .exceptions import (
    DomainException,
    FileTooLargeError,
    InvalidFileTypeError,
    InvalidRequestError,
    NoFileUploadedError,
    ProcessingError,
    UnauthenticatedError,
    UnexpectedError,
)

__all__ = [
    "DomainException",
    "InvalidRequestError",
    "NoFileUploadedError",
    "InvalidFileTypeError",
    "FileTooLargeError",
    "UnauthenticatedError",
    "ProcessingError",
    "UnexpectedError",
]
