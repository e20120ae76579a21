"""
Domain Layer - Core Concepts

Framework-independent value objects and the error taxonomy of the CV
upload boundary.

Subdomains:
    - cv: Uploaded document value object
    - shared: Exception hierarchy

Usage:
    >>> from careerbooster.domain import UploadedDocument, DomainException
"""

from .cv import PDF_CONTENT_TYPE, UploadedDocument
from .shared import DomainException

__all__ = ["UploadedDocument", "PDF_CONTENT_TYPE", "DomainException"]
