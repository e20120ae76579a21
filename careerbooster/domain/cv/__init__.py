"""
CV Subdomain

Value objects describing an uploaded CV document.
"""

from .uploaded_document import PDF_CONTENT_TYPE, UploadedDocument

__all__ = ["UploadedDocument", "PDF_CONTENT_TYPE"]
