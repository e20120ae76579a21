"""
Application Services

Use cases orchestrating domain rules and collaborators.
"""

from careerbooster.application.services.cv_upload_use_case import CVUploadUseCase

__all__ = ["CVUploadUseCase"]
