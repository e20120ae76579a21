"""
Infrastructure Layer - External Dependencies

Implements Application Layer protocols against real collaborators.

Modules:
    - processing: HttpDocumentProcessor (remote CV analysis service, httpx)
    - auth: StaticTokenIdentityResolver (token table from environment)

Usage:
    >>> from careerbooster.infrastructure import HttpDocumentProcessor
"""

from .auth import StaticTokenIdentityResolver
from .processing import HttpDocumentProcessor

__all__ = ["HttpDocumentProcessor", "StaticTokenIdentityResolver"]
