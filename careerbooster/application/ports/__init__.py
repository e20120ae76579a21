"""
Application Layer Ports (Interfaces)

Contains Protocol definitions for dependency inversion.
Infrastructure Layer implements these protocols.
"""

from careerbooster.application.ports.document_processor import DocumentProcessorProtocol
from careerbooster.application.ports.identity_resolver import IdentityResolverProtocol

__all__ = ["DocumentProcessorProtocol", "IdentityResolverProtocol"]
