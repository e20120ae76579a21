"""
IdentityResolver Protocol

Contract for the authentication collaborator that turns a bearer token into
the caller's identity (email).
"""

from typing import Optional, Protocol


class IdentityResolverProtocol(Protocol):
    """
    Protocol for resolving a bearer token to a caller identity.

    Implementations return None for unknown, expired or malformed tokens;
    they do not raise for authentication failures.
    """

    def resolve(self, token: str) -> Optional[str]:
        """Return the caller's email for `token`, or None if not authenticated."""
        ...
