"""
Bearer Token Authentication

Resolves the caller's identity once per request from the Authorization
header and hands it to endpoints as an explicit argument.

Contains:
    - get_identity_resolver(): DI provider for IdentityResolverProtocol
    - get_current_user_email(): FastAPI dependency returning the caller's email

Raises UnauthenticatedError (-> 401) when the header is missing, is not a
bearer token, or the token does not resolve to an identity.
"""

import logging
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from careerbooster.application.ports.identity_resolver import IdentityResolverProtocol
from careerbooster.domain.shared.exceptions import UnauthenticatedError
from careerbooster.infrastructure.auth.static_token_resolver import (
    StaticTokenIdentityResolver,
)

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(
    auto_error=False,
    scheme_name="bearerAuth",
    description="Bearer token issued by the CareerBooster auth service",
)


def get_identity_resolver() -> IdentityResolverProtocol:
    """Dependency injection for the identity resolver."""
    return StaticTokenIdentityResolver()


async def get_current_user_email(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    resolver: IdentityResolverProtocol = Depends(get_identity_resolver),
) -> str:
    """
    Resolve the authenticated caller's email.

    Returns:
        Caller email

    Raises:
        UnauthenticatedError: Missing, malformed or unknown token
    """
    if credentials is None:
        logger.warning("Request rejected: missing bearer token")
        raise UnauthenticatedError("Missing bearer token")

    user_email = resolver.resolve(credentials.credentials)
    if not user_email:
        logger.warning("Request rejected: bearer token did not resolve to a user")
        raise UnauthenticatedError("Invalid or expired token")

    return user_email
