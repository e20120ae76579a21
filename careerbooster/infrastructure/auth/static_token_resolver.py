"""
Static Token Identity Resolver

Development implementation of IdentityResolverProtocol backed by a fixed
token -> email table.

Configuration (environment):
    - API_TOKENS: Comma separated `token:email` pairs, e.g.
      "dev-token:user@example.com,other:admin@example.com"

Architecture Notes:
    - Stand-in for the real authentication subsystem, which issues and
      validates tokens outside this service
    - Malformed entries are skipped with a warning
"""

import hmac
import logging
import os
from typing import Mapping, Optional

logger = logging.getLogger(__name__)


def parse_token_table(raw: str) -> dict[str, str]:
    """
    Parse `token:email` pairs into a mapping.

    Examples:
        >>> parse_token_table("abc:user@example.com, bad-entry")
        {'abc': 'user@example.com'}
    """
    table: dict[str, str] = {}
    for entry in raw.split(","):
        entry = entry.strip()
        if not entry:
            continue
        token, sep, email = entry.partition(":")
        token, email = token.strip(), email.strip()
        if not sep or not token or not email:
            logger.warning(f"Ignoring malformed API_TOKENS entry: {entry!r}")
            continue
        table[token] = email
    return table


class StaticTokenIdentityResolver:
    """Resolve bearer tokens against a fixed table."""

    def __init__(self, tokens: Optional[Mapping[str, str]] = None) -> None:
        if tokens is None:
            tokens = parse_token_table(os.getenv("API_TOKENS", ""))
        self._tokens = dict(tokens)
        if not self._tokens:
            logger.debug("No API tokens configured; every request will be rejected")

    def resolve(self, token: str) -> Optional[str]:
        # constant-time comparison per candidate
        for known, email in self._tokens.items():
            if hmac.compare_digest(known.encode(), token.encode()):
                return email
        return None
