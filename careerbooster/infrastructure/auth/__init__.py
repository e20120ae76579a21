"""Identity resolution adapters."""

from .static_token_resolver import StaticTokenIdentityResolver, parse_token_table

__all__ = ["StaticTokenIdentityResolver", "parse_token_table"]
