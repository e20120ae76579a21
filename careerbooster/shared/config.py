"""
Environment configuration helpers.

Settings are read from environment variables (optionally populated from a
.env file by api/main.py) at the point of use, with defaults supplied by the
caller.
"""

import os

TRUTHY_VALUES = ("1", "true", "yes", "on")


def env_flag(name: str, default: bool) -> bool:
    """
    Read a boolean environment variable.

    Examples:
        >>> os.environ["EXPOSE_ERROR_DETAILS"] = "false"
        >>> env_flag("EXPOSE_ERROR_DETAILS", True)
        False
    """
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in TRUTHY_VALUES


def env_list(name: str) -> list[str]:
    """Read a comma separated environment variable, skipping blank items."""
    raw = os.getenv(name, "")
    return [item.strip() for item in raw.split(",") if item.strip()]
