"""
Pytest Configuration and Shared Fixtures

This module contains pytest configuration and shared fixtures used across
all test suites.

Fixtures:
    - isolated_env: Clears service configuration variables for every test
    - sample_pdf_bytes: Minimal PDF payload of a fixed size

Usage:
    Tests automatically have access to these fixtures by name:

    def test_something(sample_pdf_bytes):
        assert len(sample_pdf_bytes) == 1024
"""

import logging

import pytest

# Configure logger for tests
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

CONFIG_ENV_VARS = (
    "API_TOKENS",
    "CV_PROCESSOR_URL",
    "CV_PROCESSOR_TIMEOUT",
    "CV_PROCESSOR_API_KEY",
    "MAX_UPLOAD_SIZE_MB",
    "CORS_ALLOWED_ORIGINS",
    "EXPOSE_ERROR_DETAILS",
)


# ============================================================================
# ENVIRONMENT FIXTURES
# ============================================================================


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """
    Remove service configuration from the environment before each test.

    Tests that need a setting use monkeypatch.setenv explicitly.
    """
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield


# ============================================================================
# FILE FIXTURES
# ============================================================================


@pytest.fixture
def sample_pdf_bytes() -> bytes:
    """1024-byte payload starting with a PDF header."""
    header = b"%PDF-1.7\n"
    return header + b"0" * (1024 - len(header))


# ============================================================================
# PYTEST CONFIGURATION
# ============================================================================


def pytest_configure(config):
    """
    Pytest configuration hook.

    Registers custom markers for test categorization.

    Markers:
        - unit: Unit tests (no external dependencies)
        - integration: Integration tests (may require external services)
    """
    config.addinivalue_line(
        "markers", "unit: Unit tests (no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests (may require external services)"
    )
