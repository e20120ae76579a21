"""
Common fixtures for API unit tests.

Provides shared test utilities:
- FastAPI app with collaborator overrides
- FastAPI TestClient
- Mock DocumentProcessor
- Auth headers for the test identity
"""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from careerbooster.api.main import create_app
from careerbooster.api.routers.cv import get_document_processor
from careerbooster.api.security import get_identity_resolver
from careerbooster.infrastructure.auth.static_token_resolver import (
    StaticTokenIdentityResolver,
)

TEST_TOKEN = "test-token"
TEST_EMAIL = "user@example.com"


@pytest.fixture
def processor_result():
    """Sample processor payload."""
    return {
        "recommendations": {
            "overallScore": 78,
            "skills": {"present": True, "items": ["Python", "SQL"]},
        },
        "courseRecommendations": [{"title": "Advanced SQL", "provider": "Coursera"}],
    }


@pytest.fixture
def mock_processor(processor_result):
    """Mock for DocumentProcessor (async process)."""
    mock = AsyncMock()
    mock.process.return_value = processor_result
    return mock


@pytest.fixture
def app(mock_processor):
    """FastAPI app with the processor and identity resolver overridden."""
    app = create_app()
    app.dependency_overrides[get_document_processor] = lambda: mock_processor
    app.dependency_overrides[get_identity_resolver] = (
        lambda: StaticTokenIdentityResolver({TEST_TOKEN: TEST_EMAIL})
    )
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    """
    FastAPI TestClient for testing endpoints.

    Returns TestClient configured with the overridden app.
    """
    return TestClient(app)


@pytest.fixture
def auth_headers():
    """Authorization header for the test identity."""
    return {"Authorization": f"Bearer {TEST_TOKEN}"}
