"""
Tests for CVUploadUseCase.

Tests cover:
- Validation order and short-circuiting
- Identity check
- Delegation to the DocumentProcessor
- Failure mapping (OSError / other / DomainException)
"""
import pytest
from unittest.mock import AsyncMock

from careerbooster.application.services.cv_upload_use_case import CVUploadUseCase
from careerbooster.domain.cv.uploaded_document import UploadedDocument
from careerbooster.domain.shared.exceptions import (
    FileTooLargeError,
    InvalidFileTypeError,
    NoFileUploadedError,
    ProcessingError,
    UnauthenticatedError,
    UnexpectedError,
)


# ============================================================================
# FIXTURES
# ============================================================================


@pytest.fixture
def mock_processor():
    """Mocked DocumentProcessor."""
    mock = AsyncMock()
    mock.process.return_value = {"score": 87, "sections": ["education", "skills"]}
    return mock


@pytest.fixture
def pdf_document(sample_pdf_bytes):
    return UploadedDocument("resume.pdf", "application/pdf", sample_pdf_bytes)


@pytest.fixture
def use_case(mock_processor):
    return CVUploadUseCase(processor=mock_processor, max_size_mb=10, expose_error_details=True)


# ============================================================================
# SUCCESS
# ============================================================================


@pytest.mark.asyncio
async def test_execute_delegates_to_processor(use_case, mock_processor, pdf_document):
    """Processor is awaited once with exactly the given values."""
    result = await use_case.execute(
        document=pdf_document, user_email="user@example.com", analysis_type="skills"
    )

    assert result == {"score": 87, "sections": ["education", "skills"]}
    mock_processor.process.assert_awaited_once_with(pdf_document, "user@example.com", "skills")


@pytest.mark.asyncio
async def test_execute_returns_result_object_unchanged(use_case, mock_processor, pdf_document):
    payload = {"nested": {"list": [1, 2, 3]}}
    mock_processor.process.return_value = payload

    result = await use_case.execute(pdf_document, "user@example.com")

    assert result is payload


@pytest.mark.asyncio
async def test_execute_analysis_type_defaults_to_none(use_case, mock_processor, pdf_document):
    await use_case.execute(pdf_document, "user@example.com")

    mock_processor.process.assert_awaited_once_with(pdf_document, "user@example.com", None)


# ============================================================================
# VALIDATION
# ============================================================================


@pytest.mark.asyncio
async def test_missing_document(use_case, mock_processor):
    with pytest.raises(NoFileUploadedError) as exc_info:
        await use_case.execute(None, "user@example.com")

    assert exc_info.value.error == "No file uploaded"
    assert exc_info.value.message == "Please select a PDF file to upload"
    mock_processor.process.assert_not_called()


@pytest.mark.asyncio
async def test_empty_document(use_case):
    with pytest.raises(NoFileUploadedError):
        await use_case.execute(UploadedDocument("resume.pdf", "application/pdf", b""), "user@example.com")


@pytest.mark.asyncio
async def test_empty_document_checked_before_content_type(use_case):
    """An empty PNG reports the missing file, not the wrong type."""
    with pytest.raises(NoFileUploadedError):
        await use_case.execute(UploadedDocument("a.png", "image/png", b""), "user@example.com")


@pytest.mark.asyncio
async def test_wrong_content_type(use_case, mock_processor):
    with pytest.raises(InvalidFileTypeError) as exc_info:
        await use_case.execute(UploadedDocument("cv.docx", "application/msword", b"data"), "user@example.com")

    assert exc_info.value.received_type == "application/msword"
    assert exc_info.value.extra_fields() == {"receivedType": "application/msword"}
    mock_processor.process.assert_not_called()


@pytest.mark.asyncio
async def test_missing_content_type_echoed_as_empty_string(use_case):
    with pytest.raises(InvalidFileTypeError) as exc_info:
        await use_case.execute(UploadedDocument("cv", None, b"data"), "user@example.com")

    assert exc_info.value.received_type == ""


@pytest.mark.asyncio
async def test_file_too_large(mock_processor):
    use_case = CVUploadUseCase(processor=mock_processor, max_size_mb=1)
    big = UploadedDocument("big.pdf", "application/pdf", b"0" * (1024 * 1024 + 1))

    with pytest.raises(FileTooLargeError) as exc_info:
        await use_case.execute(big, "user@example.com")

    assert exc_info.value.max_size == 1024 * 1024
    mock_processor.process.assert_not_called()


@pytest.mark.asyncio
async def test_file_at_size_limit_is_accepted(mock_processor):
    use_case = CVUploadUseCase(processor=mock_processor, max_size_mb=1)
    exact = UploadedDocument("cv.pdf", "application/pdf", b"0" * (1024 * 1024))

    await use_case.execute(exact, "user@example.com")

    mock_processor.process.assert_awaited_once()


def test_max_size_from_environment(monkeypatch, mock_processor):
    monkeypatch.setenv("MAX_UPLOAD_SIZE_MB", "2")

    assert CVUploadUseCase(processor=mock_processor).max_size_bytes == 2 * 1024 * 1024


def test_max_size_default(mock_processor):
    assert CVUploadUseCase(processor=mock_processor).max_size_bytes == 10 * 1024 * 1024


# ============================================================================
# IDENTITY
# ============================================================================


@pytest.mark.asyncio
@pytest.mark.parametrize("user_email", [None, ""])
async def test_missing_identity(use_case, mock_processor, pdf_document, user_email):
    with pytest.raises(UnauthenticatedError):
        await use_case.execute(pdf_document, user_email)

    mock_processor.process.assert_not_called()


@pytest.mark.asyncio
async def test_file_validated_before_identity(use_case):
    """Validation runs first, so a missing file wins over missing identity."""
    with pytest.raises(NoFileUploadedError):
        await use_case.execute(None, None)


# ============================================================================
# FAILURE MAPPING
# ============================================================================


@pytest.mark.asyncio
async def test_os_error_becomes_processing_error(use_case, mock_processor, pdf_document):
    mock_processor.process.side_effect = FileNotFoundError("temp file vanished")

    with pytest.raises(ProcessingError) as exc_info:
        await use_case.execute(pdf_document, "user@example.com")

    assert exc_info.value.message == "temp file vanished"
    assert isinstance(exc_info.value.__cause__, FileNotFoundError)


@pytest.mark.asyncio
async def test_other_error_becomes_unexpected_error(use_case, mock_processor, pdf_document):
    mock_processor.process.side_effect = ValueError("bad payload")

    with pytest.raises(UnexpectedError) as exc_info:
        await use_case.execute(pdf_document, "user@example.com")

    assert exc_info.value.message == "bad payload"
    assert exc_info.value.error_type == "ValueError"
    assert exc_info.value.extra_fields() == {"type": "ValueError"}


@pytest.mark.asyncio
async def test_unexpected_error_type_hidden(mock_processor, pdf_document):
    use_case = CVUploadUseCase(processor=mock_processor, expose_error_details=False)
    mock_processor.process.side_effect = ValueError("bad payload")

    with pytest.raises(UnexpectedError) as exc_info:
        await use_case.execute(pdf_document, "user@example.com")

    assert exc_info.value.error_type == "UnexpectedError"


@pytest.mark.asyncio
async def test_domain_exception_from_processor_propagates(use_case, mock_processor, pdf_document):
    mock_processor.process.side_effect = InvalidFileTypeError("application/pdf", "Encrypted PDFs are not supported")

    with pytest.raises(InvalidFileTypeError):
        await use_case.execute(pdf_document, "user@example.com")
