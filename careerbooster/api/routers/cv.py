"""
API Router for CV Upload

Responsibility:
    HTTP interface for uploading a CV (PDF) for analysis.
    Thin layer that delegates to Application Layer use case via dependency injection.

Architecture Notes:
    - Part of API Layer (Presentation)
    - Depends on Application Layer (CVUploadUseCase)
    - Caller identity arrives via the get_current_user_email dependency
    - Routes are declared in the ROUTES table and registered explicitly
    - Domain errors propagate to the exception handlers in api/main.py

Contains:
    - POST /cv/upload - Upload and process a CV

Does NOT contain:
    - Validation rules (delegated to CVUploadUseCase)
    - CV analysis (delegated to the DocumentProcessor)
    - Token validation (delegated to api/security.py)
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Query, Request, UploadFile, status
from fastapi.responses import JSONResponse

from careerbooster.api.schemas.common import ErrorResponse
from careerbooster.api.security import get_current_user_email
from careerbooster.application.ports.document_processor import DocumentProcessorProtocol
from careerbooster.application.services.cv_upload_use_case import CVUploadUseCase
from careerbooster.domain.cv.uploaded_document import UploadedDocument
from careerbooster.domain.shared.exceptions import ProcessingError
from careerbooster.infrastructure.processing.http_document_processor import (
    HttpDocumentProcessor,
)

# Configure logger
logger = logging.getLogger(__name__)


# ============================================================================
# DEPENDENCY INJECTION
# ============================================================================


def get_document_processor() -> DocumentProcessorProtocol:
    """Dependency injection for the DocumentProcessor."""
    return HttpDocumentProcessor()


def get_cv_upload_use_case(
    processor: DocumentProcessorProtocol = Depends(get_document_processor),
) -> CVUploadUseCase:
    """
    Dependency injection for CVUploadUseCase.

    Returns:
        CVUploadUseCase wired with the configured DocumentProcessor
    """
    return CVUploadUseCase(processor=processor)


# ============================================================================
# HELPERS
# ============================================================================


async def _read_upload(file: Optional[UploadFile]) -> Optional[UploadedDocument]:
    """
    Read the multipart file part into an UploadedDocument.

    Returns None when no file part was sent. The upload is closed on every
    exit path.

    Raises:
        ProcessingError: If reading the upload fails with an I/O error
    """
    if file is None:
        return None

    try:
        content = await file.read()
    except OSError as e:
        logger.error(f"Error processing CV: {e}", exc_info=True)
        raise ProcessingError(str(e)) from e
    finally:
        await file.close()

    return UploadedDocument(
        filename=file.filename,
        content_type=file.content_type,
        content=content,
    )


def _log_request(
    request: Request, file: Optional[UploadFile], analysis_type: Optional[str]
) -> None:
    logger.info("=== CV Upload Request Received ===")
    logger.info(f"Request URL: {request.url}")
    logger.info(f"Content Type: {request.headers.get('content-type')}")
    logger.info(f"Method: {request.method}")
    logger.info(f"Analysis Type: {analysis_type}")
    if file is None:
        logger.info("File Details: <none>")
        return
    logger.info("File Details:")
    logger.info(f"- Name: {file.filename}")
    logger.info(f"- Size: {file.size} bytes")
    logger.info(f"- Content Type: {file.content_type}")


# ============================================================================
# ENDPOINTS
# ============================================================================


async def upload_cv(
    request: Request,
    file: Optional[UploadFile] = File(
        default=None,
        description="CV to analyse (application/pdf)",
    ),
    analysis_type_query: Optional[str] = Query(
        default=None,
        alias="analysisType",
        description=(
            "Optional analysis variant, forwarded to the processor as-is. "
            "Takes precedence over the analysisType form field."
        ),
    ),
    analysis_type_form: Optional[str] = Form(
        default=None,
        alias="analysisType",
        description=(
            "Form-field fallback for analysisType, used only when the query "
            "parameter is absent"
        ),
    ),
    user_email: str = Depends(get_current_user_email),
    use_case: CVUploadUseCase = Depends(get_cv_upload_use_case),
) -> JSONResponse:
    """
    Upload a CV and return the processor's analysis.

    Process Flow:
        1. Log request and file metadata
        2. Read the file part into memory
        3. Delegate validation and processing to CVUploadUseCase
        4. Return 200 with the processor result, unmodified

    Errors (raised as DomainException, mapped in api/main.py):
        400: No file / empty file / non-PDF content type
        401: Missing or invalid bearer token
        413: File exceeds upload limit
        500: I/O failure or unexpected processor failure

    Examples:
        >>> curl -X POST "http://localhost:8080/api/cv/upload?analysisType=general_analysis" \\
        ...      -H "Authorization: Bearer <token>" \\
        ...      -F "file=@resume.pdf;type=application/pdf"
    """
    analysis_type = (
        analysis_type_query if analysis_type_query is not None else analysis_type_form
    )
    _log_request(request, file, analysis_type)

    document = await _read_upload(file)
    result = await use_case.execute(
        document=document,
        user_email=user_email,
        analysis_type=analysis_type,
    )
    return JSONResponse(status_code=status.HTTP_200_OK, content=result)


# ============================================================================
# ROUTE TABLE
# ============================================================================


ROUTES = (
    (
        "POST",
        "/upload",
        upload_cv,
        {
            "summary": "Upload and process CV",
            "description": (
                "Upload a PDF CV file for processing. Requires a bearer token. "
                "The response body is the processor's result, passed through unchanged."
            ),
            "responses": {
                200: {"description": "CV processed successfully"},
                400: {"model": ErrorResponse, "description": "Invalid file or no file uploaded"},
                401: {"model": ErrorResponse, "description": "Invalid or missing token"},
                413: {"model": ErrorResponse, "description": "File exceeds upload limit"},
                500: {"model": ErrorResponse, "description": "Internal server error"},
            },
        },
    ),
)


router = APIRouter(prefix="/cv", tags=["CV Management"])

for method, path, endpoint, options in ROUTES:
    router.add_api_route(path, endpoint, methods=[method], **options)
