"""
FastAPI Application Setup

Main entry point for the CareerBooster CV upload API.

Responsibility:
    - FastAPI app initialization
    - Router registration (cv)
    - CORS middleware configuration
    - Exception handlers mapping domain errors to HTTP responses
    - Request logging middleware
    - Health check endpoint

Architecture Notes:
    - Part of API Layer (Presentation)
    - Entry point for HTTP server (uvicorn)
    - Centralizes cross-cutting concerns (logging, CORS, error handling)
    - No business logic - pure HTTP orchestration

Configuration (environment, optionally from .env):
    - CORS_ALLOWED_ORIGINS: Comma separated origin allow-list
    - EXPOSE_ERROR_DETAILS: Include exception class names in 500 responses
    - LOG_LEVEL: Root logging level (default INFO)
"""

import logging
import os
import time

from dotenv import load_dotenv
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from careerbooster import __version__
from careerbooster.api.routers import cv
from careerbooster.api.schemas.common import ErrorResponse
from careerbooster.domain.shared.exceptions import (
    DomainException,
    FileTooLargeError,
    InvalidRequestError,
    NoFileUploadedError,
    ProcessingError,
    UnauthenticatedError,
    UnexpectedError,
)
from careerbooster.shared.config import env_flag, env_list

# Load environment variables from .env file
load_dotenv()

# Configure logger
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

DEFAULT_CORS_ORIGINS = (
    "http://localhost:8081",
    "http://192.168.100.155:8081",
    "exp://192.168.100.155:8081",
)


def get_cors_origins() -> list[str]:
    """Origin allow-list from CORS_ALLOWED_ORIGINS, or the development defaults."""
    origins = env_list("CORS_ALLOWED_ORIGINS")
    return origins or list(DEFAULT_CORS_ORIGINS)


# ============================================================================
# RESPONSE MODELS
# ============================================================================


class HealthCheckResponse(BaseModel):
    """
    Health check response model.

    Attributes:
        status: Health status (always "ok" if endpoint responds)
        version: API version
        timestamp: Unix timestamp of health check
    """

    status: str = "ok"
    version: str = __version__
    timestamp: float


# ============================================================================
# MIDDLEWARE
# ============================================================================


async def request_logging_middleware(request: Request, call_next):
    """
    Request logging middleware.

    Logs all incoming requests with method, path, status code, and duration.
    Exceptions that escape the exception handlers are converted here so the
    response still passes back through CORSMiddleware.

    Logging Format:
        INFO: "Incoming request: POST /api/cv/upload"
        INFO: "Request completed: POST /api/cv/upload - 200 - 0.123s"
    """
    logger.info(f"Incoming request: {request.method} {request.url.path}")

    start_time = time.time()
    try:
        response = await call_next(request)
    except Exception as exc:
        response = await generic_exception_handler(request, exc)
    duration = time.time() - start_time

    logger.info(
        f"Request completed: {request.method} {request.url.path} - "
        f"{response.status_code} - {duration:.3f}s"
    )

    return response


# ============================================================================
# EXCEPTION HANDLERS
# ============================================================================


def status_code_for(exc: DomainException) -> int:
    """
    Map a domain exception to its HTTP status code.

    Mapping:
        - InvalidRequestError (and subclasses) -> 400 Bad Request
        - UnauthenticatedError -> 401 Unauthorized
        - FileTooLargeError -> 413 Payload Too Large
        - ProcessingError -> 500 Internal Server Error
        - UnexpectedError -> 500 Internal Server Error
        - Other DomainException -> 400 Bad Request
    """
    if isinstance(exc, UnauthenticatedError):
        return status.HTTP_401_UNAUTHORIZED
    if isinstance(exc, FileTooLargeError):
        return status.HTTP_413_REQUEST_ENTITY_TOO_LARGE
    if isinstance(exc, (ProcessingError, UnexpectedError)):
        return status.HTTP_500_INTERNAL_SERVER_ERROR
    return status.HTTP_400_BAD_REQUEST


async def domain_exception_handler(request: Request, exc: DomainException):
    """
    Global exception handler for domain layer exceptions.

    Converts every DomainException subclass into the error envelope
    ({"error", "message", ...extra fields}) with its mapped status code.

    Examples:
        >>> raise InvalidFileTypeError(received_type="image/png")
        >>> # Returns: 400 {"error": "Invalid file type",
        >>> #               "message": "Only PDF files are allowed",
        >>> #               "receivedType": "image/png"}
    """
    status_code = status_code_for(exc)
    error_response = ErrorResponse.from_exception(exc)

    if status_code >= 500:
        logger.error(
            f"Request failed: {exc.__class__.__name__} - {exc.message} - "
            f"Request: {request.method} {request.url.path}"
        )
    else:
        logger.warning(
            f"Request rejected: {exc.__class__.__name__} - {exc.message} - "
            f"Request: {request.method} {request.url.path}"
        )

    headers = None
    if isinstance(exc, UnauthenticatedError):
        headers = {"WWW-Authenticate": "Bearer"}

    return JSONResponse(
        status_code=status_code,
        content=error_response.to_content(),
        headers=headers,
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Convert FastAPI request validation errors into the error envelope.

    A `file` form field that is not an upload (no filename) counts as no
    file. Any other validation failure becomes a generic 400.
    """
    errors = exc.errors()
    if any(tuple(error.get("loc", ())) == ("body", "file") for error in errors):
        domain_exc: DomainException = NoFileUploadedError()
    else:
        details = "; ".join(
            f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg')}"
            for error in errors
        )
        domain_exc = InvalidRequestError(details or "Invalid request")
    return await domain_exception_handler(request, domain_exc)


async def generic_exception_handler(request: Request, exc: Exception):
    """
    Global exception handler for unexpected exceptions.

    Catches anything that escaped the use case and converts it to the
    "Unexpected error" envelope with 500 Internal Server Error.
    Logs full stack trace for debugging.
    """
    expose = env_flag("EXPOSE_ERROR_DETAILS", True)
    error_response = ErrorResponse.from_exception(
        UnexpectedError(
            str(exc),
            error_type=exc.__class__.__name__ if expose else "UnexpectedError",
        )
    )

    logger.error(
        f"Unexpected error: {exc.__class__.__name__} - {str(exc)} - "
        f"Request: {request.method} {request.url.path}",
        exc_info=True,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_response.to_content(),
    )


# ============================================================================
# APP FACTORY
# ============================================================================


def create_app() -> FastAPI:
    """
    FastAPI application factory.

    Configuration:
        - Title: CareerBooster CV API
        - CORS: allow-list from get_cors_origins(), credentials allowed
        - Routers: /api/cv
        - Health: GET /health

    Usage:
        >>> app = create_app()
        >>> # uvicorn careerbooster.api.main:app --reload
    """
    app = FastAPI(
        title="CareerBooster CV API",
        version=__version__,
        description="APIs for CV upload and processing",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # CORS added last so it wraps the logging middleware
    app.middleware("http")(request_logging_middleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=get_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    app.include_router(cv.router, prefix="/api")

    @app.get(
        "/health",
        response_model=HealthCheckResponse,
        status_code=status.HTTP_200_OK,
        summary="Health check endpoint",
        tags=["health"],
    )
    async def health_check() -> HealthCheckResponse:
        return HealthCheckResponse(timestamp=time.time())

    logger.info("FastAPI application created successfully")
    logger.info("Registered routers: /api/cv")

    return app


# ============================================================================
# APP INSTANCE (for uvicorn)
# ============================================================================

# Usage: uvicorn careerbooster.api.main:app --reload
app = create_app()
