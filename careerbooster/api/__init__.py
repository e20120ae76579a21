"""
API Layer - FastAPI Presentation Layer

Responsibility:
    HTTP interface for the application. Handles requests, responses,
    authentication and error shaping. No business logic.

Contains:
    - FastAPI routers (cv)
    - Error envelope model (Pydantic)
    - Bearer token dependency
    - Middleware configuration (CORS, logging)
"""
