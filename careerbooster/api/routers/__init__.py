"""
API Routers Package

Contains all FastAPI routers grouped by functionality.

Available Routers:
    - cv_router: CV upload endpoint
"""

from .cv import router as cv_router

__all__ = ["cv_router"]
