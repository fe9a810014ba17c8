"""
API routers for knowledge base endpoints.
"""

from . import article_router, health_router

__all__ = ["article_router", "health_router"]
