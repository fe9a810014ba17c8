"""
Shared dependencies for the application.

Provides dependency injection functions used across routers.
"""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .services.knowledge_base_service import KnowledgeBaseService

# Global service instance (set by main app)
_kb_service: Optional["KnowledgeBaseService"] = None


def set_kb_service(service: Optional["KnowledgeBaseService"]) -> None:
    """
    Set the global knowledge base service instance.

    Called by main app during startup and shutdown.
    """
    global _kb_service
    _kb_service = service


async def get_kb_service() -> "KnowledgeBaseService":
    """
    Get knowledge base service instance for dependency injection.

    Used by all routers that need the service.
    """
    if _kb_service is None:
        raise RuntimeError("Knowledge base service not initialized")
    return _kb_service


async def get_optional_kb_service() -> Optional["KnowledgeBaseService"]:
    """
    Get knowledge base service instance, or None before startup completes.

    Used by probes that report not-ready instead of failing.
    """
    return _kb_service
