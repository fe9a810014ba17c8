"""
Service layer - Business logic orchestration.
"""

from .knowledge_base_service import KnowledgeBaseService

__all__ = ["KnowledgeBaseService"]
