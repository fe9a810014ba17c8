"""
Repository layer - Data access abstractions and implementations.
"""

from .document_repository import IDocumentRepository, InMemoryDocumentRepository

__all__ = ["IDocumentRepository", "InMemoryDocumentRepository"]
