"""
Custom exceptions for the knowledge base domain.

These exceptions represent domain-level errors and are independent
of infrastructure concerns (HTTP, files, etc.). The search engine itself
never raises them: "no match" is an empty result, not an error.
"""

from typing import Any, Optional


class KnowledgeBaseException(Exception):
    """Base exception for all knowledge base errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class DocumentNotFoundException(KnowledgeBaseException):
    """Raised when an article id is not present in the document store."""

    def __init__(self, document_id: str):
        super().__init__(
            message=f"Article not found: {document_id}",
            details={"id": document_id},
        )


class ValidationException(KnowledgeBaseException):
    """Raised when input validation fails."""

    def __init__(self, field: str, value: Any, reason: str):
        message = f"Validation failed for {field}: {reason}"
        super().__init__(
            message=message,
            details={"field": field, "value": str(value), "reason": reason},
        )


class DataLoadException(KnowledgeBaseException):
    """Raised when seed data cannot be read or parsed."""

    def __init__(self, source: str, reason: Optional[str] = None):
        message = f"Failed to load data from '{source}'"
        if reason:
            message += f": {reason}"
        super().__init__(message=message, details={"source": source, "reason": reason})
