"""
Domain layer - Core business entities and domain logic.

This layer contains the knowledge-base documents, search filters and
result wrappers, independent of any infrastructure or framework concerns.
"""
