"""
Knowledge base search service for housing-management support tickets.
"""

__version__ = "1.0.0"
