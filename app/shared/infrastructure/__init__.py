"""
Infrastructure layer package for the reminder service.
Provides the async database engine and request-scoped sessions.
"""

__all__ = []
