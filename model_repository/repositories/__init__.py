"""
Repository layer - Data access abstractions.

This layer wraps model collaborators with logging and error handling,
hiding ORM details from the business logic.
"""

from .base_repository import AbstractRepository
from .interfaces import ILogger, IModel

__all__ = ["AbstractRepository", "ILogger", "IModel"]
