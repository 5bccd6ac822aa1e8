"""
Repository base for model-backed data access.

Wraps an injected ORM model with uniform structured logging and
error normalization.
"""

from .domain.exceptions import (
    InstantiationError,
    InvalidArgumentError,
    QueryError,
    RepositoryException,
)
from .logging_config import (
    StructlogLogger,
    configure_from_settings,
    get_logger,
    setup_logging,
)
from .repositories.base_repository import AbstractRepository
from .repositories.interfaces import ILogger, IModel

__all__ = [
    "AbstractRepository",
    "ILogger",
    "IModel",
    "InstantiationError",
    "InvalidArgumentError",
    "QueryError",
    "RepositoryException",
    "StructlogLogger",
    "configure_from_settings",
    "get_logger",
    "setup_logging",
]

__version__ = "1.0.0"
