"""
Custom exceptions for the repository layer.

These exceptions normalize failures of the underlying model so callers
handle a single error type per failure class, independent of the ORM.
"""

from typing import Optional


class RepositoryException(Exception):
    """Base exception for all repository errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InstantiationError(RepositoryException):
    """Raised when an abstract repository class is instantiated directly."""

    def __init__(self, class_name: str):
        message = (
            f'Abstract class "{class_name}" cannot be instantiated directly'
        )
        super().__init__(message=message, details={"class": class_name})


class InvalidArgumentError(RepositoryException):
    """Raised when a required constructor argument is missing."""

    def __init__(self, argument: str):
        message = f"{argument.capitalize()} cannot be empty"
        super().__init__(message=message, details={"argument": argument})


class QueryError(RepositoryException):
    """
    Raised when a wrapped model call fails.

    The message is fixed per operation and never carries the original
    error text. The original error is available as ``__cause__``.
    """

    def __init__(self, operation: str):
        self.operation = operation
        message = f"Error with {operation} function"
        super().__init__(message=message, details={"operation": operation})
