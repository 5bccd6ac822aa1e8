"""
Collaborator interfaces (Abstract Base Classes).

Define the capability sets a repository expects from the model and the
logger it is composed with. Implementations are not required to inherit
from these classes; any object exposing the same methods is accepted.
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional, Sequence


class IModel(ABC):
    """
    Abstract interface for a queryable, mutable collection of records.

    Mirrors the query surface of an ORM model class. Options and data are
    opaque to the repository; their shape is defined by the implementation.
    """

    @abstractmethod
    async def find_one(self, options: Mapping[str, Any]) -> Optional[Any]:
        """
        Find a single record.

        Args:
            options: Selector for the record

        Returns:
            Matching record, None if nothing matches
        """
        pass

    @abstractmethod
    async def find_all(self, options: Mapping[str, Any]) -> Sequence[Any]:
        """
        Find all records matching the selector.

        Args:
            options: Selector; an empty mapping selects everything

        Returns:
            Sequence of matching records
        """
        pass

    @abstractmethod
    async def create(self, data: Mapping[str, Any]) -> Any:
        """
        Create a record.

        Args:
            data: Field values of the new record

        Returns:
            The created record
        """
        pass

    @abstractmethod
    async def update(self, data: Mapping[str, Any], options: Mapping[str, Any]) -> Any:
        """
        Update the records matching the selector.

        The return value is implementation specific and is not relied upon.

        Args:
            data: Field values to set
            options: Selector for the records to update
        """
        pass

    @abstractmethod
    async def find_or_create(self, options: Mapping[str, Any]) -> Any:
        """
        Find a record or create it when missing, atomically where supported.

        Args:
            options: Selector, plus creation defaults

        Returns:
            The found or created record
        """
        pass


class ILogger(ABC):
    """
    Abstract interface for context-scoped structured logging.

    ``child`` returns a logger carrying the given context; the returned
    object must expose ``info(message)`` and ``error(message)``.
    """

    @abstractmethod
    def child(self, context: Mapping[str, Any]) -> Any:
        """
        Create a logger bound to additional context.

        Args:
            context: Key/value pairs attached to every record

        Returns:
            Logger exposing ``info`` and ``error``
        """
        pass
