"""
Base repository wrapping an ORM model.

Subclasses get logged, error-normalized versions of the model's query
methods. The repository holds no record state and performs no caching.
"""

from typing import Any, Mapping, Optional, Sequence

import structlog

from ..domain.exceptions import InstantiationError, InvalidArgumentError, QueryError
from .interfaces import ILogger, IModel

logger = structlog.get_logger(__name__)


class AbstractRepository:
    """
    Base class for model-backed repositories.

    Must be subclassed. Every wrapped call is logged through the optional
    logger and failures are re-raised as :class:`QueryError`, except for
    :meth:`find_or_create` which neither logs nor wraps.
    """

    def __init__(self, model: Optional[IModel] = None, logger: Optional[ILogger] = None):
        """
        Initialize repository.

        Args:
            model: Model collaborator the query methods delegate to
            logger: Optional structured logger exposing ``child(context)``

        Raises:
            InstantiationError: If ``AbstractRepository`` itself is instantiated
            InvalidArgumentError: If no model is given
        """
        if type(self) is AbstractRepository:
            raise InstantiationError(AbstractRepository.__name__)
        if model is None:
            raise InvalidArgumentError("model")

        self.model = model
        self.logger = logger

    def _log(self, level: str, context: Mapping[str, Any], message: str) -> None:
        """Emit one record through the injected logger, best-effort."""
        if self.logger is None:
            return
        try:
            getattr(self.logger.child(dict(context)), level)(message)
        except Exception:
            logger.warning(
                "repository_log_failed",
                repository=type(self).__name__,
                log_message=message,
                exc_info=True,
            )

    async def find_one(self, options: Mapping[str, Any]) -> Optional[Any]:
        """
        Find a single record through the model.

        Args:
            options: Selector passed to the model unchanged

        Returns:
            The model's result, None when nothing matches

        Raises:
            QueryError: If the model call fails
        """
        try:
            item = await self.model.find_one(options)
        except Exception as e:
            self._log("error", {"options": options, "error": e}, "FindOne request")
            raise QueryError("find_one") from e

        self._log("info", {"options": options, "item": item}, "FindOne request")
        return item

    async def find_all(self, options: Optional[Mapping[str, Any]] = None) -> Sequence[Any]:
        """
        Find all records through the model.

        Args:
            options: Selector; defaults to an empty mapping (select all)

        Returns:
            Sequence of records as returned by the model

        Raises:
            QueryError: If the model call fails
        """
        if options is None:
            options = {}

        try:
            items = await self.model.find_all(options)
        except Exception as e:
            self._log("error", {"options": options, "error": e}, "FindAll request")
            raise QueryError("find_all") from e

        self._log("info", {"options": options, "items": items}, "FindAll request")
        return items

    async def create(self, data: Mapping[str, Any]) -> Any:
        """
        Create a record through the model.

        Raises:
            QueryError: If the model call fails
        """
        try:
            item = await self.model.create(data)
        except Exception as e:
            self._log("error", {"data": data, "error": e}, "Create request")
            raise QueryError("create") from e

        self._log("info", {"item": item, "data": data}, "Create request")
        return item

    async def update(self, data: Mapping[str, Any], options: Mapping[str, Any]) -> Optional[Any]:
        """
        Update records, then re-fetch one with the same options.

        The model's update result is discarded since it does not carry the
        mutated record. The re-fetch goes through ``model.find_one``, so with
        a non-unique selector the first match is returned, and None when the
        selector no longer matches anything.

        Args:
            data: Field values to set
            options: Selector for the records to update

        Returns:
            Record returned by the follow-up ``find_one``

        Raises:
            QueryError: If either model call fails
        """
        try:
            await self.model.update(data, options)
            item = await self.model.find_one(options)
        except Exception as e:
            self._log(
                "error",
                {"data": data, "options": options, "error": e},
                "Update request",
            )
            raise QueryError("update") from e

        self._log(
            "info",
            {"item": item, "data": data, "options": options},
            "Update request",
        )
        return item

    async def create_or_update(self, data: Mapping[str, Any], options: Mapping[str, Any]) -> Optional[Any]:
        """
        Update the record matching ``options``, or create one from ``data``.

        Not atomic: a concurrent writer may create or delete the record
        between the lookup and the write.

        Raises:
            QueryError: Propagated from find_one, update or create
        """
        item = await self.find_one(options)
        if item is not None:
            return await self.update(data, options)

        return await self.create(data)

    async def find_or_create(self, options: Mapping[str, Any]) -> Any:
        """
        Delegate to the model's native find-or-create.

        Unlike the other operations this one is not logged and model
        errors propagate unwrapped.
        """
        return await self.model.find_or_create(options)
