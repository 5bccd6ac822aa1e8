"""
SQLAlchemy implementation of the model collaborator.

Exposes a declarative class through the find/create/update surface a
repository delegates to. Options follow the shape of ORM query options:

    {
        "where": {"name": "a"},       # equality filters
        "order_by": ["-id", "name"],  # "-" prefix sorts descending
        "limit": 10,
        "offset": 0,
        "defaults": {...},            # find_or_create only
    }
"""

from typing import Any, Callable, List, Mapping, Optional, Tuple

import structlog
from sqlalchemy import inspect as sa_inspect
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Query, Session

from ..repositories.interfaces import IModel

logger = structlog.get_logger(__name__)

OPTION_KEYS = frozenset({"where", "order_by", "limit", "offset", "defaults"})


class SQLAlchemyModel(IModel):
    """
    Model collaborator backed by a SQLAlchemy declarative class.

    Each call runs in its own session, committed on success and rolled back
    on failure. Returned instances are detached with their attributes loaded.
    """

    def __init__(self, entity: Any, session_factory: Callable[[], Session]):
        """
        Initialize model.

        Args:
            entity: SQLAlchemy declarative class
            session_factory: Callable returning a new session
        """
        self.entity = entity
        self.session_factory = session_factory
        self._columns = {attr.key for attr in sa_inspect(entity).column_attrs}

    def _column(self, name: str) -> Any:
        if name not in self._columns:
            raise ValueError(f"Unknown column for {self.entity.__name__}: {name}")
        return getattr(self.entity, name)

    def _values(self, data: Mapping[str, Any]) -> dict:
        return {self._column(name).key: value for name, value in data.items()}

    def _check_options(self, options: Optional[Mapping[str, Any]]) -> Mapping[str, Any]:
        options = options or {}
        unknown = set(options) - OPTION_KEYS
        if unknown:
            raise ValueError(f"Unknown options: {', '.join(sorted(unknown))}")
        return options

    def _filtered(self, session: Session, where: Optional[Mapping[str, Any]]) -> Query:
        query = session.query(self.entity)
        for name, value in (where or {}).items():
            query = query.filter(self._column(name) == value)
        return query

    def _build_query(self, session: Session, options: Optional[Mapping[str, Any]]) -> Query:
        """Build a query from the where/order_by/limit/offset options."""
        options = self._check_options(options)
        query = self._filtered(session, options.get("where"))

        order_by = options.get("order_by")
        if order_by:
            if isinstance(order_by, str):
                order_by = [order_by]
            for name in order_by:
                column = self._column(name.lstrip("-"))
                query = query.order_by(column.desc() if name.startswith("-") else column.asc())

        if options.get("offset") is not None:
            query = query.offset(options["offset"])
        if options.get("limit") is not None:
            query = query.limit(options["limit"])

        return query

    async def find_one(self, options: Mapping[str, Any]) -> Optional[Any]:
        """Return the first matching instance, or None."""
        with self.session_factory() as session:
            return self._build_query(session, options).first()

    async def find_all(self, options: Mapping[str, Any]) -> List[Any]:
        """Return all matching instances."""
        with self.session_factory() as session:
            return self._build_query(session, options).all()

    async def create(self, data: Mapping[str, Any]) -> Any:
        """Insert a new instance built from ``data``."""
        with self.session_factory() as session:
            try:
                instance = self.entity(**self._values(data))
                session.add(instance)
                session.commit()
                session.refresh(instance)
                return instance
            except Exception as e:
                session.rollback()
                logger.error("model_create_failed", entity=self.entity.__name__, error=str(e))
                raise

    async def update(self, data: Mapping[str, Any], options: Mapping[str, Any]) -> int:
        """
        Bulk update the rows matching ``options["where"]``.

        Returns:
            Number of affected rows

        Raises:
            ValueError: If ``options`` has no ``where`` mapping
        """
        where = self._check_options(options).get("where")
        if not where:
            raise ValueError("update requires a 'where' option")

        with self.session_factory() as session:
            try:
                count = self._filtered(session, where).update(
                    self._values(data), synchronize_session=False
                )
                session.commit()
                return count
            except Exception as e:
                session.rollback()
                logger.error("model_update_failed", entity=self.entity.__name__, error=str(e))
                raise

    async def find_or_create(self, options: Mapping[str, Any]) -> Tuple[Any, bool]:
        """
        Find the instance matching ``where`` or create it with ``defaults``.

        A unique constraint violation on insert is treated as a concurrent
        creation: the row is looked up again and returned as found.

        Returns:
            Tuple of (instance, created)

        Raises:
            ValueError: If ``options`` has no ``where`` mapping
        """
        options = self._check_options(options)
        where = options.get("where")
        if not where:
            raise ValueError("find_or_create requires a 'where' option")

        with self.session_factory() as session:
            instance = self._filtered(session, where).first()
            if instance is not None:
                return instance, False

            values = {**(options.get("defaults") or {}), **where}
            try:
                instance = self.entity(**self._values(values))
                session.add(instance)
                session.commit()
                session.refresh(instance)
                return instance, True
            except IntegrityError:
                session.rollback()
                instance = self._filtered(session, where).first()
                if instance is None:
                    raise
                return instance, False
            except Exception as e:
                session.rollback()
                logger.error("model_find_or_create_failed", entity=self.entity.__name__, error=str(e))
                raise
