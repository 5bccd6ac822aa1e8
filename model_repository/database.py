"""
Database configuration and session management.

Engine and session factory helpers for building SQLAlchemy-backed model
collaborators. No engine is created at import time.
"""

from typing import Any, Optional

import structlog
from sqlalchemy import create_engine, make_url
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from .config import get_settings

logger = structlog.get_logger(__name__)

Base: Any = declarative_base()


def get_connect_args(db_url: str) -> dict:
    """
    Get database-specific connection arguments.

    Args:
        db_url: Database connection URL

    Returns:
        Connection arguments dict
    """
    if db_url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


def safe_database_url(db_url: str) -> str:
    """Render ``db_url`` with the password masked."""
    return make_url(db_url).render_as_string(hide_password=True)


def create_db_engine(db_url: Optional[str] = None, echo: Optional[bool] = None, **kwargs: Any) -> Engine:
    """
    Create a SQLAlchemy engine.

    Args:
        db_url: Database URL, defaults to ``Settings.DATABASE_URL``
        echo: Echo SQL statements, defaults to ``Settings.DATABASE_ECHO``
        **kwargs: Extra keyword arguments for ``create_engine``

    Returns:
        Configured engine
    """
    settings = get_settings()
    url = db_url or settings.DATABASE_URL
    if echo is None:
        echo = settings.DATABASE_ECHO

    logger.info("database_engine_created", url=safe_database_url(url))

    return create_engine(
        url,
        connect_args=kwargs.pop("connect_args", get_connect_args(url)),
        echo=echo,
        **kwargs,
    )


def create_session_factory(engine: Engine) -> sessionmaker:
    """Create a session factory bound to ``engine``."""
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(engine: Engine) -> None:
    """
    Create all tables registered on :data:`Base`.

    Uses checkfirst so existing tables are left untouched.
    """
    logger.info("initializing_database_tables")
    Base.metadata.create_all(bind=engine, checkfirst=True)
