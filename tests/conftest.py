"""
Test configuration and fixtures
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy import Column, Integer, String, create_engine
from sqlalchemy.pool import StaticPool

from model_repository.database import Base, create_session_factory
from model_repository.models.sqlalchemy_model import SQLAlchemyModel
from model_repository.repositories.base_repository import AbstractRepository

# Create in-memory SQLite database for testing
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = create_session_factory(engine)


class User(Base):
    """User table used by the SQLAlchemy model tests."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    email = Column(String(255), unique=True, nullable=False)
    name = Column(String(255), nullable=False)
    role = Column(String(50), nullable=False, default="member")


class UserRepository(AbstractRepository):
    """Concrete repository used across tests."""


@pytest.fixture
def mock_model():
    """Create mock model with async query methods."""
    model = MagicMock()
    model.find_one = AsyncMock(return_value=None)
    model.find_all = AsyncMock(return_value=[])
    model.create = AsyncMock()
    model.update = AsyncMock()
    model.find_or_create = AsyncMock()
    return model


@pytest.fixture
def mock_logger():
    """Create mock logger whose child() returns a shared child logger."""
    logger = MagicMock()
    logger.child.return_value = MagicMock()
    return logger


@pytest.fixture
def repository(mock_model, mock_logger):
    """Create repository with mock model and logger."""
    return UserRepository(mock_model, mock_logger)


@pytest.fixture
def silent_repository(mock_model):
    """Create repository without a logger."""
    return UserRepository(mock_model)


@pytest.fixture(scope="function")
def session_factory():
    """Create fresh tables for each test"""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    try:
        yield TestingSessionLocal
    finally:
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def user_model(session_factory):
    """Create SQLAlchemy model collaborator for the users table."""
    return SQLAlchemyModel(User, session_factory)


@pytest.fixture
def repository_class():
    """Concrete repository subclass."""
    return UserRepository


@pytest.fixture
def user_entity():
    """Declarative class backing the users table."""
    return User
