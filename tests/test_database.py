"""
Tests for database helpers
"""

from unittest.mock import patch

from sqlalchemy import inspect, text
from sqlalchemy.orm import Session
from structlog.testing import capture_logs

from model_repository.database import (
    Base,
    create_db_engine,
    create_session_factory,
    get_connect_args,
    init_db,
    safe_database_url,
)


class TestDatabaseHelpers:
    """Test engine and session helpers"""

    def test_sqlite_connect_args(self):
        """Test SQLite gets check_same_thread disabled"""
        assert get_connect_args("sqlite:///:memory:") == {"check_same_thread": False}

    def test_other_connect_args(self):
        """Test other backends get no extra arguments"""
        assert get_connect_args("postgresql://user:pw@localhost/db") == {}

    def test_session_factory_yields_sessions(self):
        """Test the factory produces working sessions"""
        engine = create_db_engine("sqlite:///:memory:", echo=False)
        factory = create_session_factory(engine)

        with factory() as session:
            assert isinstance(session, Session)
            assert session.execute(text("SELECT 1")).scalar() == 1

    def test_init_db_creates_tables(self, user_entity):
        """Test init_db creates registered tables"""
        engine = create_db_engine("sqlite:///:memory:", echo=False)

        init_db(engine)

        assert user_entity.__tablename__ in inspect(engine).get_table_names()
        assert user_entity.__table__ in Base.metadata.sorted_tables

    def test_safe_database_url_masks_password(self):
        """Test credentials are masked but user and host kept"""
        safe = safe_database_url("postgresql://user:s3cret@db:5432/app")

        assert "s3cret" not in safe
        assert safe == "postgresql://user:***@db:5432/app"

    def test_engine_log_hides_password(self):
        """Test the engine creation record does not leak the password"""
        with patch("model_repository.database.create_engine") as mock_create_engine:
            with capture_logs() as captured:
                engine = create_db_engine("postgresql://user:s3cret@db:5432/app", echo=False)

        assert engine is mock_create_engine.return_value
        assert captured[0]["event"] == "database_engine_created"
        assert "s3cret" not in captured[0]["url"]
        assert captured[0]["url"].startswith("postgresql://user:***@db")
        assert mock_create_engine.call_args.args[0] == "postgresql://user:s3cret@db:5432/app"
