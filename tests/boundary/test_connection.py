"""Tests for engine and session factory creation."""

from sqlalchemy.orm import sessionmaker

from docqa.boundary.db.connection import get_engine, get_session_factory
from docqa.configs.database import DatabaseSettings


class TestGetEngine:
    """Test get_engine without opening a connection."""

    def test_password_with_reserved_characters(self) -> None:
        """Should hand the unescaped password to the driver."""
        engine = get_engine(DatabaseSettings(password="p@ss/w#rd", host="db.internal"))

        try:
            assert engine.url.password == "p@ss/w#rd"
            assert engine.url.host == "db.internal"
            assert engine.url.drivername == "postgresql+psycopg"
        finally:
            engine.dispose()

    def test_pool_settings(self) -> None:
        """Should size the pool from settings."""
        engine = get_engine(DatabaseSettings(pool_size=3))

        try:
            assert engine.pool.size() == 3
        finally:
            engine.dispose()


class TestGetSessionFactory:
    """Test get_session_factory."""

    def test_sessions_keep_loaded_state(self) -> None:
        """Should disable expire_on_commit and autoflush."""
        engine = get_engine(DatabaseSettings())
        try:
            factory = get_session_factory(engine)

            assert isinstance(factory, sessionmaker)
            assert factory.kw["expire_on_commit"] is False
            assert factory.kw["autoflush"] is False
            assert factory.kw["bind"] is engine
        finally:
            engine.dispose()
