"""
Database connection management.

Provides the SQLAlchemy engine and session factory used by the vector store.

Dependencies: sqlalchemy, psycopg, docqa.configs
System role: Database connection lifecycle management
"""

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import QueuePool

from docqa.configs import get_settings
from docqa.configs.database import DatabaseSettings


def get_engine(db_config: DatabaseSettings | None = None) -> Engine:
    """
    Create SQLAlchemy engine with connection pooling and health checks.

    No connection is opened until the engine is first used.

    Args:
        db_config: Database settings (uses application settings if None)

    Returns:
        Engine: Configured SQLAlchemy engine with pooling

    Raises:
        ArgumentError: If database URL is invalid or engine creation fails
    """
    db_config = db_config or get_settings().database

    return create_engine(
        db_config.database_url,
        echo=db_config.echo_sql,
        poolclass=QueuePool,
        pool_size=db_config.pool_size,
        max_overflow=db_config.max_overflow,
        pool_timeout=db_config.pool_timeout,
        pool_pre_ping=True,  # Verify connections before using
    )


def get_session_factory(engine: Engine) -> sessionmaker:
    """
    Create session factory for database operations.

    Sessions use autoflush=False and expire_on_commit=False so that records
    stay readable after the transaction that loaded them ends.

    Args:
        engine: Engine to bind sessions to

    Returns:
        sessionmaker: Session factory configured for manual transaction control

    Usage:
        SessionFactory = get_session_factory(engine)
        with SessionFactory.begin() as session:
            session.add(obj)
    """
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
