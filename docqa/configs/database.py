"""
Database configuration settings.

Manages PostgreSQL connection parameters for SQLAlchemy.
The pgvector extension must be installable on the target server.

Dependencies: pydantic, pydantic_settings, sqlalchemy
System role: Database connection configuration for the vector store
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict
from sqlalchemy.engine import URL

from docqa.configs.base import BaseSettings


class DatabaseSettings(BaseSettings):
    """PostgreSQL database configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="POSTGRES_",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = Field(default="localhost", description="PostgreSQL host")
    port: int = Field(default=5432, description="PostgreSQL port")
    user: str = Field(default="postgres", description="PostgreSQL user")
    password: str = Field(default="postgres", description="PostgreSQL password")
    db: str = Field(default="docqa", description="PostgreSQL database name")

    pool_size: int = Field(default=5, description="Connection pool size")
    max_overflow: int = Field(default=10, description="Maximum overflow connections")
    pool_timeout: int = Field(default=30, description="Connection pool timeout in seconds")
    echo_sql: bool = Field(default=False, description="Echo SQL statements to logs")

    sslmode: str = Field(default="prefer", description="libpq SSL mode")

    @property
    def database_url(self) -> URL:
        """
        Construct PostgreSQL connection URL.

        Credentials are escaped by SQLAlchemy, so passwords may contain
        reserved characters such as @, / or #.

        Returns:
            URL: SQLAlchemy database URL (psycopg 3 driver)
        """
        return URL.create(
            drivername="postgresql+psycopg",
            username=self.user,
            password=self.password,
            host=self.host,
            port=self.port,
            database=self.db,
            query={"sslmode": self.sslmode},
        )
