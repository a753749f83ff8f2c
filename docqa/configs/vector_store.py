"""
Vector store configuration settings.

Manages pgvector storage and embedding model settings.
The embedding dimension is fixed at schema creation time.

Dependencies: pydantic, pydantic_settings
System role: Vector database configuration for RAG retrieval
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from docqa.configs.base import BaseSettings


class VectorStoreSettings(BaseSettings):
    """pgvector store configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="VECTOR_STORE_",
        case_sensitive=False,
        extra="ignore",
    )

    embedding_model: str = Field(
        default="models/gemini-embedding-001",
        description="Google Gemini embedding model ID (supports reduced output dimensions)",
    )
    embedding_dimension: int = Field(
        default=1536,
        gt=0,
        le=2000,
        description="Embedding vector dimension (HNSW indexes support at most 2000)",
    )

    top_k: int = Field(default=4, ge=1, description="Number of passages to retrieve per question")

    initialize_schema: bool = Field(
        default=True,
        description="Run the schema script on startup",
    )
