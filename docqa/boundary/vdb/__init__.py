"""
Vector database boundary layer.

Provides the pgvector store used for ingestion and retrieval.

Dependencies: sqlalchemy, pgvector, langchain_core
System role: Vector store adapter for RAG retrieval
"""

from docqa.boundary.vdb.pgvector_store import PgVectorStore
from docqa.boundary.vdb.vector_schemas import VectorMetadata, VectorSearchResult

__all__ = [
    "PgVectorStore",
    "VectorMetadata",
    "VectorSearchResult",
]
