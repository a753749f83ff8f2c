"""
Vector database schemas.

Pydantic models for vector search results and their metadata.
Used for type-safe vector store interactions.

Dependencies: pydantic
System role: Type definitions for vector operations
"""

from pydantic import BaseModel, Field


class VectorMetadata(BaseModel):
    """Metadata attached to each stored chunk."""

    chunk_id: str = Field(description="Deterministic chunk identifier")
    chunk_index: int = Field(description="Position of the chunk in the source document")
    source: str = Field(default="", description="Path of the source PDF")
    page: int | None = Field(default=None, description="Zero-based page number in the source PDF")
    start_index: int | None = Field(default=None, description="Character offset of the chunk within its page")


class VectorSearchResult(BaseModel):
    """Single result from vector search."""

    chunk_id: str = Field(description="Chunk identifier")
    content: str = Field(description="Chunk text content")
    metadata: VectorMetadata = Field(description="Chunk metadata")
    similarity_score: float = Field(description="Cosine similarity (1 - cosine distance)")
