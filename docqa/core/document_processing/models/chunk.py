"""
Chunk domain model for document processing pipeline.

Represents a document chunk with deterministic ID, content, metadata, and embedding.

Dependencies: pydantic
System role: Data structure for document chunks in ingestion pipeline
"""

from pydantic import BaseModel, ConfigDict, Field


class Chunk(BaseModel):
    """Document chunk with optional embedding vector."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Deterministic chunk identifier (content hash)")
    content: str = Field(description="Chunk text content")
    metadata: dict = Field(default_factory=dict, description="Chunk metadata (source, page, chunk_index, start_index)")
    embedding: list[float] | None = Field(default=None, description="Embedding vector")
