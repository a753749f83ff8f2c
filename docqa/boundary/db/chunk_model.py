"""
Document chunk ORM model.

Maps the document_chunks table created by the schema script.
Rows are inserted once at ingestion and only read afterwards.

Dependencies: sqlalchemy, pgvector
System role: Persistent representation of embedded document chunks
"""

from typing import Any

from pgvector.sqlalchemy import Vector
from sqlalchemy import Integer, String, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from docqa.boundary.db.base import Base, TimestampMixin

CHUNKS_TABLE = "document_chunks"


class ChunkRecord(TimestampMixin, Base):
    """
    One embedded chunk of the reference document.

    Attributes:
        id: Deterministic chunk identifier (content hash prefix)
        content: Chunk text
        chunk_metadata: Source path, page and offsets (column "metadata")
        embedding: Embedding vector; dimension is fixed by the schema script
        chunk_index: Position of the chunk in the source document
    """

    __tablename__ = CHUNKS_TABLE

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    chunk_metadata: Mapped[dict[str, Any]] = mapped_column(
        "metadata",
        JSONB,
        nullable=False,
        default=dict,
    )
    embedding: Mapped[list[float]] = mapped_column(Vector(), nullable=False)
    chunk_index: Mapped[int] = mapped_column(Integer, nullable=False)

    def __repr__(self) -> str:
        return f"<ChunkRecord id={self.id} chunk_index={self.chunk_index}>"
