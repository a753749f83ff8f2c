"""
Database boundary layer: ORM model, schema script and connection management.

Exports:
  - Base, TimestampMixin: Model building blocks
  - ChunkRecord: Embedded document chunk
  - get_engine(), get_session_factory(): Connection management
  - initialize_schema(): Idempotent schema bootstrap

Dependencies: sqlalchemy, pgvector, docqa.configs
System role: Persistent storage for embedded document chunks
"""

from docqa.boundary.db.base import Base, TimestampMixin
from docqa.boundary.db.chunk_model import CHUNKS_TABLE, ChunkRecord
from docqa.boundary.db.connection import get_engine, get_session_factory
from docqa.boundary.db.schema import initialize_schema, render_schema

__all__ = [
    "Base",
    "TimestampMixin",
    "CHUNKS_TABLE",
    "ChunkRecord",
    "get_engine",
    "get_session_factory",
    "initialize_schema",
    "render_schema",
]
