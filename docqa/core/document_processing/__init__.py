"""
Document processing pipeline for startup ingestion.

Parses the reference PDF, splits it into token-bounded chunks, embeds them
and hands them to the vector store.

Dependencies: langchain_community, langchain_text_splitters, langchain_google_genai, pydantic
System role: Document ingestion pipeline entrypoint
"""

from .entrypoint import ChunkStore, StartupLoader
from .models import Chunk, IngestionResult

__all__ = [
    "StartupLoader",
    "ChunkStore",
    "Chunk",
    "IngestionResult",
]
