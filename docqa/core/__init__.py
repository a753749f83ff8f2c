"""
Core business logic module.

Contains the exception hierarchy, the startup ingestion pipeline and the
question answering service.
"""

from docqa.core.exceptions import (
    DocQAException,
    ConfigurationError,
    ValidationError,
    DocumentProcessingError,
    ParsingError,
    ChunkingError,
    EmbeddingError,
    VectorStoreError,
    RetrievalError,
    GenerationError,
)

__all__ = [
    "DocQAException",
    "ConfigurationError",
    "ValidationError",
    "DocumentProcessingError",
    "ParsingError",
    "ChunkingError",
    "EmbeddingError",
    "VectorStoreError",
    "RetrievalError",
    "GenerationError",
]
