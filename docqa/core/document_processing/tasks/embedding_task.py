"""
Embedding generation task.

Generates one vector per chunk through the hosted embedding model and
checks every vector has the configured dimension.

Dependencies: langchain_core.embeddings, hashlib
System role: Third stage of document ingestion pipeline
"""

import hashlib
import logging

from langchain_core.documents import Document
from langchain_core.embeddings import Embeddings

from docqa.core.exceptions import EmbeddingError
from ..models import Chunk

logger = logging.getLogger(__name__)


class EmbeddingTask:
    """Turn chunked Documents into embedded Chunk models."""

    def __init__(self, embeddings: Embeddings, dimension: int = 1536) -> None:
        """
        Initialize embedding task.

        Args:
            embeddings: LangChain embeddings client
            dimension: Expected vector length

        Raises:
            ValueError: When dimension is not positive
        """
        if dimension <= 0:
            raise ValueError("dimension must be positive")

        self._embeddings = embeddings
        self._dimension = dimension

    def embed(self, documents: list[Document]) -> list[Chunk]:
        """
        Generate embeddings for documents.

        All vectors are computed before any chunk is returned, so a failure
        leaves nothing half-built.

        Args:
            documents: LangChain Documents to embed

        Returns:
            list[Chunk]: Chunks with embeddings

        Raises:
            EmbeddingError: When the embedding call fails or returns wrong-sized vectors
        """
        if not documents:
            return []

        texts = [doc.page_content for doc in documents]
        try:
            vectors = self._embeddings.embed_documents(texts)
        except Exception as e:
            raise EmbeddingError(f"Failed to generate embeddings: {e}") from e

        if len(vectors) != len(documents):
            raise EmbeddingError(
                "Embedding count does not match chunk count",
                details={"expected": len(documents), "received": len(vectors)},
            )

        chunks = []
        for doc, vector in zip(documents, vectors):
            if len(vector) != self._dimension:
                raise EmbeddingError(
                    "Embedding has unexpected dimension",
                    details={"expected": self._dimension, "received": len(vector)},
                )
            chunks.append(
                Chunk(
                    id=self._generate_chunk_id(doc.page_content, doc.metadata),
                    content=doc.page_content,
                    metadata=dict(doc.metadata),
                    embedding=[float(value) for value in vector],
                )
            )

        logger.info(f"{__name__}:embed - Embedded {len(chunks)} chunks (dimension={self._dimension})")
        return chunks

    def _generate_chunk_id(self, content: str, metadata: dict) -> str:
        """
        Generate deterministic chunk ID from content and metadata.

        Args:
            content: Chunk text content
            metadata: Chunk metadata

        Returns:
            str: SHA-256 hash prefix of content + source + page + start_index
        """
        source = metadata.get("source", "")
        page = metadata.get("page", 0)
        start_index = metadata.get("start_index", 0)
        hash_input = f"{content}:{source}:{page}:{start_index}"
        return hashlib.sha256(hash_input.encode()).hexdigest()[:16]
