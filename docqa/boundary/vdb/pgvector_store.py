"""
PostgreSQL + pgvector vector store.

Stores embedded chunks in the document_chunks table and answers nearest
neighbour queries ordered by cosine distance (served by the HNSW index).
Query embeddings are computed with the same model used at ingestion.

Dependencies: sqlalchemy, pgvector, langchain_core.embeddings
System role: Vector store for RAG ingestion and retrieval
"""

import logging

from langchain_core.embeddings import Embeddings
from sqlalchemy import func, select
from sqlalchemy.orm import sessionmaker

from docqa.boundary.db.chunk_model import ChunkRecord
from docqa.boundary.vdb.vector_schemas import VectorMetadata, VectorSearchResult
from docqa.core.document_processing.models import Chunk
from docqa.core.exceptions import VectorStoreError

logger = logging.getLogger(__name__)


class PgVectorStore:
    """
    pgvector-backed chunk store.

    Each operation opens its own short-lived session. Inserts for one
    add_chunks call share a single transaction.
    """

    def __init__(self, session_factory: sessionmaker, embeddings: Embeddings) -> None:
        """
        Initialize store.

        Args:
            session_factory: SQLAlchemy session factory bound to the database
            embeddings: Embedding model used to embed search queries
        """
        self._session_factory = session_factory
        self._embeddings = embeddings

    def count(self) -> int:
        """
        Count stored chunks.

        Returns:
            int: Number of rows in the chunk table

        Raises:
            VectorStoreError: When the query fails
        """
        try:
            with self._session_factory() as session:
                total = session.scalar(select(func.count()).select_from(ChunkRecord))
        except Exception as e:
            logger.error(f"{__name__}:count - FAILED: {type(e).__name__}: {e}")
            raise VectorStoreError(f"Failed to count chunks: {e}", operation="count") from e

        return int(total or 0)

    def add_chunks(self, chunks: list[Chunk]) -> list[str]:
        """
        Insert embedded chunks in one transaction.

        Either every chunk is stored or none is.

        Args:
            chunks: Chunks with embeddings populated

        Returns:
            list[str]: Stored chunk IDs in insertion order

        Raises:
            ValueError: When chunks is empty or a chunk has no embedding
            VectorStoreError: When the insert fails
        """
        if not chunks:
            raise ValueError("No chunks to store")

        missing = [chunk.id for chunk in chunks if chunk.embedding is None]
        if missing:
            raise ValueError(f"Chunks without embeddings: {missing[:5]}")

        records = [
            ChunkRecord(
                id=chunk.id,
                content=chunk.content,
                chunk_metadata=chunk.metadata,
                embedding=chunk.embedding,
                chunk_index=chunk.metadata.get("chunk_index", position),
            )
            for position, chunk in enumerate(chunks)
        ]

        try:
            with self._session_factory.begin() as session:
                session.add_all(records)
        except Exception as e:
            logger.error(f"{__name__}:add_chunks - FAILED: {type(e).__name__}: {e}")
            raise VectorStoreError(
                f"Failed to store chunks: {e}",
                operation="insert",
                details={"chunk_count": len(chunks)},
            ) from e

        logger.info(f"{__name__}:add_chunks - Stored {len(records)} chunks")
        return [record.id for record in records]

    def similarity_search(self, query: str, k: int = 4) -> list[VectorSearchResult]:
        """
        Find the k chunks closest to a query.

        Args:
            query: Search query text
            k: Number of results to return

        Returns:
            list[VectorSearchResult]: Results, most similar first

        Raises:
            VectorStoreError: When embedding the query or searching fails
        """
        logger.info(f"{__name__}:similarity_search - START: query_len={len(query)}, k={k}")
        try:
            query_embedding = self._embeddings.embed_query(query)
        except Exception as e:
            logger.error(f"{__name__}:similarity_search - Query embedding FAILED: {type(e).__name__}: {e}")
            raise VectorStoreError(f"Failed to embed query: {e}", operation="embed_query") from e

        return self.similarity_search_by_vector(query_embedding, k=k)

    def similarity_search_by_vector(
        self,
        embedding: list[float],
        k: int = 4,
    ) -> list[VectorSearchResult]:
        """
        Find the k chunks closest to an embedding.

        Args:
            embedding: Query embedding vector
            k: Number of results to return

        Returns:
            list[VectorSearchResult]: Results ordered by ascending cosine distance

        Raises:
            ValueError: When k is not positive
            VectorStoreError: When the query fails
        """
        if k < 1:
            raise ValueError(f"k must be positive, got {k}")

        distance = ChunkRecord.embedding.cosine_distance(embedding).label("distance")
        statement = select(ChunkRecord, distance).order_by(distance).limit(k)

        try:
            with self._session_factory() as session:
                rows = session.execute(statement).all()
        except Exception as e:
            logger.error(f"{__name__}:similarity_search_by_vector - FAILED: {type(e).__name__}: {e}")
            raise VectorStoreError(
                f"Similarity search failed: {e}",
                operation="search",
                details={"k": k},
            ) from e

        results = [self._to_result(record, float(dist)) for record, dist in rows]
        logger.info(f"{__name__}:similarity_search_by_vector - Retrieved {len(results)} chunks")
        return results

    @staticmethod
    def _to_result(record: ChunkRecord, distance: float) -> VectorSearchResult:
        metadata = record.chunk_metadata or {}
        return VectorSearchResult(
            chunk_id=record.id,
            content=record.content,
            metadata=VectorMetadata(
                chunk_id=record.id,
                chunk_index=record.chunk_index,
                source=metadata.get("source", ""),
                page=metadata.get("page"),
                start_index=metadata.get("start_index"),
            ),
            similarity_score=1.0 - distance,
        )
