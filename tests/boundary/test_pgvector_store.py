"""Tests for PgVectorStore with mocked SQLAlchemy sessions."""

from unittest.mock import MagicMock

import pytest
from sqlalchemy.dialects import postgresql
from sqlalchemy.exc import OperationalError

from docqa.boundary.db.chunk_model import ChunkRecord
from docqa.boundary.vdb.pgvector_store import PgVectorStore
from docqa.core.exceptions import VectorStoreError

from tests.conftest import TEST_DIMENSION


@pytest.fixture
def session() -> MagicMock:
    return MagicMock()


@pytest.fixture
def session_factory(session: MagicMock) -> MagicMock:
    """Session factory whose plain and begin() contexts yield the same session."""
    factory = MagicMock()
    factory.return_value.__enter__.return_value = session
    factory.begin.return_value.__enter__.return_value = session
    return factory


@pytest.fixture
def store(session_factory: MagicMock, keyword_embeddings) -> PgVectorStore:
    return PgVectorStore(session_factory, keyword_embeddings)


def _record(chunk_id: str = "abc", content: str = "Workers build comb.") -> ChunkRecord:
    return ChunkRecord(
        id=chunk_id,
        content=content,
        chunk_metadata={"source": "guide.pdf", "page": 2, "start_index": 40},
        embedding=[0.1] * TEST_DIMENSION,
        chunk_index=7,
    )


class TestCount:
    """Test PgVectorStore.count."""

    def test_returns_row_count(self, store: PgVectorStore, session: MagicMock) -> None:
        """Should return the scalar count."""
        session.scalar.return_value = 12

        assert store.count() == 12

    def test_none_means_zero(self, store: PgVectorStore, session: MagicMock) -> None:
        """Should treat a missing scalar as zero rows."""
        session.scalar.return_value = None

        assert store.count() == 0

    def test_failure_is_wrapped(self, store: PgVectorStore, session: MagicMock) -> None:
        """Should raise VectorStoreError with the count operation."""
        session.scalar.side_effect = OperationalError("SELECT", {}, Exception("refused"))

        with pytest.raises(VectorStoreError) as exc_info:
            store.count()

        assert exc_info.value.details["operation"] == "count"


class TestAddChunks:
    """Test PgVectorStore.add_chunks."""

    def test_inserts_in_one_transaction(
        self, store: PgVectorStore, session_factory: MagicMock, session: MagicMock, make_chunk
    ) -> None:
        """Should add every record inside a single begin() block."""
        chunks = [make_chunk("first passage", 0), make_chunk("second passage", 1)]

        ids = store.add_chunks(chunks)

        assert ids == ["chunk-0", "chunk-1"]
        session_factory.begin.assert_called_once()
        session.add_all.assert_called_once()
        records = session.add_all.call_args.args[0]
        assert [record.chunk_index for record in records] == [0, 1]
        assert records[1].chunk_metadata["source"] == "guide.pdf"
        assert len(records[0].embedding) == TEST_DIMENSION

    def test_empty_list_raises(self, store: PgVectorStore) -> None:
        """Should refuse an empty batch."""
        with pytest.raises(ValueError, match="No chunks"):
            store.add_chunks([])

    def test_missing_embedding_raises(self, store: PgVectorStore, session: MagicMock) -> None:
        """Should refuse chunks without embeddings before opening a session."""
        from docqa.core.document_processing.models import Chunk

        with pytest.raises(ValueError, match="without embeddings"):
            store.add_chunks([Chunk(id="x", content="no vector")])

        session.add_all.assert_not_called()

    def test_failure_is_wrapped(self, store: PgVectorStore, session: MagicMock, make_chunk) -> None:
        """Should raise VectorStoreError with the insert operation."""
        session.add_all.side_effect = RuntimeError("disk full")

        with pytest.raises(VectorStoreError) as exc_info:
            store.add_chunks([make_chunk("passage")])

        assert exc_info.value.details == {"operation": "insert", "chunk_count": 1}


class TestSimilaritySearch:
    """Test PgVectorStore similarity search."""

    def test_converts_distance_to_similarity(self, store: PgVectorStore, session: MagicMock) -> None:
        """Should map rows to results with 1 - distance scores."""
        session.execute.return_value.all.return_value = [(_record(), 0.25)]

        results = store.similarity_search_by_vector([0.1] * TEST_DIMENSION, k=3)

        assert len(results) == 1
        result = results[0]
        assert result.chunk_id == "abc"
        assert result.similarity_score == pytest.approx(0.75)
        assert result.metadata.chunk_index == 7
        assert result.metadata.page == 2
        assert result.metadata.start_index == 40

    def test_orders_by_cosine_distance(self, store: PgVectorStore, session: MagicMock) -> None:
        """Should issue an ORDER BY on the <=> operator with LIMIT k."""
        session.execute.return_value.all.return_value = []

        store.similarity_search_by_vector([0.1] * TEST_DIMENSION, k=4)

        statement = session.execute.call_args.args[0]
        sql = str(statement.compile(dialect=postgresql.dialect()))
        assert "<=>" in sql
        assert "ORDER BY" in sql
        assert "LIMIT" in sql
        assert "document_chunks" in sql

    def test_query_is_embedded(self, store: PgVectorStore, session: MagicMock, keyword_embeddings) -> None:
        """Should embed the query text once before searching."""
        session.execute.return_value.all.return_value = []

        store.similarity_search("what is royal jelly", k=2)

        assert keyword_embeddings.query_calls == 1
        session.execute.assert_called_once()

    def test_invalid_k_raises(self, store: PgVectorStore) -> None:
        """Should reject k < 1."""
        with pytest.raises(ValueError):
            store.similarity_search_by_vector([0.1] * TEST_DIMENSION, k=0)

    def test_query_embedding_failure_is_wrapped(self, session_factory: MagicMock) -> None:
        """Should raise VectorStoreError when the query cannot be embedded."""
        embeddings = MagicMock()
        embeddings.embed_query.side_effect = ConnectionError("dns failure")
        store = PgVectorStore(session_factory, embeddings)

        with pytest.raises(VectorStoreError) as exc_info:
            store.similarity_search("question")

        assert exc_info.value.details["operation"] == "embed_query"

    def test_search_failure_is_wrapped(self, store: PgVectorStore, session: MagicMock) -> None:
        """Should raise VectorStoreError with the search operation."""
        session.execute.side_effect = RuntimeError("relation does not exist")

        with pytest.raises(VectorStoreError) as exc_info:
            store.similarity_search_by_vector([0.1] * TEST_DIMENSION)

        assert exc_info.value.details == {"operation": "search", "k": 4}
