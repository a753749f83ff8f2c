"""
Shared test fixtures and configuration for entire test suite.

Provides: keyword embeddings stand-in, in-memory chunk store, sample pages,
settings with a dummy API key
Dependencies: pytest, langchain_core
System role: Test infrastructure and fixture management
"""

import math
import re
import zlib
from pathlib import Path

import pytest
from langchain_core.documents import Document
from langchain_core.embeddings import Embeddings

from docqa.boundary.vdb.vector_schemas import VectorMetadata, VectorSearchResult
from docqa.configs.ingestion import DEFAULT_PDF_PATH
from docqa.core.document_processing.models import Chunk

TEST_DIMENSION = 16


class KeywordEmbeddings(Embeddings):
    """
    Bag-of-words embeddings hashed into a small vector.

    Texts sharing words get close vectors, so near-identical questions find
    the passage they paraphrase. Never returns a zero vector.
    """

    def __init__(self, size: int = TEST_DIMENSION) -> None:
        self.size = size
        self.document_calls = 0
        self.query_calls = 0

    def _embed(self, text: str) -> list[float]:
        vector = [0.01] * self.size
        for word in re.findall(r"[a-z0-9]+", text.lower()):
            vector[zlib.crc32(word.encode()) % self.size] += 1.0
        return vector

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        self.document_calls += 1
        return [self._embed(text) for text in texts]

    def embed_query(self, text: str) -> list[float]:
        self.query_calls += 1
        return self._embed(text)


class InMemoryChunkStore:
    """Chunk store with the same surface as PgVectorStore, backed by a list."""

    def __init__(self, embeddings: Embeddings) -> None:
        self._embeddings = embeddings
        self.chunks: list[Chunk] = []
        self.write_calls = 0

    def count(self) -> int:
        return len(self.chunks)

    def add_chunks(self, chunks: list[Chunk]) -> list[str]:
        self.write_calls += 1
        self.chunks.extend(chunks)
        return [chunk.id for chunk in chunks]

    def similarity_search(self, query: str, k: int = 4) -> list[VectorSearchResult]:
        query_vector = self._embeddings.embed_query(query)
        scored = sorted(
            ((self._cosine(query_vector, chunk.embedding), position, chunk)
             for position, chunk in enumerate(self.chunks)),
            key=lambda item: (-item[0], item[1]),
        )
        return [
            VectorSearchResult(
                chunk_id=chunk.id,
                content=chunk.content,
                metadata=VectorMetadata(
                    chunk_id=chunk.id,
                    chunk_index=chunk.metadata.get("chunk_index", position),
                    source=chunk.metadata.get("source", ""),
                    page=chunk.metadata.get("page"),
                ),
                similarity_score=score,
            )
            for score, position, chunk in scored[:k]
        ]

    @staticmethod
    def _cosine(a: list[float], b: list[float]) -> float:
        dot = sum(x * y for x, y in zip(a, b))
        return dot / (math.sqrt(sum(x * x for x in a)) * math.sqrt(sum(y * y for y in b)))


@pytest.fixture
def keyword_embeddings() -> KeywordEmbeddings:
    """Deterministic embeddings with TEST_DIMENSION components."""
    return KeywordEmbeddings()


@pytest.fixture
def memory_store(keyword_embeddings: KeywordEmbeddings) -> InMemoryChunkStore:
    """Empty in-memory chunk store."""
    return InMemoryChunkStore(keyword_embeddings)


@pytest.fixture
def reference_pdf() -> Path:
    """Path to the PDF bundled with the package."""
    return DEFAULT_PDF_PATH


@pytest.fixture
def sample_pages() -> list[Document]:
    """Two parsed pages as PyPDFLoader would return them."""
    return [
        Document(
            page_content=(
                "The queen is the only fertile female in the colony. "
                "She can lay up to two thousand eggs per day."
            ),
            metadata={"source": "guide.pdf", "page": 0},
        ),
        Document(
            page_content=(
                "Foragers report food sources with the waggle dance. "
                "The duration of the waggle run encodes distance."
            ),
            metadata={"source": "guide.pdf", "page": 1},
        ),
    ]


@pytest.fixture
def make_chunk():
    """Factory for embedded chunks."""

    def _make(content: str, index: int = 0, embedding: list[float] | None = None) -> Chunk:
        return Chunk(
            id=f"chunk-{index}",
            content=content,
            metadata={"source": "guide.pdf", "page": 0, "chunk_index": index, "start_index": 0},
            embedding=embedding if embedding is not None else KeywordEmbeddings()._embed(content),
        )

    return _make


@pytest.fixture
def temp_pdf_file(tmp_path: Path) -> Path:
    """PDF-named file without any page, for parser failure tests."""
    path = tmp_path / "broken.pdf"
    path.write_bytes(b"%PDF-1.4\n1 0 obj\n<< >>\nendobj\n")
    return path


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch: pytest.MonkeyPatch):
    """Keep host environment and cached settings out of tests."""
    from docqa.configs import get_settings

    for name in ("GOOGLE_API_KEY", "LLM_GOOGLE_API_KEY"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
