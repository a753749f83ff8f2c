"""
Startup loader.

Fills an empty vector store from the bundled reference PDF:
count -> parse -> chunk -> embed -> store. When the store already holds
chunks the run is a no-op, so it is safe to call on every boot.

Dependencies: All task modules, docqa.configs
System role: Pipeline orchestration (coordinates only)
"""

import logging
import time
from pathlib import Path
from typing import Protocol

from docqa.configs.ingestion import IngestionSettings
from docqa.observability.log_utils import log_with_context
from .models import Chunk, IngestionResult
from .tasks import ChunkingTask, EmbeddingTask, ParsingTask

logger = logging.getLogger(__name__)


class ChunkStore(Protocol):
    """Store operations the loader depends on."""

    def count(self) -> int: ...

    def add_chunks(self, chunks: list[Chunk]) -> list[str]: ...


class StartupLoader:
    """Load the reference PDF into the store if it is empty."""

    def __init__(
        self,
        store: ChunkStore,
        embedding_task: EmbeddingTask,
        settings: IngestionSettings | None = None,
        parsing_task: ParsingTask | None = None,
        chunking_task: ChunkingTask | None = None,
    ) -> None:
        """
        Initialize loader with its collaborators.

        Args:
            store: Chunk store to check and fill
            embedding_task: Embedding stage (wraps the hosted embedding model)
            settings: Ingestion settings (uses defaults if None)
            parsing_task: Parsing stage (default ParsingTask)
            chunking_task: Chunking stage (built from settings if None)
        """
        self._settings = settings or IngestionSettings()
        self._store = store
        self._embedding_task = embedding_task
        self._parsing_task = parsing_task or ParsingTask()
        self._chunking_task = chunking_task or ChunkingTask(
            chunk_size=self._settings.chunk_size,
            chunk_overlap=self._settings.chunk_overlap,
            encoding_name=self._settings.encoding_name,
            min_chunk_length=self._settings.min_chunk_length,
        )

    @property
    def pdf_path(self) -> Path:
        return Path(self._settings.pdf_path)

    def run(self) -> IngestionResult:
        """
        Ingest the reference PDF unless the store already has chunks.

        Returns:
            IngestionResult: Whether ingestion ran and how many chunks it wrote

        Raises:
            ParsingError: PDF missing or unreadable
            ChunkingError: PDF produced no usable chunks
            EmbeddingError: Embedding call failed
            VectorStoreError: Counting or inserting failed
        """
        start_time = time.perf_counter()

        existing = self._store.count()
        if existing > 0:
            logger.info(f"{__name__}:run - Found {existing} existing chunks. Skipping ingestion.")
            return IngestionResult(skipped=True, existing_count=existing)

        logger.info(f"{__name__}:run - Store is empty. Ingesting {self.pdf_path}")

        pages = self._parsing_task.parse(self.pdf_path)
        logger.info(f"{__name__}:run - Parsed {len(pages)} pages")

        documents = self._chunking_task.chunk(pages)
        logger.info(f"{__name__}:run - Split into {len(documents)} chunks")

        chunks = self._embedding_task.embed(documents)
        chunk_ids = self._store.add_chunks(chunks)

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        log_with_context(
            logger,
            logging.INFO,
            f"{__name__}:run - Ingestion complete",
            source=self.pdf_path.name,
            pages=len(pages),
            chunks=len(chunk_ids),
            elapsed_ms=round(elapsed_ms),
        )

        return IngestionResult(
            skipped=False,
            existing_count=0,
            chunk_count=len(chunk_ids),
            source=str(self.pdf_path),
            processing_time_ms=elapsed_ms,
        )
