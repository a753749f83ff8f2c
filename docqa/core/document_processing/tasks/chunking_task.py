"""
Text chunking task using TokenTextSplitter.

Splits pages into chunks bounded by a token count (tiktoken encoding),
not by characters.

Dependencies: langchain_text_splitters, tiktoken
System role: Second stage of document ingestion pipeline
"""

from langchain_text_splitters import TokenTextSplitter
from langchain_core.documents import Document

from docqa.core.exceptions import ChunkingError


class ChunkingTask:
    """Split documents into token-bounded chunks."""

    def __init__(
        self,
        chunk_size: int = 800,
        chunk_overlap: int = 0,
        encoding_name: str = "cl100k_base",
        min_chunk_length: int = 5,
    ) -> None:
        """
        Initialize chunking task with splitter configuration.

        Args:
            chunk_size: Maximum chunk size in tokens
            chunk_overlap: Token overlap between consecutive chunks
            encoding_name: tiktoken encoding used to count tokens
            min_chunk_length: Chunks shorter than this (in characters, stripped) are dropped
        """
        self._chunk_size = chunk_size
        self._chunk_overlap = chunk_overlap
        self._encoding_name = encoding_name
        self._min_chunk_length = min_chunk_length
        self._splitter: TokenTextSplitter | None = None

    def _get_splitter(self) -> TokenTextSplitter:
        """
        Build the splitter on first use.

        tiktoken loads (and on first run downloads) the encoding when the
        splitter is constructed, so this waits until there is text to split.
        """
        if self._splitter is None:
            self._splitter = TokenTextSplitter(
                encoding_name=self._encoding_name,
                chunk_size=self._chunk_size,
                chunk_overlap=self._chunk_overlap,
                add_start_index=True,
            )
        return self._splitter

    def chunk(self, documents: list[Document]) -> list[Document]:
        """
        Split documents into chunks.

        Each chunk keeps its page metadata and gains chunk_index, its
        position across the whole document.

        Args:
            documents: LangChain Documents to split

        Returns:
            list[Document]: Chunked documents in source order

        Raises:
            ValueError: When documents list is empty
            ChunkingError: When no chunk survives the minimum length filter
        """
        if not documents:
            raise ValueError("No documents to chunk")

        pieces = [
            doc
            for doc in self._get_splitter().split_documents(documents)
            if len(doc.page_content.strip()) >= self._min_chunk_length
        ]
        if not pieces:
            source = documents[0].metadata.get("source")
            raise ChunkingError("Document produced no chunks", source)

        for index, doc in enumerate(pieces):
            doc.metadata["chunk_index"] = index

        return pieces
