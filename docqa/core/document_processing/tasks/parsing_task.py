"""
Document parsing task using LangChain PyPDFLoader.

Converts the reference PDF into LangChain Documents (one per page).

Dependencies: langchain_community.document_loaders, pypdf
System role: First stage of document ingestion pipeline
"""

from pathlib import Path

from langchain_core.documents import Document
from langchain_community.document_loaders import PyPDFLoader

from docqa.core.exceptions import ParsingError


class ParsingTask:
    """Parse PDF documents into LangChain Documents."""

    def parse(self, file_path: str | Path) -> list[Document]:
        """
        Parse PDF document into LangChain Documents.

        Args:
            file_path: Path to PDF document

        Returns:
            list[Document]: Pages with text content, source and page metadata

        Raises:
            ParsingError: When the file is missing, not a PDF, unreadable or has no text
        """
        path = Path(file_path)
        if not path.is_file():
            raise ParsingError(f"File not found: {file_path}", str(file_path))

        if path.suffix.lower() != ".pdf":
            raise ParsingError(
                f"Unsupported file format: {path.suffix}. Only PDF files are supported.",
                str(file_path),
            )

        try:
            documents = PyPDFLoader(str(path)).load()
        except Exception as e:
            raise ParsingError(f"Failed to parse PDF: {e}", str(file_path)) from e

        documents = [doc for doc in documents if doc.page_content.strip()]
        if not documents:
            raise ParsingError("PDF document contains no extractable text", str(file_path))

        return documents
