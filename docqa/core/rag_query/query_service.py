"""
RAG question answering service.

Retrieves the passages closest to a question, fills the prompt template and
returns the hosted model's answer verbatim. Stateless: no caching, no
conversation history, no streaming.

Dependencies: langchain_core, docqa.boundary.vdb
System role: Query handler behind the shell's q command
"""

import logging
from typing import Protocol

from langchain_core.language_models import BaseChatModel
from langchain_core.output_parsers import StrOutputParser
from langchain_core.prompts import BasePromptTemplate

from docqa.boundary.vdb.vector_schemas import VectorSearchResult
from docqa.core.exceptions import (
    GenerationError,
    RetrievalError,
    ValidationError,
    VectorStoreError,
)
from docqa.core.rag_query.prompt import get_rag_prompt
from docqa.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)


class SearchableStore(Protocol):
    """Store operation the service depends on."""

    def similarity_search(self, query: str, k: int = 4) -> list[VectorSearchResult]: ...


class RAGQueryService:
    """
    Answer questions about the reference document.

    Each call embeds the question, fetches top_k passages, and sends a
    single filled prompt to the chat model.
    """

    def __init__(
        self,
        vector_store: SearchableStore,
        model: BaseChatModel,
        prompt: BasePromptTemplate | None = None,
        top_k: int = 4,
    ) -> None:
        """
        Initialize the service.

        Args:
            vector_store: Store providing similarity_search
            model: Chat model used to generate answers
            prompt: Template with context and question slots (bundled prompt if None)
            top_k: Number of passages to retrieve

        Raises:
            ValueError: When top_k is not positive
        """
        if top_k < 1:
            raise ValueError("top_k must be positive")

        self._vector_store = vector_store
        self._model = model
        self._prompt = prompt or get_rag_prompt()
        self._top_k = top_k
        self._chain = self._prompt | self._model | StrOutputParser()

    @property
    def top_k(self) -> int:
        return self._top_k

    def retrieve(self, question: str) -> list[VectorSearchResult]:
        """
        Fetch the passages most similar to the question.

        Args:
            question: User question

        Returns:
            list[VectorSearchResult]: Up to top_k results, most similar first

        Raises:
            ValidationError: When question is blank
            RetrievalError: When embedding or search fails
        """
        question = self._validate(question)
        try:
            return self._vector_store.similarity_search(question, k=self._top_k)
        except VectorStoreError as e:
            raise RetrievalError(f"Failed to retrieve passages: {e.message}", e.details) from e

    @staticmethod
    def build_context(results: list[VectorSearchResult]) -> str:
        """Join passage texts, one per line, in retrieval order."""
        return "\n".join(result.content for result in results)

    def ask(self, question: str) -> str:
        """
        Answer a question using the retrieved passages.

        Args:
            question: User question

        Returns:
            str: Model answer, unmodified

        Raises:
            ValidationError: When question is blank
            RetrievalError: When retrieval fails
            GenerationError: When the model call fails
        """
        question = self._validate(question)
        results = self.retrieve(question)
        context = self.build_context(results)
        log_with_context(
            logger,
            logging.INFO,
            f"{__name__}:ask - Retrieved passages",
            passages=len(results),
            chunk_ids=",".join(result.chunk_id for result in results),
            context_len=len(context),
        )

        try:
            answer = self._chain.invoke({"context": context, "question": question})
        except Exception as e:
            logger.error(f"{__name__}:ask - Generation FAILED: {type(e).__name__}: {e}")
            raise GenerationError(
                f"Model call failed: {e}",
                model=getattr(self._model, "model", None),
            ) from e

        logger.info(f"{__name__}:ask - Answer received, answer_len={len(answer)}")
        return answer

    @staticmethod
    def _validate(question: str) -> str:
        if question is None or not question.strip():
            raise ValidationError("Question must not be empty", field="question")
        return question.strip()
