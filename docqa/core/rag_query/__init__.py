"""
Question answering over the ingested reference document.

Exports: RAGQueryService, load_rag_prompt, get_rag_prompt
"""

from docqa.core.rag_query.prompt import PROMPT_FILE, get_rag_prompt, load_rag_prompt
from docqa.core.rag_query.query_service import RAGQueryService, SearchableStore

__all__ = [
    "RAGQueryService",
    "SearchableStore",
    "PROMPT_FILE",
    "get_rag_prompt",
    "load_rag_prompt",
]
