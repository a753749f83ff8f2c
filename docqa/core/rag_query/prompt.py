"""
RAG prompt template.

Loads the question answering prompt from the bundled resource file. The
template has exactly two slots: context (retrieved passages) and question.

Dependencies: langchain_core.prompts
System role: Prompt template for RAG answers
"""

import logging
from functools import lru_cache
from pathlib import Path

from langchain_core.prompts import PromptTemplate

from docqa.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

PROMPT_FILE = Path(__file__).resolve().parents[2] / "resources" / "rag_prompt.txt"
PROMPT_VARIABLES = frozenset({"context", "question"})


def load_rag_prompt(path: Path | str = PROMPT_FILE) -> PromptTemplate:
    """
    Load a prompt template from a file.

    Args:
        path: Template file with {context} and {question} placeholders

    Returns:
        PromptTemplate: Template ready to format

    Raises:
        ConfigurationError: When the file is missing or has other placeholders
    """
    path = Path(path)
    if not path.is_file():
        raise ConfigurationError(f"Prompt template not found: {path}", setting="prompt_file")

    prompt = PromptTemplate.from_file(path, encoding="utf-8")

    variables = set(prompt.input_variables)
    if variables != PROMPT_VARIABLES:
        raise ConfigurationError(
            "Prompt template must use exactly the {context} and {question} placeholders",
            setting="prompt_file",
            details={"found": sorted(variables)},
        )

    logger.debug("Loaded RAG prompt from %s", path)
    return prompt


@lru_cache
def get_rag_prompt() -> PromptTemplate:
    """Return the bundled RAG prompt, loaded once per process."""
    return load_rag_prompt(PROMPT_FILE)
