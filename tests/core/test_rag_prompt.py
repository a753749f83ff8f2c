"""Tests for the RAG prompt template loader."""

from pathlib import Path

import pytest
from langchain_core.prompts import PromptTemplate

from docqa.core.exceptions import ConfigurationError
from docqa.core.rag_query.prompt import PROMPT_FILE, get_rag_prompt, load_rag_prompt


class TestLoadRagPrompt:
    """Test load_rag_prompt."""

    def test_bundled_prompt_has_two_slots(self) -> None:
        """Should expose exactly the context and question variables."""
        prompt = load_rag_prompt()

        assert isinstance(prompt, PromptTemplate)
        assert set(prompt.input_variables) == {"context", "question"}

    def test_bundled_prompt_formats_both_slots(self) -> None:
        """Should place context and question in the rendered text."""
        text = load_rag_prompt(PROMPT_FILE).format(
            context="Drones do not sting.",
            question="Can drones sting?",
        )

        assert "Drones do not sting." in text
        assert "Can drones sting?" in text
        assert text.index("Drones do not sting.") < text.index("Can drones sting?")

    def test_custom_prompt_file(self, tmp_path: Path) -> None:
        """Should load any template with the two expected slots."""
        path = tmp_path / "prompt.txt"
        path.write_text("Q: {question}\nC: {context}\n", encoding="utf-8")

        prompt = load_rag_prompt(path)

        assert prompt.format(context="c", question="q") == "Q: q\nC: c\n"

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        """Should raise ConfigurationError for a missing template."""
        with pytest.raises(ConfigurationError, match="not found"):
            load_rag_prompt(tmp_path / "absent.txt")

    def test_unexpected_placeholder_raises(self, tmp_path: Path) -> None:
        """Should reject templates with extra or missing slots."""
        path = tmp_path / "prompt.txt"
        path.write_text("{question} {history}", encoding="utf-8")

        with pytest.raises(ConfigurationError) as exc_info:
            load_rag_prompt(path)

        assert exc_info.value.details["found"] == ["history", "question"]
        assert exc_info.value.details["setting"] == "prompt_file"


class TestGetRagPrompt:
    """Test the cached accessor."""

    def test_returns_same_instance(self) -> None:
        """Should load the bundled prompt only once."""
        assert get_rag_prompt() is get_rag_prompt()
