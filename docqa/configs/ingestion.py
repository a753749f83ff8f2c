"""
Ingestion configuration settings.

Controls which PDF is loaded at startup and how it is split into chunks.
Chunk sizes are measured in tokens, not characters.

Dependencies: pydantic, pydantic_settings
System role: Startup ingestion configuration
"""

from pathlib import Path

from pydantic import Field, model_validator
from pydantic_settings import SettingsConfigDict

from docqa.configs.base import BaseSettings

RESOURCES_DIR = Path(__file__).resolve().parent.parent / "resources"
DEFAULT_PDF_PATH = RESOURCES_DIR / "reference.pdf"


class IngestionSettings(BaseSettings):
    """Settings for the startup ingestion pipeline."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="INGESTION_",
        case_sensitive=False,
        extra="ignore",
    )

    pdf_path: Path = Field(default=DEFAULT_PDF_PATH, description="PDF loaded into an empty store")

    chunk_size: int = Field(default=800, gt=0, description="Maximum chunk size in tokens")
    chunk_overlap: int = Field(default=0, ge=0, description="Token overlap between consecutive chunks")
    encoding_name: str = Field(default="cl100k_base", description="tiktoken encoding used to count tokens")
    min_chunk_length: int = Field(
        default=5,
        ge=0,
        description="Chunks shorter than this many characters are not embedded",
    )

    @model_validator(mode="after")
    def _check_overlap(self) -> "IngestionSettings":
        if self.chunk_overlap >= self.chunk_size:
            raise ValueError("chunk_overlap must be smaller than chunk_size")
        return self
