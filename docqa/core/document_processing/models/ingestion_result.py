"""
Ingestion result model.

Represents the outcome of one startup ingestion run.

Dependencies: pydantic
System role: Return type for StartupLoader.run()
"""

from pydantic import BaseModel, Field


class IngestionResult(BaseModel):
    """Result of the startup loader."""

    skipped: bool = Field(description="True when the store already held chunks")
    existing_count: int = Field(default=0, ge=0, description="Rows found before ingestion")
    chunk_count: int = Field(default=0, ge=0, description="Chunks written by this run")
    source: str = Field(default="", description="PDF ingested by this run")
    processing_time_ms: float = Field(default=0.0, description="Total processing time in milliseconds")
