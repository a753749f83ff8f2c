"""
Schema initialisation.

Runs the bundled schema.sql script that enables pgvector and creates the
chunk table and its HNSW cosine index. Every statement is idempotent, so the
script runs on every startup.

Dependencies: sqlalchemy, docqa.boundary.db.chunk_model
System role: Database schema bootstrap
"""

import logging
from pathlib import Path

from sqlalchemy import Engine, text

from docqa.boundary.db.chunk_model import CHUNKS_TABLE
from docqa.core.exceptions import VectorStoreError

logger = logging.getLogger(__name__)

SCHEMA_SCRIPT = Path(__file__).resolve().parents[2] / "resources" / "schema.sql"


def render_schema(dimension: int, script_path: Path = SCHEMA_SCRIPT) -> list[str]:
    """
    Read the schema script and return its statements.

    Args:
        dimension: Embedding vector dimension
        script_path: Path to the SQL script

    Returns:
        list[str]: Non-empty SQL statements in script order

    Raises:
        ValueError: When dimension is not a positive integer
    """
    if isinstance(dimension, bool) or not isinstance(dimension, int) or dimension <= 0:
        raise ValueError(f"Embedding dimension must be a positive integer, got {dimension!r}")

    script = script_path.read_text(encoding="utf-8")
    rendered = script.replace("{table}", CHUNKS_TABLE).replace("{dimension}", str(dimension))

    statements = []
    for statement in rendered.split(";"):
        lines = [line for line in statement.splitlines() if not line.strip().startswith("--")]
        body = "\n".join(lines).strip()
        if body:
            statements.append(body)
    return statements


def initialize_schema(engine: Engine, dimension: int) -> None:
    """
    Create the pgvector extension, chunk table and index if missing.

    Args:
        engine: SQLAlchemy engine
        dimension: Embedding vector dimension

    Raises:
        VectorStoreError: When any statement fails
    """
    statements = render_schema(dimension)
    logger.info(f"{__name__}:initialize_schema - Running {len(statements)} statements (dimension={dimension})")

    try:
        with engine.begin() as conn:
            for statement in statements:
                conn.execute(text(statement))
    except Exception as e:
        logger.error(f"{__name__}:initialize_schema - FAILED: {type(e).__name__}: {e}")
        raise VectorStoreError(
            f"Failed to initialize schema: {e}",
            operation="schema",
            details={"table": CHUNKS_TABLE, "dimension": dimension},
        ) from e

    logger.info(f"{__name__}:initialize_schema - Schema ready for table {CHUNKS_TABLE}")
