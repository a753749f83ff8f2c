"""
Process entry point.

Configures logging, loads settings, prepares the database schema, ingests
the reference PDF when the store is empty and starts the question shell.

Dependencies: dotenv, langchain_google_genai, docqa.configs, docqa.boundary, docqa.core, docqa.cli
System role: Application bootstrap
"""

from dataclasses import dataclass
import logging
import sys

from dotenv import load_dotenv
from langchain_google_genai import ChatGoogleGenerativeAI
from sqlalchemy import Engine

from docqa.boundary.db.connection import get_engine, get_session_factory
from docqa.boundary.db.schema import initialize_schema
from docqa.boundary.vdb.pgvector_store import PgVectorStore
from docqa.cli.shell import DocQAShell
from docqa.configs import Settings, get_settings
from docqa.core.document_processing import StartupLoader
from docqa.core.document_processing.embeddings_wrapper import FixedDimensionEmbeddings
from docqa.core.document_processing.tasks import EmbeddingTask
from docqa.core.exceptions import DocQAException
from docqa.core.rag_query import RAGQueryService, get_rag_prompt
from docqa.observability.logger import configure_logging

logger = logging.getLogger(__name__)


@dataclass
class Application:
    """Wired components for one process."""

    settings: Settings
    engine: Engine
    store: PgVectorStore
    loader: StartupLoader
    query_service: RAGQueryService

    def dispose(self) -> None:
        self.engine.dispose()


def create_application(settings: Settings | None = None) -> Application:
    """
    Build every component from settings without touching the network.

    Args:
        settings: Application settings (loaded from environment if None)

    Returns:
        Application: Wired components

    Raises:
        ConfigurationError: When GOOGLE_API_KEY is missing
    """
    settings = settings or get_settings()
    api_key = settings.llm.require_api_key()

    engine = get_engine(settings.database)
    session_factory = get_session_factory(engine)

    embeddings = FixedDimensionEmbeddings(
        model=settings.vector_store.embedding_model,
        output_dimensionality=settings.vector_store.embedding_dimension,
        google_api_key=api_key,
    )
    store = PgVectorStore(session_factory, embeddings)

    loader = StartupLoader(
        store=store,
        embedding_task=EmbeddingTask(embeddings, dimension=settings.vector_store.embedding_dimension),
        settings=settings.ingestion,
    )

    chat_model = ChatGoogleGenerativeAI(
        model=settings.llm.chat_model,
        temperature=settings.llm.temperature,
        google_api_key=api_key,
    )
    query_service = RAGQueryService(
        vector_store=store,
        model=chat_model,
        prompt=get_rag_prompt(),
        top_k=settings.vector_store.top_k,
    )

    return Application(
        settings=settings,
        engine=engine,
        store=store,
        loader=loader,
        query_service=query_service,
    )


def start(app: Application) -> None:
    """
    Prepare the schema and ingest the reference PDF if needed.

    Runs before the shell accepts input.
    """
    if app.settings.vector_store.initialize_schema:
        initialize_schema(app.engine, app.settings.vector_store.embedding_dimension)

    result = app.loader.run()
    if result.skipped:
        logger.info(f"{__name__}:start - Using {result.existing_count} stored chunks")
    else:
        logger.info(f"{__name__}:start - Ingested {result.chunk_count} chunks from {result.source}")


def main() -> int:
    """
    Run the application.

    Returns:
        int: Process exit status (1 when startup fails)
    """
    # Make .env values visible to libraries that read os.environ directly
    load_dotenv()
    settings = get_settings()
    configure_logging(settings.effective_log_level)

    try:
        app = create_application(settings)
    except DocQAException as e:
        logger.critical(f"{__name__}:main - Startup failed: {e}")
        return 1

    try:
        start(app)
        DocQAShell(app.query_service).cmdloop()
    except DocQAException as e:
        # Query errors are handled inside the shell
        logger.critical(f"{__name__}:main - Startup failed: {e}", exc_info=True)
        return 1
    except KeyboardInterrupt:
        print()
    finally:
        app.dispose()

    return 0


if __name__ == "__main__":
    sys.exit(main())
