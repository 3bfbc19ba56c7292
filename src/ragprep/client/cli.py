"""Command-line interface for preparing vector data using Click."""

import logging
import os
from pathlib import Path

import click
from dotenv import load_dotenv

from ragprep.client.cli_helpers import abort_with_error, hint_for, write_samples
from ragprep.config import load_config
from ragprep.constants import DEFAULT_CONFIG_PATH, DEFAULT_DOCS_PATH
from ragprep.errors import RagPrepError
from ragprep.service.pipeline import process_documents

# Load environment variables
load_dotenv()

# Configure logging
log_level = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@click.command()
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    help="Path to the JSON config file",
)
@click.option(
    "--docs",
    "docs_path",
    type=click.Path(file_okay=False, path_type=Path),
    default=DEFAULT_DOCS_PATH,
    show_default=True,
    help="Path to the documents directory",
)
@click.option(
    "--create-samples",
    is_flag=True,
    default=False,
    help="Create a sample config and sample documents, then exit",
)
def prepare(config_path: Path, docs_path: Path, create_samples: bool) -> None:
    """Chunk documents, generate embeddings, and upload them to a vector database.

    Reads every .txt and .md file in the documents directory, embeds each
    chunk with OpenAI, and uploads all chunks to Pinecone or Qdrant.

    Example:
        ragprep --create-samples
        ragprep --config ./my-config.json --docs ./my-docs/
    """
    if create_samples:
        try:
            write_samples(config_path, docs_path)
        except OSError as e:
            abort_with_error(f"Could not write sample files: {e}")
        return

    try:
        config = load_config(config_path)
    except RagPrepError as e:
        abort_with_error(e, hint_for(e))

    click.echo(f"Processing documents from: {docs_path}")
    click.echo(f"Embedding model: {config.embedding.model}")
    click.echo(f"Vector database: {config.vector_store.backend.value}\n")

    try:
        count = process_documents(docs_path, config)
    except RagPrepError as e:
        abort_with_error(e, hint_for(e))
    except Exception as e:
        logger.exception("Unexpected failure while processing documents")
        abort_with_error(f"Unexpected error: {e}")

    click.echo(f"\n✓ Successfully processed and uploaded {count} document chunks!")
    click.echo("Your vector database is now ready for the RAG agent.")


if __name__ == "__main__":
    prepare()
