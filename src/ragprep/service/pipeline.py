"""Embedding pipeline: chunk documents, embed every chunk, upload once."""

import logging
import math
import time
from collections.abc import Callable
from pathlib import Path

from ragprep.client.ingest import build_chunks, load_documents
from ragprep.config import Config
from ragprep.constants import EMBEDDING_DELAY_SECONDS
from ragprep.embeddings import EmbeddingClient, get_embedding_client
from ragprep.service.models import Chunk, Document, EmbeddedChunk
from ragprep.service.vectorstores import VectorStoreUploader, get_vector_store

logger = logging.getLogger(__name__)


def chunk_documents(
    documents: list[Document], chunk_size: int, overlap: int
) -> list[Chunk]:
    """Chunk every document, numbering chunk ids across the whole set."""
    all_chunks: list[Chunk] = []
    next_id = 1
    for document in documents:
        logger.info(f"Processing {document.filename}...")
        chunks, next_id = build_chunks(document, chunk_size, overlap, next_id)
        all_chunks.extend(chunks)
    return all_chunks


def embed_chunks(
    chunks: list[Chunk],
    embedder: EmbeddingClient,
    batch_size: int,
    delay: float = EMBEDDING_DELAY_SECONDS,
    sleep: Callable[[float], None] | None = None,
) -> list[EmbeddedChunk]:
    """Embed chunks one at a time, in order, pausing after each call.

    Batches only group progress messages; every chunk is embedded with its own
    request. The first failure is logged and re-raised.

    Args:
        chunks: Chunks to embed
        embedder: Embedding client
        batch_size: Number of chunks per progress batch
        delay: Seconds to pause after each successful call
        sleep: Sleep function (defaults to time.sleep)

    Returns:
        list[EmbeddedChunk]: One embedded chunk per input chunk, same order
    """
    if sleep is None:
        sleep = time.sleep

    embedded: list[EmbeddedChunk] = []
    total_batches = math.ceil(len(chunks) / batch_size)

    for start in range(0, len(chunks), batch_size):
        batch = chunks[start:start + batch_size]
        logger.info(f"Processing batch {start // batch_size + 1}/{total_batches}")

        for chunk in batch:
            try:
                embedding = embedder.embed(chunk.text)
            except Exception as e:
                logger.error(f"❌ Error generating embedding for chunk {chunk.id}: {e}")
                raise
            embedded.append(EmbeddedChunk(chunk=chunk, embedding=embedding))
            sleep(delay)

    logger.info(f"✅ Generated {len(embedded)} embeddings with {embedder.model}")
    return embedded


def process_documents(
    docs_path: str | Path,
    config: Config,
    embedder: EmbeddingClient | None = None,
    uploader: VectorStoreUploader | None = None,
    delay: float = EMBEDDING_DELAY_SECONDS,
    sleep: Callable[[float], None] | None = None,
) -> int:
    """Chunk, embed, and upload every document in docs_path.

    Nothing is uploaded unless every chunk was embedded successfully.

    Args:
        docs_path: Directory of .txt / .md documents
        config: Run configuration
        embedder: Embedding client (defaults to one built from config)
        uploader: Vector store uploader (defaults to the configured backend)
        delay: Seconds to pause after each embedding call
        sleep: Sleep function (defaults to time.sleep)

    Returns:
        int: Number of chunks embedded and uploaded

    Raises:
        RagPrepError: The first failure encountered (documents, embedding, upload)
    """
    logger.info(f"Processing documents from: {docs_path}")
    documents = load_documents(docs_path)

    processing = config.processing
    chunks = chunk_documents(documents, processing.chunk_size, processing.chunk_overlap)
    logger.info(f"Created {len(chunks)} text chunks")

    owns_embedder = embedder is None
    if embedder is None:
        embedder = get_embedding_client(config.embedding)
    if uploader is None:
        uploader = get_vector_store(config.vector_store)

    logger.info("Generating embeddings...")
    try:
        embedded = embed_chunks(chunks, embedder, processing.batch_size, delay=delay, sleep=sleep)
    finally:
        # Caller-supplied clients are closed by the caller
        if owns_embedder:
            embedder.close()

    logger.info(f"Uploading to {config.vector_store.backend.value}...")
    uploader.upload(embedded)
    logger.info("✅ Upload completed successfully!")

    return len(embedded)
