"""Document ingestion: reading text files and splitting them into chunks."""

import logging
from pathlib import Path

from ragprep.client.samples import find_sample
from ragprep.constants import DEFAULT_SOURCE_CATEGORY, SUPPORTED_EXTENSIONS
from ragprep.errors import DocsDirMissingError, NoDocumentsError
from ragprep.service.models import Chunk, Document

logger = logging.getLogger(__name__)


def list_document_files(docs_path: Path) -> list[Path]:
    """List the supported text files in a directory, sorted by name.

    Args:
        docs_path: Directory containing the documents

    Returns:
        list[Path]: Files with a supported extension

    Raises:
        DocsDirMissingError: If the directory does not exist
        NoDocumentsError: If no supported file is found
    """
    if not docs_path.is_dir():
        raise DocsDirMissingError(f"Documents directory not found: {docs_path}")

    files = sorted(
        path
        for path in docs_path.iterdir()
        if path.is_file() and path.suffix.lower() in SUPPORTED_EXTENSIONS
    )
    if not files:
        extensions = " or ".join(SUPPORTED_EXTENSIONS)
        raise NoDocumentsError(f"No {extensions} files found in {docs_path}")

    return files


def read_document(path: Path) -> Document:
    """Read one file into a Document, attaching sample metadata when it matches."""
    raw = path.read_bytes()
    try:
        content = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        logger.warning(f"⚠️  {path.name} is not valid UTF-8 ({e.reason}), replacing bad bytes")
        content = raw.decode("utf-8", errors="replace")
    sample = find_sample(path.name)
    if sample is not None:
        return Document(
            filename=path.name,
            content=content,
            source=sample["source"],
            category=sample["category"],
        )
    return Document(filename=path.name, content=content, category=DEFAULT_SOURCE_CATEGORY)


def load_documents(docs_path: str | Path) -> list[Document]:
    """Read every supported document in docs_path.

    Raises:
        DocsDirMissingError: If the directory does not exist
        NoDocumentsError: If no supported file is found
    """
    files = list_document_files(Path(docs_path))
    logger.info(f"📂 Found {len(files)} documents to process in {docs_path}")
    return [read_document(path) for path in files]


def chunk_text(text: str, chunk_size: int, overlap: int) -> list[str]:
    """Split text into fixed-size character windows with overlap.

    Consecutive windows share exactly ``overlap`` characters. The last window
    ends at the end of the text and may be shorter than ``chunk_size``.

    Args:
        text: The text to chunk
        chunk_size: Number of characters per window
        overlap: Number of characters shared between consecutive windows

    Returns:
        list[str]: List of text windows

    Raises:
        ValueError: If chunk_size is not positive or overlap is not in [0, chunk_size)
    """
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    if overlap < 0 or overlap >= chunk_size:
        raise ValueError(
            f"overlap must be >= 0 and smaller than chunk_size ({chunk_size}), got {overlap}"
        )

    chunks = []
    step = chunk_size - overlap
    start = 0

    while start < len(text):
        end = min(start + chunk_size, len(text))
        chunks.append(text[start:end])

        if end == len(text):
            break
        start += step

    return chunks


def build_chunks(
    document: Document,
    chunk_size: int,
    overlap: int,
    next_id: int = 1,
) -> tuple[list[Chunk], int]:
    """Chunk a document into Chunk records with run-wide sequential ids.

    Window text is stripped of surrounding whitespace; windows that are blank
    after stripping are skipped and do not consume an id.

    Args:
        document: The document to chunk
        chunk_size: Number of characters per window
        overlap: Number of characters shared between consecutive windows
        next_id: Counter value for the first chunk id

    Returns:
        Tuple of (chunks, next_id) where next_id is the counter value to pass
        in for the following document
    """
    chunks = []
    for index, window in enumerate(chunk_text(document.content, chunk_size, overlap)):
        text = window.strip()
        if not text:
            logger.warning(f"Skipping blank window {index} in {document.filename}")
            continue

        chunks.append(
            Chunk(
                id=f"chunk_{next_id}",
                text=text,
                chunk_index=index,
                source=document.source,
                category=document.category,
                filename=document.filename,
            )
        )
        next_id += 1

    logger.info(f"  ✓ Created {len(chunks)} chunks from {document.filename}")
    return chunks, next_id
