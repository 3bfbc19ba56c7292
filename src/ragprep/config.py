"""Configuration loading and validation for ragprep.

The configuration is a JSON document with three sections::

    {
        "openai": {"apiKey": ..., "model": ...},
        "vectorDatabase": {"type": "pinecone" | "qdrant", "pinecone": {...}, "qdrant": {...}},
        "processing": {"chunkSize": ..., "chunkOverlap": ..., "batchSize": ...}
    }

It is loaded once per run into frozen dataclasses.
"""

import json
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from ragprep.constants import (
    DEFAULT_BATCH_SIZE,
    DEFAULT_CHUNK_OVERLAP,
    DEFAULT_CHUNK_SIZE,
    DEFAULT_COLLECTION_NAME,
    DEFAULT_EMBEDDING_MODEL,
    DEFAULT_QDRANT_URL,
    PLACEHOLDER_OPENAI_API_KEY,
)
from ragprep.errors import ConfigInvalidError, ConfigMissingError

logger = logging.getLogger(__name__)


class BackendKind(str, Enum):
    """Supported vector store destinations."""

    PINECONE = "pinecone"
    QDRANT = "qdrant"


@dataclass(frozen=True)
class EmbeddingSettings:
    """Embedding provider credentials and model."""

    api_key: str
    model: str = DEFAULT_EMBEDDING_MODEL


@dataclass(frozen=True)
class PineconeSettings:
    """Connection parameters for a Pinecone index."""

    api_key: str = ""
    environment: str = ""
    index_name: str = DEFAULT_COLLECTION_NAME


@dataclass(frozen=True)
class QdrantSettings:
    """Connection parameters for a Qdrant collection."""

    url: str = DEFAULT_QDRANT_URL
    api_key: str | None = None
    collection_name: str = DEFAULT_COLLECTION_NAME


@dataclass(frozen=True)
class VectorStoreSettings:
    """Selected backend plus the parameters of every configured backend."""

    backend: BackendKind
    pinecone: PineconeSettings
    qdrant: QdrantSettings


@dataclass(frozen=True)
class ProcessingSettings:
    """Chunking and batching parameters."""

    chunk_size: int = DEFAULT_CHUNK_SIZE
    chunk_overlap: int = DEFAULT_CHUNK_OVERLAP
    batch_size: int = DEFAULT_BATCH_SIZE


@dataclass(frozen=True)
class Config:
    """Complete run configuration."""

    embedding: EmbeddingSettings
    vector_store: VectorStoreSettings
    processing: ProcessingSettings


DEFAULT_CONFIG: dict[str, Any] = {
    "openai": {
        "apiKey": PLACEHOLDER_OPENAI_API_KEY,
        "model": DEFAULT_EMBEDDING_MODEL,
    },
    "vectorDatabase": {
        "type": BackendKind.PINECONE.value,
        "pinecone": {
            "apiKey": "your-pinecone-api-key",
            "environment": "your-pinecone-environment",
            "indexName": DEFAULT_COLLECTION_NAME,
        },
        "qdrant": {
            "url": DEFAULT_QDRANT_URL,
            "apiKey": "your-qdrant-api-key",
            "collectionName": DEFAULT_COLLECTION_NAME,
        },
    },
    "processing": {
        "chunkSize": DEFAULT_CHUNK_SIZE,
        "chunkOverlap": DEFAULT_CHUNK_OVERLAP,
        "batchSize": DEFAULT_BATCH_SIZE,
    },
}


def _section(data: dict[str, Any], key: str) -> dict[str, Any]:
    value = data.get(key) or {}
    if not isinstance(value, dict):
        raise ConfigInvalidError(f"Config section '{key}' must be an object")
    return value


def _positive_int(value: Any, name: str, allow_zero: bool = False) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigInvalidError(f"processing.{name} must be an integer, got {value!r}")
    if value < 0 or (value == 0 and not allow_zero):
        requirement = "non-negative" if allow_zero else "positive"
        raise ConfigInvalidError(f"processing.{name} must be {requirement}, got {value}")
    return value


def parse_config(data: dict[str, Any]) -> Config:
    """Build a Config from a parsed configuration document.

    Args:
        data: The decoded JSON configuration

    Returns:
        Config: The validated configuration

    Raises:
        ConfigInvalidError: If a section is malformed or a value is out of range
    """
    if not isinstance(data, dict):
        raise ConfigInvalidError("Config file must contain a JSON object")

    openai_section = _section(data, "openai")
    embedding = EmbeddingSettings(
        api_key=openai_section.get("apiKey") or "",
        model=openai_section.get("model") or DEFAULT_EMBEDDING_MODEL,
    )

    vector_section = _section(data, "vectorDatabase")
    backend_name = vector_section.get("type", BackendKind.PINECONE.value)
    try:
        backend = BackendKind(backend_name)
    except ValueError as e:
        supported = ", ".join(kind.value for kind in BackendKind)
        raise ConfigInvalidError(
            f"Unsupported vector database type: {backend_name!r} (expected one of: {supported})"
        ) from e

    pinecone_section = _section(vector_section, "pinecone")
    qdrant_section = _section(vector_section, "qdrant")
    vector_store = VectorStoreSettings(
        backend=backend,
        pinecone=PineconeSettings(
            api_key=pinecone_section.get("apiKey", ""),
            environment=pinecone_section.get("environment", ""),
            index_name=pinecone_section.get("indexName", DEFAULT_COLLECTION_NAME),
        ),
        qdrant=QdrantSettings(
            url=(qdrant_section.get("url") or DEFAULT_QDRANT_URL).rstrip("/"),
            api_key=qdrant_section.get("apiKey") or None,
            collection_name=qdrant_section.get("collectionName", DEFAULT_COLLECTION_NAME),
        ),
    )

    processing_section = _section(data, "processing")
    processing = ProcessingSettings(
        chunk_size=_positive_int(
            processing_section.get("chunkSize", DEFAULT_CHUNK_SIZE), "chunkSize"
        ),
        chunk_overlap=_positive_int(
            processing_section.get("chunkOverlap", DEFAULT_CHUNK_OVERLAP),
            "chunkOverlap",
            allow_zero=True,
        ),
        batch_size=_positive_int(
            processing_section.get("batchSize", DEFAULT_BATCH_SIZE), "batchSize"
        ),
    )

    config = Config(embedding=embedding, vector_store=vector_store, processing=processing)
    validate_config(config)
    return config


def validate_config(config: Config) -> None:
    """Check the invariants a run depends on.

    Raises:
        ConfigInvalidError: If the OpenAI key is missing or still the placeholder,
            or the chunk overlap is not smaller than the chunk size
    """
    api_key = config.embedding.api_key
    if not api_key or api_key == PLACEHOLDER_OPENAI_API_KEY:
        raise ConfigInvalidError("Please update the OpenAI API key in the config file")

    processing = config.processing
    if processing.chunk_overlap >= processing.chunk_size:
        raise ConfigInvalidError(
            f"processing.chunkOverlap ({processing.chunk_overlap}) must be smaller than "
            f"processing.chunkSize ({processing.chunk_size})"
        )


def load_config(config_path: str | Path) -> Config:
    """Load and validate configuration from a JSON file.

    Args:
        config_path: Path to the config file

    Returns:
        Config: Configuration object

    Raises:
        ConfigMissingError: If the config file doesn't exist
        ConfigInvalidError: If the config is not valid JSON or fails validation
    """
    config_path = Path(config_path)
    if not config_path.is_file():
        raise ConfigMissingError(f"Config file not found: {config_path}")

    try:
        with open(config_path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigInvalidError(f"Config file is not valid JSON ({config_path}): {e}") from e

    config = parse_config(data)
    logger.debug(f"Loaded config from {config_path} (backend={config.vector_store.backend.value})")
    return config


def write_sample_config(config_path: str | Path) -> bool:
    """Write the default configuration unless the file already exists.

    Returns:
        bool: True if the file was written, False if it already existed
    """
    config_path = Path(config_path)
    if config_path.exists():
        return False

    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(json.dumps(DEFAULT_CONFIG, indent=2) + "\n", encoding="utf-8")
    return True
