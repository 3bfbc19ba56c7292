"""Pytest configuration and shared fixtures for the test suite."""

import copy
import json
from pathlib import Path

import pytest

from ragprep.config import DEFAULT_CONFIG, parse_config
from ragprep.service.models import Chunk, EmbeddedChunk


@pytest.fixture
def config_data() -> dict:
    """Provide a valid configuration document (Pinecone backend).

    Returns:
        Dictionary shaped like config.json with a real-looking API key
    """
    data = copy.deepcopy(DEFAULT_CONFIG)
    data["openai"]["apiKey"] = "sk-test-key"
    data["vectorDatabase"]["pinecone"]["environment"] = "us-east1-gcp"
    data["processing"] = {"chunkSize": 10, "chunkOverlap": 2, "batchSize": 2}
    return data


@pytest.fixture
def config(config_data):
    """Provide the parsed Config for config_data."""
    return parse_config(config_data)


@pytest.fixture
def config_file(tmp_path, config_data) -> Path:
    """Write config_data to a temporary config.json.

    Returns:
        Path to the written config file
    """
    path = tmp_path / "config.json"
    path.write_text(json.dumps(config_data))
    return path


@pytest.fixture
def docs_dir(tmp_path) -> Path:
    """Create a documents directory with two text files and one ignored file.

    Returns:
        Path to the documents directory
    """
    docs = tmp_path / "documents"
    docs.mkdir()
    (docs / "alphabet.txt").write_text("abcdefghijklmnopqrstuvwxyz")
    (docs / "notes.md").write_text("short note")
    (docs / "image.png").write_bytes(b"\x89PNG")
    return docs


@pytest.fixture
def mock_embedding():
    """Provide a simple mock embedding vector.

    Returns:
        List of floats representing an embedding vector
    """
    return [0.1, 0.2, 0.3, 0.15, -0.1, 0.05, 0.25, -0.05]


@pytest.fixture
def create_test_chunk():
    """Factory fixture to create embedded test chunks.

    Returns:
        Function that creates an EmbeddedChunk with custom parameters
    """

    def _create_chunk(
        chunk_id: str = "chunk_1",
        text: str = "hello",
        source: str = "S",
        category: str = "C",
        filename: str = "f.txt",
        chunk_index: int = 0,
        embedding: list[float] | None = None,
    ) -> EmbeddedChunk:
        chunk = Chunk(
            id=chunk_id,
            text=text,
            chunk_index=chunk_index,
            source=source,
            category=category,
            filename=filename,
        )
        return EmbeddedChunk(chunk=chunk, embedding=embedding or [0.1, 0.2])

    return _create_chunk


class FakeEmbedder:
    """Embedding client double that returns fixed-length vectors.

    Fails with ``error`` on call number ``fail_on`` (1-based) when set.
    """

    def __init__(self, dimensions: int = 3, fail_on: int | None = None, error=None):
        self.model = "fake-embedding-model"
        self.dimensions = dimensions
        self.fail_on = fail_on
        self.error = error
        self.calls: list[str] = []
        self.closed = False

    def close(self) -> None:
        self.closed = True

    def embed(self, text: str) -> list[float]:
        self.calls.append(text)
        if self.fail_on is not None and len(self.calls) == self.fail_on:
            raise self.error
        return [float(len(self.calls))] * self.dimensions


@pytest.fixture
def fake_embedder():
    """Provide a FakeEmbedder factory."""
    return FakeEmbedder
