"""Pinecone uploader (index/environment/API-key addressed)."""

import logging
from typing import Any

from ragprep.config import PineconeSettings
from ragprep.constants import PINECONE_HOST_TEMPLATE
from ragprep.service.models import EmbeddedChunk
from ragprep.service.vectorstores.base import send_json

logger = logging.getLogger(__name__)


class PineconeUploader:
    """Upsert embedded chunks into a Pinecone index."""

    def __init__(self, settings: PineconeSettings, timeout: float | None = None) -> None:
        self.settings = settings
        self.timeout = timeout

    @property
    def upsert_url(self) -> str:
        host = PINECONE_HOST_TEMPLATE.format(
            index_name=self.settings.index_name,
            environment=self.settings.environment,
        )
        return f"{host}/vectors/upsert"

    def to_records(self, chunks: list[EmbeddedChunk]) -> list[dict[str, Any]]:
        """Map chunks to Pinecone vectors keyed by chunk id."""
        return [
            {
                "id": item.chunk.id,
                "values": item.embedding,
                "metadata": {
                    "content": item.chunk.text,
                    "source": item.chunk.source,
                    "category": item.chunk.category,
                    "filename": item.chunk.filename,
                    "chunkIndex": item.chunk.chunk_index,
                },
            }
            for item in chunks
        ]

    def upload(self, chunks: list[EmbeddedChunk]) -> Any:
        vectors = self.to_records(chunks)
        logger.info(f"⬆️  Upserting {len(vectors)} vectors to Pinecone index '{self.settings.index_name}'")
        return send_json(
            "POST",
            self.upsert_url,
            {"vectors": vectors},
            headers={"Api-Key": self.settings.api_key},
            timeout=self.timeout,
        )
