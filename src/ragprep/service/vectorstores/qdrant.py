"""Qdrant uploader (URL + optional API-key addressed)."""

import logging
from typing import Any

from ragprep.config import QdrantSettings
from ragprep.service.models import EmbeddedChunk
from ragprep.service.vectorstores.base import send_json

logger = logging.getLogger(__name__)


class QdrantUploader:
    """Store embedded chunks as points in a Qdrant collection.

    Qdrant point ids must be integers or UUIDs, so points are numbered by
    position (from 1) and the chunk id travels in the payload as ``originalId``.
    """

    def __init__(self, settings: QdrantSettings, timeout: float | None = None) -> None:
        self.settings = settings
        self.timeout = timeout

    @property
    def points_url(self) -> str:
        return f"{self.settings.url}/collections/{self.settings.collection_name}/points"

    def to_records(self, chunks: list[EmbeddedChunk]) -> list[dict[str, Any]]:
        """Map chunks to Qdrant points with positional ids."""
        return [
            {
                "id": position,
                "vector": item.embedding,
                "payload": {
                    "content": item.chunk.text,
                    "source": item.chunk.source,
                    "category": item.chunk.category,
                    "filename": item.chunk.filename,
                    "chunkIndex": item.chunk.chunk_index,
                    "originalId": item.chunk.id,
                },
            }
            for position, item in enumerate(chunks, 1)
        ]

    def upload(self, chunks: list[EmbeddedChunk]) -> Any:
        points = self.to_records(chunks)
        headers = {"api-key": self.settings.api_key} if self.settings.api_key else None
        logger.info(
            f"⬆️  Uploading {len(points)} points to Qdrant collection "
            f"'{self.settings.collection_name}'"
        )
        return send_json(
            "PUT",
            self.points_url,
            {"points": points},
            headers=headers,
            timeout=self.timeout,
        )
