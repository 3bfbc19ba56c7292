"""Factory function for creating vector store uploaders."""

import logging

from ragprep.config import BackendKind, VectorStoreSettings
from ragprep.service.vectorstores.base import VectorStoreUploader
from ragprep.service.vectorstores.pinecone import PineconeUploader
from ragprep.service.vectorstores.qdrant import QdrantUploader

logger = logging.getLogger(__name__)


def get_vector_store(settings: VectorStoreSettings) -> VectorStoreUploader:
    """Create the uploader for the configured backend.

    Args:
        settings: Vector store section of the run configuration

    Returns:
        VectorStoreUploader: An uploader for the selected backend.
    """
    if settings.backend is BackendKind.PINECONE:
        return PineconeUploader(settings.pinecone)

    if settings.backend is BackendKind.QDRANT:
        return QdrantUploader(settings.qdrant)

    raise ValueError(f"Unsupported vector store backend: {settings.backend}")
