"""Vector store uploaders.

One uploader per backend, all implementing VectorStoreUploader:
- PineconeUploader: POST {vectors: [...]} to the index's /vectors/upsert
- QdrantUploader: PUT {points: [...]} to /collections/<name>/points

Usage:
    from ragprep.service.vectorstores import get_vector_store

    uploader = get_vector_store(config.vector_store)
    uploader.upload(embedded_chunks)
"""

from ragprep.service.vectorstores.base import VectorStoreUploader, send_json
from ragprep.service.vectorstores.factory import get_vector_store
from ragprep.service.vectorstores.pinecone import PineconeUploader
from ragprep.service.vectorstores.qdrant import QdrantUploader

__all__ = [
    "VectorStoreUploader",
    "PineconeUploader",
    "QdrantUploader",
    "get_vector_store",
    "send_json",
]
