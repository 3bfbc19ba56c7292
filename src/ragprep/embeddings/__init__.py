"""Embedding provider abstraction for ragprep.

Usage:
    from ragprep.embeddings import OpenAIEmbeddingClient

    client = OpenAIEmbeddingClient(api_key="sk-...", model="text-embedding-ada-002")
    vector = client.embed("How do I reset my password?")
"""

from ragprep.embeddings.base import EmbeddingClient
from ragprep.embeddings.openai import OpenAIEmbeddingClient, get_embedding_client

__all__ = [
    "EmbeddingClient",
    "OpenAIEmbeddingClient",
    "get_embedding_client",
]
