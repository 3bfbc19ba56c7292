"""OpenAI embeddings API client."""

import logging

import requests

from ragprep.config import EmbeddingSettings
from ragprep.constants import DEFAULT_EMBEDDING_MODEL, OPENAI_EMBEDDINGS_URL
from ragprep.errors import EmbeddingProviderError, TransportError

logger = logging.getLogger(__name__)


class OpenAIEmbeddingClient:
    """Embedding client for the OpenAI ``/v1/embeddings`` endpoint.

    Each call sends a single input text. No retry is attempted: a failure is
    raised to the caller immediately.
    """

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_EMBEDDING_MODEL,
        url: str = OPENAI_EMBEDDINGS_URL,
        timeout: float | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: OpenAI API key, sent as a bearer token
            model: Embedding model name
            url: Embeddings endpoint URL
            timeout: Request timeout in seconds (None waits indefinitely)
        """
        self.api_key = api_key
        self.model = model
        self.url = url
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({"Authorization": f"Bearer {api_key}"})
        logger.debug(f"Initializing OpenAIEmbeddingClient: model={model}, url={url}")

    def embed(self, text: str) -> list[float]:
        """Generate an embedding for one text.

        Args:
            text: The text to embed

        Returns:
            list[float]: The embedding vector (``data[0].embedding``)

        Raises:
            EmbeddingProviderError: If the response carries an error object or
                has no usable embedding
            TransportError: If the HTTP request fails
        """
        payload = {"input": text, "model": self.model}
        try:
            response = self.session.post(self.url, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            raise TransportError(f"Embedding request to {self.url} failed: {e}") from e

        try:
            body = response.json()
        except ValueError as e:
            raise EmbeddingProviderError(
                f"Embedding API returned a non-JSON response (HTTP {response.status_code})"
            ) from e

        if isinstance(body, dict) and body.get("error"):
            error = body["error"]
            message = error.get("message") if isinstance(error, dict) else str(error)
            raise EmbeddingProviderError(message or "Unknown embedding API error")

        try:
            embedding = body["data"][0]["embedding"]
        except (KeyError, IndexError, TypeError) as e:
            raise EmbeddingProviderError(
                f"Embedding API response has no embedding (HTTP {response.status_code})"
            ) from e

        return embedding

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()

    def __enter__(self) -> "OpenAIEmbeddingClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def get_embedding_client(settings: EmbeddingSettings) -> OpenAIEmbeddingClient:
    """Create the embedding client described by the configuration."""
    return OpenAIEmbeddingClient(api_key=settings.api_key, model=settings.model)
