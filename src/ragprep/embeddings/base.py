"""Protocol for embedding providers."""

from typing import Protocol


class EmbeddingClient(Protocol):
    """Interface shared by embedding providers.

    One text is embedded per call; callers are responsible for pacing.
    """

    model: str

    def embed(self, text: str) -> list[float]:
        """Generate an embedding for a single text.

        Args:
            text: The text to embed

        Returns:
            list[float]: The embedding vector

        Raises:
            EmbeddingProviderError: If the provider reports an error
            TransportError: If the request cannot be completed
        """
        ...

    def close(self) -> None:
        """Release any resources held by the client."""
        ...
