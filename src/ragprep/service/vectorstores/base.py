"""Base protocol and shared HTTP helper for vector store uploaders."""

import logging
from typing import Any, Protocol

import requests

from ragprep.errors import UploadError
from ragprep.service.models import EmbeddedChunk

logger = logging.getLogger(__name__)


class VectorStoreUploader(Protocol):
    """Interface implemented once per vector store backend.

    An uploader maps embedded chunks into its backend's wire shape and sends
    them all in a single request.
    """

    def to_records(self, chunks: list[EmbeddedChunk]) -> list[dict[str, Any]]:
        """Map embedded chunks into backend-specific records."""
        ...

    def upload(self, chunks: list[EmbeddedChunk]) -> Any:
        """Upload all chunks in one call and return the parsed response.

        Raises:
            UploadError: If the request fails or the response is not JSON
        """
        ...


def send_json(
    method: str,
    url: str,
    payload: dict[str, Any],
    headers: dict[str, str] | None = None,
    timeout: float | None = None,
) -> Any:
    """Send a JSON request and return the decoded JSON response.

    Args:
        method: HTTP method ("POST", "PUT")
        url: Target URL
        payload: JSON body
        headers: Extra request headers
        timeout: Request timeout in seconds (None waits indefinitely)

    Returns:
        The parsed JSON response body

    Raises:
        UploadError: On transport failure, HTTP error status, or a non-JSON body
    """
    try:
        response = requests.request(method, url, json=payload, headers=headers, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        raise UploadError(f"{method} {url} failed: {e}") from e

    try:
        return response.json()
    except ValueError as e:
        raise UploadError(f"{method} {url} returned a non-JSON response") from e
