"""Exception types raised by ragprep.

Every error is fatal to a run: library code raises, and the CLI reports the
message and exits with a non-zero status.
"""


class RagPrepError(Exception):
    """Base exception for all ragprep failures."""


class ConfigMissingError(RagPrepError):
    """Raised when the configuration file does not exist."""


class ConfigInvalidError(RagPrepError):
    """Raised when the configuration is unusable (placeholder key, bad values)."""


class DocsDirMissingError(RagPrepError):
    """Raised when the documents directory does not exist."""


class NoDocumentsError(RagPrepError):
    """Raised when the documents directory holds no supported files."""


class EmbeddingProviderError(RagPrepError):
    """Raised when the embedding API answers with an error or an unusable body."""


class TransportError(RagPrepError):
    """Raised when a network call fails before a response is received."""


class UploadError(RagPrepError):
    """Raised when the vector store upload fails or returns an unparseable body."""
