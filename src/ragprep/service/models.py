"""Data models for documents, chunks, and embedded chunks."""

from dataclasses import dataclass, field

from ragprep.constants import DEFAULT_SOURCE_CATEGORY


@dataclass(frozen=True)
class Document:
    """A plain-text document read from the documents directory.

    Attributes:
        filename: File name within the documents directory
        content: Entire file content
        source: Human-readable source label (defaults to the filename)
        category: Category label (defaults to "general")
    """

    filename: str
    content: str
    source: str = ""
    category: str = DEFAULT_SOURCE_CATEGORY

    def __post_init__(self) -> None:
        if not self.source:
            object.__setattr__(self, "source", self.filename)


@dataclass(frozen=True)
class Chunk:
    """A bounded window of a document's text, the unit of embedding.

    Attributes:
        id: Run-wide identifier ("chunk_<n>", counting from 1)
        text: The chunk text
        chunk_index: Zero-based position of the window within its document
        source: Source label copied from the document
        category: Category label copied from the document
        filename: Filename of the parent document
    """

    id: str
    text: str
    chunk_index: int
    source: str
    category: str
    filename: str


@dataclass(frozen=True)
class EmbeddedChunk:
    """A chunk together with its embedding vector."""

    chunk: Chunk
    embedding: list[float] = field(default_factory=list)

    @property
    def id(self) -> str:
        return self.chunk.id
