"""ragprep - prepare vector data for a RAG chat agent."""

__version__ = "0.1.0"
