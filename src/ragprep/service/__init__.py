"""Processing services: the embedding pipeline and vector store uploaders."""
