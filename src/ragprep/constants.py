"""Application-wide constants and defaults for ragprep.

This module provides a single source of truth for configuration defaults,
endpoints, and other constants used throughout the application.
"""

# =============================================================================
# Paths
# =============================================================================
DEFAULT_CONFIG_PATH = "./config.json"
DEFAULT_DOCS_PATH = "./documents"

# Only these file types are read as documents
SUPPORTED_EXTENSIONS = (".txt", ".md")

# =============================================================================
# Embedding Provider
# =============================================================================
OPENAI_EMBEDDINGS_URL = "https://api.openai.com/v1/embeddings"
DEFAULT_EMBEDDING_MODEL = "text-embedding-ada-002"
PLACEHOLDER_OPENAI_API_KEY = "your-openai-api-key"

# Pause after every embedding call (seconds)
EMBEDDING_DELAY_SECONDS = 0.1

# =============================================================================
# Processing Defaults
# =============================================================================
DEFAULT_CHUNK_SIZE = 1000
DEFAULT_CHUNK_OVERLAP = 200
DEFAULT_BATCH_SIZE = 10

DEFAULT_SOURCE_CATEGORY = "general"

# =============================================================================
# Vector Stores
# =============================================================================
PINECONE_HOST_TEMPLATE = "https://{index_name}-{environment}.svc.{environment}.pinecone.io"
DEFAULT_QDRANT_URL = "http://localhost:6333"
DEFAULT_COLLECTION_NAME = "customer-support"

# =============================================================================
# Webhook Smoke Test
# =============================================================================
DEFAULT_WEBHOOK_URL = "http://localhost:5678/webhook/rag-query"
ANSWER_PREVIEW_LENGTH = 200
TOP_SOURCES_SHOWN = 3
PERFORMANCE_REQUEST_COUNT = 5
QUERY_PAUSE_SECONDS = 1.0
PERFORMANCE_PAUSE_SECONDS = 2.0

TEST_QUERIES = [
    "What is machine learning?",
    "How does artificial intelligence work?",
    "What are the benefits of cloud computing?",
    "Explain the concept of blockchain technology",
    "What is the difference between frontend and backend development?",
]
