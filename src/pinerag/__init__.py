"""
PineRAG - a retrieval tool for language-model agents.

Embeds a query with Azure OpenAI, searches a Pinecone index and returns the
top matches as one text blob.
"""

__version__ = "0.1.0"

from .agent import RetrievalTool, Tool, create_retrieval_tool
from .config import ToolConfig, load_tool_config
from .entities import (
    NO_RESULTS_MESSAGE,
    SEARCH_ERROR_MESSAGE,
    OutcomeKind,
    SearchInput,
    SearchMatch,
    SearchOutcome,
    validate_input,
)
from .errors import (
    ConfigurationError,
    EmbeddingError,
    PineRAGError,
    ServiceError,
    ValidationError,
    VectorStoreError,
)

__all__ = [
    # Version
    "__version__",
    # Tool
    "RetrievalTool",
    "Tool",
    "create_retrieval_tool",
    # Config
    "ToolConfig",
    "load_tool_config",
    # Entities
    "SearchInput",
    "SearchMatch",
    "SearchOutcome",
    "OutcomeKind",
    "validate_input",
    "NO_RESULTS_MESSAGE",
    "SEARCH_ERROR_MESSAGE",
    # Errors
    "PineRAGError",
    "ConfigurationError",
    "ValidationError",
    "ServiceError",
    "EmbeddingError",
    "VectorStoreError",
]
