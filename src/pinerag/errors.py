"""
PineRAG Error Classification System.

This module provides the exceptions raised (or reported) by the retrieval
tool.

Error Categories:
-----------------
1. Permanent Errors: Failures the caller must fix before trying again
   - Missing credentials (ConfigurationError)
   - Malformed tool input (ValidationError)

2. Service Errors: Failures of the external embedding or vector-search call
   - EmbeddingError
   - VectorStoreError

   Service errors never escape ``RetrievalTool.search``. They are logged and
   attached to the returned ``SearchOutcome`` instead.

Usage:
------
    from pinerag.errors import ConfigurationError, ValidationError

    try:
        tool = RetrievalTool()
    except ConfigurationError as e:
        logger.error(f"Cannot build retrieval tool: {e}")
"""

from typing import Any


class PineRAGError(Exception):
    """
    Base exception for all PineRAG errors.

    Attributes:
        message: Human-readable error description
        details: Additional context about the error (optional)
        original_error: The underlying exception that caused this error (optional)
    """

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.original_error = original_error

    def __str__(self) -> str:
        base = self.message
        if self.details:
            base += f" | Details: {self.details}"
        if self.original_error:
            base += f" | Caused by: {type(self.original_error).__name__}: {self.original_error}"
        return base

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        return {
            "error_type": type(self).__name__,
            "message": self.message,
            "details": self.details,
            "original_error": str(self.original_error) if self.original_error else None
        }


# =============================================================================
# Permanent Errors - raised to the caller
# =============================================================================

class PermanentError(PineRAGError):
    """
    Base class for errors that will not go away on their own.

    These errors indicate issues that require caller intervention.
    """
    pass


class ConfigurationError(PermanentError):
    """
    Raised when the tool cannot be configured.

    Common causes:
    - PINECONE_PROJECT_API_KEY missing
    - AZURE_API_KEY missing
    """

    def __init__(
        self,
        message: str = "Configuration error",
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None
    ):
        super().__init__(message, details, original_error)


class ValidationError(PermanentError):
    """
    Raised when tool input does not match the input schema.

    ``details["errors"]`` holds the list of field errors reported by pydantic.
    """

    def __init__(
        self,
        message: str = "Invalid tool input",
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None
    ):
        super().__init__(message, details, original_error)

    @property
    def errors(self) -> list[dict[str, Any]]:
        return self.details.get("errors", [])


# =============================================================================
# Service Errors - reported, never raised past the tool boundary
# =============================================================================

class ServiceError(PineRAGError):
    """
    Raised when a call to an external service fails.

    ``details["service"]`` names the failing step ("embedding" or
    "vector_search").
    """

    service: str = "external"

    def __init__(
        self,
        message: str = "External service call failed",
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None
    ):
        details = dict(details or {})
        details.setdefault("service", self.service)
        super().__init__(message, details, original_error)


class EmbeddingError(ServiceError):
    """Raised when the embedding request fails."""

    service = "embedding"


class VectorStoreError(ServiceError):
    """Raised when the vector index query fails."""

    service = "vector_search"


# =============================================================================
# Helper Functions
# =============================================================================

def wrap_exception(
    error: Exception,
    context: str = "",
    error_class: type[PineRAGError] = ServiceError,
) -> PineRAGError:
    """
    Wrap a foreign exception in a PineRAGError.

    Errors that already are instances of ``error_class`` pass through unchanged.

    Args:
        error: The original exception
        context: Additional context about where the error occurred
        error_class: PineRAGError subclass to wrap with

    Returns:
        PineRAGError instance wrapping the original error

    Example:
        try:
            vector = embedder.embed_query(query)
        except Exception as e:
            raise wrap_exception(e, "Embedding request", EmbeddingError) from e
    """
    if isinstance(error, error_class):
        return error

    message = f"{context}: {error}" if context else str(error)
    return error_class(message=message, original_error=error)
