"""SearchMatch entity representing one vector-search hit."""

from typing import Any

from pydantic import BaseModel, Field


class SearchMatch(BaseModel):
    """A single match returned by the vector index.

    Attributes:
        id: Vector ID in the index
        score: Similarity score reported by the service (ordering is the service's)
        metadata: Raw metadata attached to the vector
    """

    id: str = ""
    score: float = 0.0
    metadata: dict[str, Any] = Field(default_factory=dict)

    model_config = {
        "frozen": True,  # Matches are read-only
    }

    @property
    def page_title(self) -> str:
        return str(self.metadata.get("page_title") or "")

    @property
    def content(self) -> str:
        return str(self.metadata.get("content") or "")

    def format(self) -> str:
        """Render the match as the text fragment handed to the agent."""
        return f"Page Title: {self.page_title} Content: {self.content} "
