"""Structured result of a retrieval tool call."""

from enum import Enum

from pydantic import BaseModel, Field

from pinerag.errors import ServiceError

from .search_result import SearchMatch

NO_RESULTS_MESSAGE = "No results found for the query."
SEARCH_ERROR_MESSAGE = "There was an error with the Pinecone search."


class OutcomeKind(str, Enum):
    """How a search ended.

    Attributes:
        RESULTS: At least one match was formatted
        NO_RESULTS: The index returned zero matches
        ERROR: The embedding or search call failed
    """
    RESULTS = "results"
    NO_RESULTS = "no_results"
    ERROR = "error"


class SearchOutcome(BaseModel):
    """Text for the agent plus enough structure to tell the cases apart."""

    kind: OutcomeKind
    text: str
    matches: list[SearchMatch] = Field(default_factory=list)
    error: ServiceError | None = None

    model_config = {
        "frozen": True,
        "arbitrary_types_allowed": True,
    }

    @property
    def ok(self) -> bool:
        return self.kind is not OutcomeKind.ERROR

    @classmethod
    def from_matches(cls, matches: list[SearchMatch]) -> "SearchOutcome":
        if not matches:
            return cls(kind=OutcomeKind.NO_RESULTS, text=NO_RESULTS_MESSAGE)
        text = "".join(match.format() for match in matches)
        return cls(kind=OutcomeKind.RESULTS, text=text, matches=matches)

    @classmethod
    def failure(cls, error: ServiceError) -> "SearchOutcome":
        return cls(kind=OutcomeKind.ERROR, text=SEARCH_ERROR_MESSAGE, error=error)
