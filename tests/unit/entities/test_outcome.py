import pydantic
import pytest

from pinerag.entities.outcome import (
    NO_RESULTS_MESSAGE,
    SEARCH_ERROR_MESSAGE,
    OutcomeKind,
    SearchOutcome,
)
from pinerag.entities.search_result import SearchMatch
from pinerag.errors import VectorStoreError


class TestSearchMatch:

    def test_metadata_fields(self):
        match = SearchMatch(id="a", score=0.5, metadata={"page_title": "Paris", "content": "Capital."})
        assert match.page_title == "Paris"
        assert match.content == "Capital."
        assert match.format() == "Page Title: Paris Content: Capital. "

    def test_missing_metadata_renders_empty(self):
        match = SearchMatch(id="a", score=0.5)
        assert match.format() == "Page Title:  Content:  "

    def test_frozen(self):
        match = SearchMatch(id="a")
        with pytest.raises(pydantic.ValidationError):
            match.id = "b"


class TestSearchOutcome:

    def test_from_matches_concatenates_in_order(self, sample_matches):
        outcome = SearchOutcome.from_matches(sample_matches)

        assert outcome.kind is OutcomeKind.RESULTS
        assert outcome.ok
        assert outcome.matches == sample_matches
        assert outcome.text == (
            "Page Title: Paris Content: Paris is the capital. "
            "Page Title: France Content: France is a country. "
        )

    def test_from_no_matches(self):
        outcome = SearchOutcome.from_matches([])
        assert outcome.kind is OutcomeKind.NO_RESULTS
        assert outcome.ok
        assert outcome.text == NO_RESULTS_MESSAGE == "No results found for the query."

    def test_failure(self):
        error = VectorStoreError("index down")
        outcome = SearchOutcome.failure(error)

        assert outcome.kind is OutcomeKind.ERROR
        assert not outcome.ok
        assert outcome.error is error
        assert outcome.text == SEARCH_ERROR_MESSAGE == "There was an error with the Pinecone search."
