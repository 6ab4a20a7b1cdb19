from .outcome import NO_RESULTS_MESSAGE, SEARCH_ERROR_MESSAGE, OutcomeKind, SearchOutcome
from .search_input import SearchInput, validate_input
from .search_result import SearchMatch

__all__ = [
    "SearchMatch",
    "SearchInput",
    "validate_input",
    "SearchOutcome",
    "OutcomeKind",
    "NO_RESULTS_MESSAGE",
    "SEARCH_ERROR_MESSAGE",
]
