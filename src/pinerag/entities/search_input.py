"""Input schema for the retrieval tool."""

from collections.abc import Mapping
from typing import Any

import pydantic
from pydantic import BaseModel, Field, StrictStr

from pinerag.errors import ValidationError


class SearchInput(BaseModel):
    """Arguments accepted by the retrieval tool."""

    query: StrictStr = Field(
        ...,
        min_length=1,
        description="Query text to convert into embeddings and search in Pinecone",
    )

    model_config = {
        "frozen": True,
        "extra": "ignore",
    }


def validate_input(data: Any) -> SearchInput:
    """Validate raw tool input.

    Args:
        data: A mapping such as ``{"query": "..."}``, or a SearchInput.

    Returns:
        The validated SearchInput.

    Raises:
        ValidationError: If ``query`` is missing or not a string.
    """
    if isinstance(data, SearchInput):
        return data
    if not isinstance(data, Mapping):
        raise ValidationError(
            "Tool input must be an object with a 'query' field",
            details={"errors": [{"type": "model_type", "loc": (), "msg": "Input should be an object"}]},
        )
    try:
        return SearchInput.model_validate(dict(data))
    except pydantic.ValidationError as e:
        raise ValidationError(
            "Invalid tool input",
            details={"errors": e.errors(include_url=False)},
            original_error=e,
        ) from e
