"""Pytest configuration and global fixtures for PineRAG tests."""

from pathlib import Path

import pytest
from loguru import logger

from pinerag.config.settings import ToolConfig
from pinerag.datasource.vdb.base import BaseVectorIndex
from pinerag.entities.search_result import SearchMatch
from pinerag.llm.embedder.base import BaseEmbedder


@pytest.fixture
def tool_config() -> ToolConfig:
    return ToolConfig(
        pinecone_api_key="pc-test-key",
        pinecone_index_name="test-index",
        azure_api_key="az-test-key",
        azure_host="https://example.openai.azure.com",
    )


@pytest.fixture
def sample_matches() -> list[SearchMatch]:
    return [
        SearchMatch(id="1", score=0.92, metadata={"page_title": "Paris", "content": "Paris is the capital."}),
        SearchMatch(id="2", score=0.81, metadata={"page_title": "France", "content": "France is a country."}),
    ]


# ==================== Component Fixtures ====================

@pytest.fixture
def mock_embedder(mocker):
    """Mock the BaseEmbedder interface; returns a 2-d vector."""
    mock = mocker.Mock(spec=BaseEmbedder)
    mock.embed_query.return_value = [0.1, 0.2]
    mock.embed.return_value = [[0.1, 0.2]]
    mock.dimension = 2
    return mock


@pytest.fixture
def mock_index(mocker, sample_matches):
    """Mock the BaseVectorIndex interface; returns the sample matches."""
    mock = mocker.Mock(spec=BaseVectorIndex)
    mock.index_name = "test-index"
    mock.query.return_value = sample_matches
    return mock


@pytest.fixture
def log_messages():
    """Capture loguru records as formatted strings."""
    messages: list[str] = []
    handler_id = logger.add(messages.append, level="DEBUG", format="{level} {message}")
    yield messages
    logger.remove(handler_id)


# ==================== Pytest Configuration ====================

def pytest_configure(config):
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "smoke: Smoke tests")


def pytest_collection_modifyitems(config, items):
    for item in items:
        rel_path = Path(item.fspath).relative_to(Path(__file__).parent)
        if "unit" in rel_path.parts:
            item.add_marker(pytest.mark.unit)
        elif "smoke" in rel_path.parts:
            item.add_marker(pytest.mark.smoke)
