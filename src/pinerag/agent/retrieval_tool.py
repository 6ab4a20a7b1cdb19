import asyncio
from typing import Any

from loguru import logger

from pinerag.agent.tool import Tool
from pinerag.config.settings import ToolConfig, load_tool_config
from pinerag.datasource.vdb.base import BaseVectorIndex
from pinerag.datasource.vdb.pinecone_index import PineconeIndex
from pinerag.entities.outcome import SearchOutcome
from pinerag.entities.search_input import SearchInput, validate_input
from pinerag.errors import ConfigurationError, EmbeddingError, VectorStoreError, wrap_exception
from pinerag.llm.embedder.azure_openai import AzureOpenAIEmbedder
from pinerag.llm.embedder.base import BaseEmbedder


class RetrievalTool:
    """
    Embed a query, search the Pinecone index and format the top matches.

    Both client handles are built once at construction and never mutated, so
    one instance can serve concurrent calls.
    """

    name = "pinecone"
    description = (
        "Retrieve relevant information from a Pinecone vector database based on query embeddings."
    )
    top_k = 3

    def __init__(
        self,
        config: ToolConfig | None = None,
        *,
        embedder: BaseEmbedder | None = None,
        index: BaseVectorIndex | None = None,
        **overrides: Any,
    ):
        """
        Args:
            config: Resolved configuration. Built with ``load_tool_config`` when omitted.
            embedder: Embedder to use instead of the Azure OpenAI client.
            index: Vector index to use instead of the Pinecone client.
            **overrides: Field overrides passed to ``load_tool_config``.

        Raises:
            ConfigurationError: If a required API key is missing.
        """
        if config is not None and overrides:
            raise ConfigurationError(
                "Pass either a ToolConfig or field overrides, not both",
                details={"fields": sorted(overrides)},
            )
        self.config = config or load_tool_config(**overrides)

        self.embedder = embedder or AzureOpenAIEmbedder(
            api_key=self.config.azure_api_key,
            azure_endpoint=self.config.azure_host,
            api_version=self.config.azure_api_version,
            model=self.config.embedding_model,
        )
        self.index = index or PineconeIndex(
            api_key=self.config.pinecone_api_key,
            index_name=self.config.pinecone_index_name,
            host=self.config.pinecone_host,
        )

        logger.info(
            f"Retrieval tool ready: index='{self.config.pinecone_index_name}' "
            f"model='{self.config.embedding_model}' dim={self.embedder.dimension} "
            f"host='{self.config.azure_host}'"
        )

    def embed(self, query: str) -> list[float]:
        """Return the embedding of ``query``. Service errors propagate."""
        return self.embedder.embed_query(query)

    def run(self, data: Any) -> SearchOutcome:
        """
        Validate input, embed, search and format.

        Args:
            data: ``{"query": str}`` or a SearchInput.

        Returns:
            SearchOutcome. Embedding and search failures are logged and
            reported as ``OutcomeKind.ERROR``; they are not raised.

        Raises:
            ValidationError: If the input has no string ``query``.
        """
        params = validate_input(data)

        try:
            vector = self.embed(params.query)
        except Exception as e:
            logger.exception(f"Pinecone search request failed: embedding error: {e}")
            return SearchOutcome.failure(wrap_exception(e, "Embedding request failed", EmbeddingError))

        try:
            matches = self.index.query(vector, top_k=self.top_k, include_metadata=True)
        except Exception as e:
            logger.exception(f"Pinecone search request failed: {e}")
            return SearchOutcome.failure(wrap_exception(e, "Vector search request failed", VectorStoreError))

        return SearchOutcome.from_matches(matches)

    def search(self, data: Any) -> str:
        """Run the pipeline and return only the text for the agent."""
        return self.run(data).text

    async def asearch(self, data: Any) -> str:
        """Async variant of ``search``; the blocking calls run in a worker thread."""
        params = validate_input(data)
        outcome = await asyncio.to_thread(self.run, params)
        return outcome.text

    def as_tool(
        self,
        tool_name: str | None = None,
        tool_description: str | None = None,
    ) -> Tool:
        """Package this instance as an agent Tool."""

        async def search_func(**kwargs: Any) -> str:
            return await self.asearch(kwargs)

        return Tool(
            name=tool_name or self.name,
            description=tool_description or self.description,
            func=search_func,
            parameters=SearchInput.model_json_schema(),
        )


def create_retrieval_tool(
    config: ToolConfig | None = None,
    embedder: BaseEmbedder | None = None,
    index: BaseVectorIndex | None = None,
    tool_name: str | None = None,
    tool_description: str | None = None,
    **overrides: Any,
) -> Tool:
    """
    Create the Pinecone retrieval tool.

    Args:
        config: Resolved configuration (optional).
        embedder: Embedding client override (optional).
        index: Vector index override (optional).
        tool_name: Name of the tool (default: "pinecone").
        tool_description: Custom tool description.
        **overrides: Configuration overrides, e.g. ``PINECONE_INDEX_NAME="docs"``.

    Returns:
        Tool instance ready for an agent loop.
    """
    tool = RetrievalTool(config, embedder=embedder, index=index, **overrides)
    return tool.as_tool(tool_name=tool_name, tool_description=tool_description)
