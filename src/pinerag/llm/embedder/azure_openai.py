from loguru import logger
from openai import AzureOpenAI, OpenAIError

from pinerag.config.settings import DEFAULT_AZURE_API_VERSION, DEFAULT_EMBEDDING_MODEL
from pinerag.errors import ConfigurationError
from pinerag.llm.embedder.base import BaseEmbedder

MODEL_DIMENSIONS = {
    "text-embedding-3-large": 3072,
    "text-embedding-3-small": 1536,
    "text-embedding-ada-002": 1536,
}


class AzureOpenAIEmbedder(BaseEmbedder):
    """
    Embedder backed by an Azure OpenAI embedding deployment.

    The client is created eagerly; no request is sent until ``embed`` is called.
    Requests are not retried.
    """

    def __init__(
        self,
        api_key: str,
        azure_endpoint: str | None,
        api_version: str = DEFAULT_AZURE_API_VERSION,
        model: str = DEFAULT_EMBEDDING_MODEL,
        dimension: int | None = None,
    ):
        self.model = model
        self.azure_endpoint = azure_endpoint
        self._dimension = dimension or MODEL_DIMENSIONS.get(model, 0)
        try:
            self._client = AzureOpenAI(
                api_key=api_key,
                azure_endpoint=azure_endpoint,
                api_version=api_version,
                max_retries=0,
            )
        except OpenAIError as e:
            # raised when no endpoint is given and AZURE_OPENAI_ENDPOINT is unset
            raise ConfigurationError(
                "Missing AZURE_HOST environment variable.",
                original_error=e,
            ) from e

    def embed(self, texts: list[str]) -> list[list[float]]:
        if not texts:
            raise ValueError("texts must not be empty")

        response = self._client.embeddings.create(model=self.model, input=texts)
        vectors = [item.embedding for item in response.data]
        logger.debug(f"Embedded {len(texts)} text(s) with {self.model} (dim={len(vectors[0]) if vectors else 0})")
        return vectors

    @property
    def dimension(self) -> int:
        return self._dimension
