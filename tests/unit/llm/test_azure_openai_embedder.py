from types import SimpleNamespace
from unittest.mock import patch

import pytest
from openai import OpenAIError

from pinerag.errors import ConfigurationError
from pinerag.llm.embedder.azure_openai import AzureOpenAIEmbedder


def _response(*vectors):
    return SimpleNamespace(data=[SimpleNamespace(embedding=list(v)) for v in vectors])


class TestAzureOpenAIEmbedder:

    @patch("pinerag.llm.embedder.azure_openai.AzureOpenAI")
    def test_client_built_eagerly_without_retries(self, mock_client_cls):
        embedder = AzureOpenAIEmbedder(
            api_key="az",
            azure_endpoint="https://example.openai.azure.com",
            api_version="2024-02-01",
        )

        mock_client_cls.assert_called_once_with(
            api_key="az",
            azure_endpoint="https://example.openai.azure.com",
            api_version="2024-02-01",
            max_retries=0,
        )
        mock_client_cls.return_value.embeddings.create.assert_not_called()
        assert embedder.model == "text-embedding-3-large"
        assert embedder.dimension == 3072

    @patch("pinerag.llm.embedder.azure_openai.AzureOpenAI")
    def test_embed_query_returns_first_vector(self, mock_client_cls):
        create = mock_client_cls.return_value.embeddings.create
        create.return_value = _response([0.1, 0.2], [0.9, 0.9])

        embedder = AzureOpenAIEmbedder(api_key="az", azure_endpoint="https://h")
        vector = embedder.embed_query("capital of France")

        assert vector == [0.1, 0.2]
        create.assert_called_once_with(model="text-embedding-3-large", input=["capital of France"])

    @patch("pinerag.llm.embedder.azure_openai.AzureOpenAI")
    def test_custom_model_dimension(self, mock_client_cls):
        assert AzureOpenAIEmbedder(api_key="az", azure_endpoint="https://h", model="text-embedding-3-small").dimension == 1536
        assert AzureOpenAIEmbedder(api_key="az", azure_endpoint="https://h", model="my-deploy", dimension=64).dimension == 64

    @patch("pinerag.llm.embedder.azure_openai.AzureOpenAI")
    def test_errors_propagate(self, mock_client_cls):
        mock_client_cls.return_value.embeddings.create.side_effect = RuntimeError("503")
        embedder = AzureOpenAIEmbedder(api_key="az", azure_endpoint="https://h")

        with pytest.raises(RuntimeError, match="503"):
            embedder.embed_query("q")

    @patch("pinerag.llm.embedder.azure_openai.AzureOpenAI")
    def test_empty_input(self, mock_client_cls):
        embedder = AzureOpenAIEmbedder(api_key="az", azure_endpoint="https://h")
        with pytest.raises(ValueError):
            embedder.embed([])

    @patch("pinerag.llm.embedder.azure_openai.AzureOpenAI", side_effect=OpenAIError("Must provide azure_endpoint"))
    def test_missing_endpoint_is_configuration_error(self, mock_client_cls):
        with pytest.raises(ConfigurationError, match="AZURE_HOST"):
            AzureOpenAIEmbedder(api_key="az", azure_endpoint=None)
