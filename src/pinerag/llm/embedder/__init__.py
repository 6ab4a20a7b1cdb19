from .azure_openai import AzureOpenAIEmbedder
from .base import BaseEmbedder

__all__ = ["BaseEmbedder", "AzureOpenAIEmbedder"]
