"""Model clients used by PineRAG."""

from .embedder import AzureOpenAIEmbedder, BaseEmbedder

__all__ = ["BaseEmbedder", "AzureOpenAIEmbedder"]
