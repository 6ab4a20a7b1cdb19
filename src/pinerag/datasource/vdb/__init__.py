from .base import BaseVectorIndex
from .pinecone_index import PineconeIndex

__all__ = ["BaseVectorIndex", "PineconeIndex"]
