from .retrieval_tool import RetrievalTool, create_retrieval_tool
from .tool import Tool

__all__ = [
    "Tool",
    "RetrievalTool",
    "create_retrieval_tool",
]
