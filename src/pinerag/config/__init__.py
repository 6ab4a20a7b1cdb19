"""Configuration system for PineRAG."""

from .settings import ToolConfig, load_log_level, load_tool_config

__all__ = ["ToolConfig", "load_tool_config", "load_log_level"]
