import os
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from pinerag.errors import ConfigurationError

# Load .env file from the project root
# This file: src/pinerag/config/settings.py
SERVER_ROOT = Path(__file__).resolve().parent.parent.parent.parent
ENV_PATH = SERVER_ROOT / ".env"

if ENV_PATH.exists():
    load_dotenv(ENV_PATH)
else:
    # Fallback to simple load_dotenv which looks in cwd
    load_dotenv()

DEFAULT_PINECONE_INDEX = "large-index"
DEFAULT_AZURE_API_VERSION = "2024-02-01"
DEFAULT_EMBEDDING_MODEL = "text-embedding-3-large"

# field name -> environment variable (also accepted as an override key)
ENV_VARS: dict[str, str] = {
    "pinecone_api_key": "PINECONE_PROJECT_API_KEY",
    "pinecone_index_name": "PINECONE_INDEX_NAME",
    "pinecone_host": "PINECONE_INDEX_HOST",
    "azure_api_key": "AZURE_API_KEY",
    "azure_host": "AZURE_HOST",
    "azure_api_version": "AZURE_API_VERSION",
    "embedding_model": "AZURE_EMBEDDING_MODEL",
}

DEFAULTS: dict[str, str] = {
    "pinecone_index_name": DEFAULT_PINECONE_INDEX,
    "azure_api_version": DEFAULT_AZURE_API_VERSION,
    "embedding_model": DEFAULT_EMBEDDING_MODEL,
}


class ToolConfig(BaseModel):
    """Credentials and targets for the retrieval tool.

    API keys are kept out of ``repr`` so the config can be logged.
    """

    pinecone_api_key: str = Field(repr=False, description="Pinecone project API key")
    pinecone_index_name: str = Field(default=DEFAULT_PINECONE_INDEX, description="Pinecone index to query")
    pinecone_host: Optional[str] = Field(default=None, description="Data-plane host of the index; skips the host lookup")
    azure_api_key: str = Field(repr=False, description="Azure OpenAI API key")
    azure_host: Optional[str] = Field(default=None, description="Azure OpenAI endpoint")
    azure_api_version: str = Field(default=DEFAULT_AZURE_API_VERSION, description="Azure OpenAI API version")
    embedding_model: str = Field(default=DEFAULT_EMBEDDING_MODEL, description="Embedding model / deployment name")

    model_config = {
        "frozen": True,
    }


def _resolve(field: str, overrides: dict[str, Any]) -> Optional[str]:
    """Explicit override -> environment variable -> built-in default."""
    env_name = ENV_VARS[field]
    for key in (field, env_name):
        value = overrides.get(key)
        if value:
            return value
    return os.getenv(env_name) or DEFAULTS.get(field)


def load_tool_config(**overrides: Any) -> ToolConfig:
    """Build a ToolConfig from overrides and environment variables.

    Overrides may use either the field name (``pinecone_api_key``) or the
    environment variable name (``PINECONE_PROJECT_API_KEY``). Empty values
    count as absent.

    Raises:
        ConfigurationError: If the Pinecone or Azure API key is missing.
    """
    unknown = set(overrides) - set(ENV_VARS) - set(ENV_VARS.values())
    if unknown:
        raise ConfigurationError(
            "Unknown configuration fields",
            details={"fields": sorted(unknown)},
        )

    values = {field: _resolve(field, overrides) for field in ENV_VARS}

    if not values["pinecone_api_key"]:
        raise ConfigurationError("Missing PINECONE_PROJECT_API_KEY environment variable.")
    if not values["azure_api_key"]:
        raise ConfigurationError("Missing AZURE_API_KEY environment variable.")

    return ToolConfig(**values)


def load_log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()
