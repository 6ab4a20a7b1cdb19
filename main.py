#!/usr/bin/env python3
"""
PineRAG Demo Application

Runs a single query through the Pinecone retrieval tool and prints the text
an agent would receive. Credentials come from the environment (or .env).

    python main.py "capital of France" --index large-index
"""

import argparse
import sys

from loguru import logger

from pinerag import ConfigurationError, RetrievalTool, ValidationError
from pinerag.config import load_log_level


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Search a Pinecone index with an Azure OpenAI query embedding.")
    parser.add_argument("query", help="Query text")
    parser.add_argument("--index", "-i", default=None, help="Pinecone index name (overrides PINECONE_INDEX_NAME)")
    parser.add_argument("--log-level", "-l", default=None, help="Log level (overrides LOG_LEVEL)")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    logger.remove()
    logger.add(sys.stderr, level=(args.log_level or load_log_level()).upper())

    overrides = {}
    if args.index:
        overrides["pinecone_index_name"] = args.index

    try:
        tool = RetrievalTool(**overrides)
    except ConfigurationError as e:
        logger.error(f"Failed to build retrieval tool: {e}")
        print(e.message, file=sys.stderr)
        return 1

    try:
        print(tool.search({"query": args.query}))
    except ValidationError as e:
        print(e.message, file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
