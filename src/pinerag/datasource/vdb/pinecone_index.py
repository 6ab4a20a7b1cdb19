import threading
from typing import Any

from loguru import logger
from pinecone import Pinecone

from pinerag.datasource.vdb.base import BaseVectorIndex
from pinerag.entities.search_result import SearchMatch


class PineconeIndex(BaseVectorIndex):
    """
    Query-only wrapper around a Pinecone serverless/pod index.

    Construction does not touch the network. Without ``host`` the data-plane
    handle is resolved from the index name on the first query and cached.
    """

    def __init__(self, api_key: str, index_name: str, host: str | None = None):
        super().__init__(index_name)
        self.host = host
        self._client = Pinecone(api_key=api_key)
        self._index = None
        self._lock = threading.Lock()

    def _get_index(self):
        if self._index is None:
            with self._lock:
                if self._index is None:
                    if self.host:
                        self._index = self._client.Index(name=self.index_name, host=self.host)
                    else:
                        # describe_index call on the control plane
                        self._index = self._client.Index(self.index_name)
        return self._index

    def query(
        self,
        vector: list[float],
        top_k: int = 3,
        include_metadata: bool = True,
        **kwargs
    ) -> list[SearchMatch]:
        response = self._get_index().query(
            vector=vector,
            top_k=top_k,
            include_metadata=include_metadata,
            **kwargs
        )
        matches = [self._to_match(m) for m in _get(response, "matches") or []]
        logger.debug(f"Pinecone index '{self.index_name}' returned {len(matches)} match(es)")
        return matches

    @staticmethod
    def _to_match(raw: Any) -> SearchMatch:
        return SearchMatch(
            id=str(_get(raw, "id") or ""),
            score=float(_get(raw, "score") or 0.0),
            metadata=dict(_get(raw, "metadata") or {}),
        )


def _get(obj: Any, key: str) -> Any:
    # QueryResponse objects or plain dicts
    if isinstance(obj, dict):
        return obj.get(key)
    return getattr(obj, key, None)
