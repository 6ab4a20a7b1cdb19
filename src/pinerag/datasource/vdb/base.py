from abc import ABC, abstractmethod

from pinerag.entities.search_result import SearchMatch


class BaseVectorIndex(ABC):
    """Abstract base class for hosted vector index implementations."""

    def __init__(self, index_name: str):
        self.index_name = index_name

    @abstractmethod
    def query(
        self,
        vector: list[float],
        top_k: int = 3,
        include_metadata: bool = True,
        **kwargs
    ) -> list[SearchMatch]:
        """
        Return the nearest neighbours of ``vector``.

        Args:
            vector: The embedded query vector.
            top_k: Number of matches.
            include_metadata: Ask the service to return stored metadata.
            kwargs:
                - filter: Metadata filters
                - namespace: Index namespace

        Returns:
            Matches in the order the service returned them.
        """
        pass
