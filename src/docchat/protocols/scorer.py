"""Protocol for query-to-chunk relevance scoring."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class SimilarityScorer(Protocol):
    """Protocol for relevance scorers.

    Allows swapping the lexical scorer for another total, deterministic
    function without touching the retriever.
    """

    def score(self, query: str, text: str) -> float:
        """Return the relevance of text to query, in [0, 1]."""
        ...
