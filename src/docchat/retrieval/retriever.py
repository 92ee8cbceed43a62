"""Top-K retrieval over every chunk in the document store."""

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from docchat.models import Document, Source
from docchat.protocols import SimilarityScorer
from docchat.scoring import LexicalScorer
from docchat.storage import DocumentStore

logger = logging.getLogger(__name__)

DEFAULT_TOP_K = 3
DEFAULT_THRESHOLD = 0.1


@dataclass(frozen=True)
class ScoredChunk:
    """One chunk of one document with its relevance to a query."""

    document: Document
    chunk_index: int
    score: float

    @property
    def text(self) -> str:
        return self.document.chunks[self.chunk_index]

    def to_source(self) -> Source:
        return Source(title=self.document.title, content=self.text, relevance=self.score)


class Retriever:
    """Scores a query against a snapshot of the store and ranks the chunks.

    Equal scores keep store order: earlier documents first, then earlier
    chunks within a document.
    """

    def __init__(self, store: DocumentStore, scorer: Optional[SimilarityScorer] = None):
        self.store = store
        self.scorer = scorer or LexicalScorer()

    def score_all(self, query: str) -> list[ScoredChunk]:
        """Score every chunk of every document, in store order."""
        return [
            ScoredChunk(doc, idx, self.scorer.score(query, chunk))
            for doc in self.store.snapshot()
            for idx, chunk in enumerate(doc.chunks)
        ]

    def retrieve(
        self,
        query: str,
        top_k: int = DEFAULT_TOP_K,
        threshold: float = DEFAULT_THRESHOLD,
    ) -> list[Source]:
        """Return up to top_k sources scoring strictly above threshold.

        Args:
            query: The user question
            top_k: Maximum number of sources to return
            threshold: Scores at or below this are discarded

        Returns:
            Sources sorted by relevance, highest first; empty if none qualify
        """
        if top_k <= 0:
            return []

        candidates = [c for c in self.score_all(query) if c.score > threshold]
        if not candidates:
            logger.debug(f"No chunks above {threshold} for {query!r}")
            return []

        scores = np.array([c.score for c in candidates], dtype=np.float64)
        order = np.argsort(-scores, kind="stable")[:top_k]

        sources = [candidates[i].to_source() for i in order]
        logger.debug(
            f"Retrieved {len(sources)} of {len(candidates)} candidates for {query!r}"
        )
        return sources
