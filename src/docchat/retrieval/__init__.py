"""Chunk retrieval and ranking."""

from docchat.retrieval.retriever import (
    DEFAULT_THRESHOLD,
    DEFAULT_TOP_K,
    Retriever,
    ScoredChunk,
)

__all__ = ["Retriever", "ScoredChunk", "DEFAULT_TOP_K", "DEFAULT_THRESHOLD"]
