"""Protocol definitions for extensible components."""

from docchat.protocols.chunker import ChunkingStrategy
from docchat.protocols.composer import ResponseComposer
from docchat.protocols.ingester import Ingester
from docchat.protocols.scorer import SimilarityScorer

__all__ = ["ChunkingStrategy", "SimilarityScorer", "ResponseComposer", "Ingester"]
