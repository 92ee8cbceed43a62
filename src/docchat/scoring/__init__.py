"""Query-to-chunk relevance scoring."""

from docchat.scoring.lexical import (
    LexicalScorer,
    extract_bigrams,
    jaccard,
    score_similarity,
    tokenize,
)

__all__ = ["LexicalScorer", "score_similarity", "tokenize", "extract_bigrams", "jaccard"]
