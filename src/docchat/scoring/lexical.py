"""Lexical relevance scoring: token Jaccard plus an exact-phrase boost."""

import re

NON_WORD = re.compile(r"\W+")
BIGRAM = re.compile(r"\b\w+\s+\w+\b")

DEFAULT_PHRASE_BOOST = 0.3
DEFAULT_MIN_TOKEN_LENGTH = 3


def tokenize(text: str, min_length: int = DEFAULT_MIN_TOKEN_LENGTH) -> set[str]:
    """Return the distinct lowercase tokens of at least min_length characters."""
    return {token for token in NON_WORD.split(text.lower()) if len(token) >= min_length}


def extract_bigrams(text: str) -> list[str]:
    """Return non-overlapping word pairs, scanning the lowercased text left to right."""
    return BIGRAM.findall(text.lower())


def jaccard(a: set[str], b: set[str]) -> float:
    union = a | b
    if not union:
        return 0.0
    return len(a & b) / len(union)


def score_similarity(
    query: str,
    text: str,
    phrase_boost: float = DEFAULT_PHRASE_BOOST,
    min_token_length: int = DEFAULT_MIN_TOKEN_LENGTH,
) -> float:
    """Score how relevant text is to query, in [0, 1].

    Args:
        query: The user question
        text: A candidate chunk
        phrase_boost: Added once per query bigram found verbatim in text
        min_token_length: Shortest token that counts towards overlap

    Returns:
        min(jaccard + boost, 1.0); 0.0 when neither side has any tokens
    """
    overlap = jaccard(tokenize(query, min_token_length), tokenize(text, min_token_length))

    lowered = text.lower()
    boost = sum(phrase_boost for bigram in extract_bigrams(query) if bigram in lowered)

    return min(overlap + boost, 1.0)


class LexicalScorer:
    """SimilarityScorer with fixed boost and token-length settings."""

    def __init__(
        self,
        phrase_boost: float = DEFAULT_PHRASE_BOOST,
        min_token_length: int = DEFAULT_MIN_TOKEN_LENGTH,
    ):
        self.phrase_boost = phrase_boost
        self.min_token_length = min_token_length

    def score(self, query: str, text: str) -> float:
        return score_similarity(
            query,
            text,
            phrase_boost=self.phrase_boost,
            min_token_length=self.min_token_length,
        )
