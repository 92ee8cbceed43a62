"""Sentence-aware chunking strategy with word overlap."""

import re

SENTENCE_BOUNDARY = re.compile(r"[.!?]+")


def split_sentences(text: str) -> list[str]:
    """Split text at runs of sentence-ending punctuation, dropping blanks."""
    return [s.strip() for s in SENTENCE_BOUNDARY.split(text) if s.strip()]


class SentenceChunker:
    """Default chunking: pack whole sentences up to chunk_size, carry overlap.

    - Splits on `.`, `!` and `?` and never breaks a sentence, so a single
      sentence longer than chunk_size becomes its own oversized chunk
    - When a chunk is flushed, its trailing words seed the next one
    - Falls back to the whole text when nothing sentence-like is found
    """

    DEFAULT_CHUNK_SIZE = 500
    DEFAULT_OVERLAP = 50
    # Overlap is given in characters but carried as words.
    CHARS_PER_WORD = 10

    def __init__(
        self,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        overlap: int = DEFAULT_OVERLAP,
    ):
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        if overlap < 0:
            raise ValueError(f"overlap must be non-negative, got {overlap}")
        self.chunk_size = chunk_size
        self.overlap = overlap

    @property
    def words_per_overlap(self) -> int:
        """Number of trailing words carried into the next chunk."""
        return max(self.overlap // self.CHARS_PER_WORD, 0)

    def chunk(self, text: str) -> list[str]:
        """Split text into ordered chunks.

        Args:
            text: The raw document text

        Returns:
            Non-empty list of chunk strings, in document order
        """
        chunks: list[str] = []
        buffer = ""

        for sentence in split_sentences(text):
            if buffer and len(buffer) + len(sentence) > self.chunk_size:
                flushed = buffer.strip()
                chunks.append(flushed)
                carry = self._tail_words(flushed)
                buffer = f"{carry} {sentence}" if carry else sentence
            elif buffer:
                buffer += ". " + sentence
            else:
                buffer = sentence

        # Trailing buffer
        if buffer.strip():
            chunks.append(buffer.strip())

        return chunks if chunks else [text]

    def _tail_words(self, chunk: str) -> str:
        count = self.words_per_overlap
        if count == 0:
            return ""
        return " ".join(chunk.split()[-count:])


def chunk_text(
    text: str,
    chunk_size: int = SentenceChunker.DEFAULT_CHUNK_SIZE,
    overlap: int = SentenceChunker.DEFAULT_OVERLAP,
) -> list[str]:
    """Chunk text with a one-off SentenceChunker."""
    return SentenceChunker(chunk_size=chunk_size, overlap=overlap).chunk(text)
