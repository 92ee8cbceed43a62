"""Text chunking strategies."""

from docchat.chunkers.sentence_chunker import SentenceChunker, chunk_text, split_sentences

__all__ = ["SentenceChunker", "chunk_text", "split_sentences"]
