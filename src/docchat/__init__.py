"""DocChat - retrieval core of a document-grounded chat assistant."""

from docchat.assistant import Answer, Assistant
from docchat.chunkers import SentenceChunker, chunk_text
from docchat.models import ChatMessage, Document, Source
from docchat.retrieval import Retriever
from docchat.scoring import LexicalScorer, score_similarity
from docchat.storage import DocumentStore

__version__ = "0.1.0"

__all__ = [
    "Answer",
    "Assistant",
    "ChatMessage",
    "Document",
    "DocumentStore",
    "LexicalScorer",
    "Retriever",
    "SentenceChunker",
    "Source",
    "chunk_text",
    "score_similarity",
]
