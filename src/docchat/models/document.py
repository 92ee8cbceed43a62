"""Core data models for documents, retrieval sources and chat messages."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


def utc_now() -> datetime:
    """Return the current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Document:
    """An uploaded document and the chunks derived from it.

    Documents are never edited in place; the store only adds and deletes them.
    """

    id: str
    title: str
    content: str
    chunks: tuple[str, ...]
    uploaded_at: datetime = field(default_factory=utc_now)
    size_bytes: int = 0

    def __post_init__(self) -> None:
        if not self.chunks:
            raise ValueError(f"Document {self.id!r} must have at least one chunk")

    @property
    def chunk_count(self) -> int:
        return len(self.chunks)


@dataclass(frozen=True)
class Source:
    """A retrieved chunk together with its owning title and relevance score."""

    title: str
    content: str
    relevance: float

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "content": self.content,
            "relevance": self.relevance,
        }


class Sender(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class ChatMessage:
    """One turn of the conversation."""

    id: str
    content: str
    sender: Sender
    timestamp: datetime = field(default_factory=utc_now)
    sources: tuple[Source, ...] = ()


@dataclass(frozen=True)
class TextUpload:
    """Pre-decoded plain text read by an ingester, ready for the store."""

    title: str
    content: str
    path: str
