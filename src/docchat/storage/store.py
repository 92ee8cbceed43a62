"""In-memory document storage."""

import logging
import threading
import uuid
from typing import Optional

from docchat.chunkers import SentenceChunker
from docchat.models import Document, utc_now
from docchat.protocols import ChunkingStrategy

logger = logging.getLogger(__name__)


class DocumentStore:
    """Insertion-ordered mapping of document id to Document.

    Starts empty and changes only through add_document() and
    delete_document(). All access goes through a re-entrant lock; hold
    `store.lock` to keep the contents fixed across several calls.
    """

    def __init__(self, chunker: Optional[ChunkingStrategy] = None):
        self.chunker = chunker or SentenceChunker()
        self.lock = threading.RLock()
        self._documents: dict[str, Document] = {}

    def add_document(self, title: str, content: str) -> Document:
        """Chunk content and store it as a new document.

        Args:
            title: Display title, usually the uploaded file name
            content: Decoded plain text

        Returns:
            The stored Document
        """
        chunks = tuple(self.chunker.chunk(content))
        doc = Document(
            id=uuid.uuid4().hex,
            title=title,
            content=content,
            chunks=chunks,
            uploaded_at=utc_now(),
            size_bytes=len(content.encode("utf-8")),
        )
        with self.lock:
            self._documents[doc.id] = doc

        logger.info(f"Added {title!r} ({doc.size_bytes} bytes, {len(chunks)} chunks)")
        return doc

    def delete_document(self, doc_id: str) -> None:
        """Remove a document. Unknown ids are ignored."""
        with self.lock:
            doc = self._documents.pop(doc_id, None)

        if doc is None:
            logger.debug(f"Delete ignored, no document with id {doc_id}")
        else:
            logger.info(f"Deleted {doc.title!r}")

    def get(self, doc_id: str) -> Optional[Document]:
        with self.lock:
            return self._documents.get(doc_id)

    def snapshot(self) -> tuple[Document, ...]:
        """Return the current documents in insertion order."""
        with self.lock:
            return tuple(self._documents.values())

    def list_documents(self) -> list[Document]:
        return list(self.snapshot())

    @property
    def chunk_count(self) -> int:
        """Total searchable chunks across all documents."""
        return sum(doc.chunk_count for doc in self.snapshot())

    @property
    def total_bytes(self) -> int:
        return sum(doc.size_bytes for doc in self.snapshot())

    def __len__(self) -> int:
        with self.lock:
            return len(self._documents)

    def __contains__(self, doc_id: object) -> bool:
        with self.lock:
            return doc_id in self._documents
