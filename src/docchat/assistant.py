"""Chat session tying retrieval to answer composition."""

import logging
import uuid
from dataclasses import dataclass
from typing import Optional

from docchat.chunkers import SentenceChunker
from docchat.composers import TemplateComposer
from docchat.config import Settings, get_settings
from docchat.errors import GenerationError
from docchat.models import ChatMessage, Sender, Source
from docchat.protocols import ResponseComposer
from docchat.retrieval import DEFAULT_THRESHOLD, DEFAULT_TOP_K, Retriever
from docchat.scoring import LexicalScorer
from docchat.storage import DocumentStore

logger = logging.getLogger(__name__)

ERROR_ANSWER = (
    "I apologize, but I encountered an error while processing your question. "
    "Please try again."
)


@dataclass(frozen=True)
class Answer:
    """Result of one question."""

    text: str
    sources: tuple[Source, ...]
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.error is not None

    @property
    def insufficient_context(self) -> bool:
        """True when retrieval found nothing and generation did not fail."""
        return not self.sources and not self.failed


class Assistant:
    """Answers questions from the documents in a store.

    A question is one end-to-end operation: the store lock is held from
    retrieval until the answer is composed, so ingestion cannot change the
    sources mid-answer. A running composer cannot be cancelled.
    """

    def __init__(
        self,
        store: DocumentStore,
        retriever: Optional[Retriever] = None,
        composer: Optional[ResponseComposer] = None,
        top_k: int = DEFAULT_TOP_K,
        threshold: float = DEFAULT_THRESHOLD,
    ):
        self.store = store
        self.retriever = retriever or Retriever(store)
        self.composer = composer or TemplateComposer()
        self.top_k = top_k
        self.threshold = threshold
        self.history: list[ChatMessage] = []

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "Assistant":
        """Build an assistant with an empty store configured from settings."""
        settings = settings or get_settings()
        store = DocumentStore(
            SentenceChunker(chunk_size=settings.chunk_size, overlap=settings.chunk_overlap)
        )
        scorer = LexicalScorer(
            phrase_boost=settings.phrase_boost,
            min_token_length=settings.min_token_length,
        )
        return cls(
            store,
            retriever=Retriever(store, scorer),
            composer=TemplateComposer(delay_range=settings.compose_delay_range),
            top_k=settings.top_k,
            threshold=settings.relevance_threshold,
        )

    def ask(
        self,
        query: str,
        top_k: Optional[int] = None,
        threshold: Optional[float] = None,
    ) -> Answer:
        """Retrieve sources for query and compose an answer from them.

        Args:
            query: The user question
            top_k: Overrides the configured number of sources
            threshold: Overrides the configured relevance threshold

        Returns:
            An Answer; generation failures are reported in Answer.error
        """
        top_k = self.top_k if top_k is None else top_k
        threshold = self.threshold if threshold is None else threshold

        with self.store.lock:
            self.history.append(self._message(query, Sender.USER))

            sources = tuple(self.retriever.retrieve(query, top_k=top_k, threshold=threshold))
            try:
                text = self.composer.compose(query, sources)
            except GenerationError as e:
                logger.error(f"Answer generation failed for {query!r}: {e}")
                self.history.append(self._message(ERROR_ANSWER, Sender.ASSISTANT))
                return Answer(text=ERROR_ANSWER, sources=sources, error=str(e))

            self.history.append(self._message(text, Sender.ASSISTANT, sources))

        return Answer(text=text, sources=sources)

    def clear_history(self) -> None:
        with self.store.lock:
            self.history.clear()

    @staticmethod
    def _message(
        content: str, sender: Sender, sources: tuple[Source, ...] = ()
    ) -> ChatMessage:
        return ChatMessage(
            id=uuid.uuid4().hex,
            content=content,
            sender=sender,
            sources=sources,
        )
