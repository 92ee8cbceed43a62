"""Protocol for answer generation from retrieved sources."""

from typing import Protocol, Sequence, runtime_checkable

from docchat.models import Source


@runtime_checkable
class ResponseComposer(Protocol):
    """Protocol for response composers.

    The template composer stands in for a real language model; any object
    with a matching compose() can replace it.
    """

    def compose(self, query: str, sources: Sequence[Source]) -> str:
        """Produce the answer text for query from the ranked sources.

        Raises:
            GenerationError: if the answer could not be produced
        """
        ...
