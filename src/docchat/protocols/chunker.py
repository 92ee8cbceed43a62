"""Protocol for text chunking strategies."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ChunkingStrategy(Protocol):
    """Protocol for text chunking strategies.

    Implementations must be deterministic and return at least one chunk.
    """

    def chunk(self, text: str) -> list[str]:
        """Split text into ordered chunks."""
        ...
