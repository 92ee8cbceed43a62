"""Protocol for plain-text intake handlers."""

from pathlib import Path
from typing import Iterator, Protocol, runtime_checkable

from docchat.models import TextUpload


@runtime_checkable
class Ingester(Protocol):
    """Protocol for plain-text intake handlers.

    Implementations turn a path into decoded text uploads. Content is never
    interpreted structurally: a .json file is just text.
    Uses structural subtyping - no inheritance required.
    """

    @property
    def source_type(self) -> str:
        """Return identifier for this source type (e.g., 'file', 'folder')."""
        ...

    def can_handle(self, source: Path) -> bool:
        """Check if this ingester can process the given source."""
        ...

    def ingest(self, source: Path) -> Iterator[TextUpload]:
        """Yield text uploads from the source, skipping binary files."""
        ...
