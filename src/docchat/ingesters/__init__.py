"""Plain-text intake handlers (ingesters) for DocChat."""

from pathlib import Path
from typing import Iterator

from docchat.errors import UnsupportedSourceError
from docchat.ingesters.file_ingester import FileIngester
from docchat.ingesters.folder_ingester import FolderIngester
from docchat.models import TextUpload
from docchat.protocols import Ingester

# Registry of available ingesters
_INGESTERS: list[Ingester] = [
    FileIngester(),
    FolderIngester(),
]


def get_ingester(source: Path | str) -> Ingester:
    """Find an ingester that can handle the given source.

    Args:
        source: Path to a text file or folder

    Returns:
        An Ingester instance that can handle the source

    Raises:
        UnsupportedSourceError: if no ingester accepts the source
    """
    source_path = Path(source)
    for ingester in _INGESTERS:
        if ingester.can_handle(source_path):
            return ingester
    raise UnsupportedSourceError(str(source))


def ingest_paths(sources: list[str]) -> Iterator[TextUpload]:
    """Yield uploads from every source in order."""
    for source in sources:
        source_path = Path(source)
        yield from get_ingester(source_path).ingest(source_path)


def register_ingester(ingester: Ingester) -> None:
    """Register a custom ingester (for plugins/extensions).

    Args:
        ingester: An object implementing the Ingester protocol
    """
    _INGESTERS.append(ingester)


__all__ = [
    "get_ingester",
    "ingest_paths",
    "register_ingester",
    "FileIngester",
    "FolderIngester",
]
