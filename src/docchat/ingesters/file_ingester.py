"""Ingester for single text files."""

import logging
from pathlib import Path
from typing import Iterator

from docchat.models import TextUpload
from docchat.utils.text import decode_text, is_text_extension

logger = logging.getLogger(__name__)


class FileIngester:
    """Ingester for one .txt, .md or .json file."""

    source_type = "file"

    def can_handle(self, source: Path) -> bool:
        """Check if this is an existing file with an accepted extension."""
        return source.is_file() and is_text_extension(source)

    def ingest(self, source: Path) -> Iterator[TextUpload]:
        """Yield the file as a single upload titled by its name without extension.

        Args:
            source: Path to the file

        Yields:
            One TextUpload, or nothing if the content is binary or blank
        """
        content = decode_text(source.read_bytes())
        if content is None:
            logger.warning(f"Skipping binary file: {source}")
            return
        if not content.strip():
            logger.warning(f"Skipping empty file: {source}")
            return

        yield TextUpload(title=source.stem, content=content, path=str(source))
