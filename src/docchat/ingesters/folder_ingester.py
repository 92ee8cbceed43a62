"""Ingester for local folders."""

import logging
import os
from pathlib import Path
from typing import Iterator

from docchat.models import TextUpload
from docchat.utils.text import decode_text, is_text_extension

logger = logging.getLogger(__name__)

SKIP_DIRS = {
    "__pycache__",
    "node_modules",
    "venv",
    "env",
    "dist",
    "build",
}


class FolderIngester:
    """Ingester for local filesystem folders."""

    source_type = "folder"

    def can_handle(self, source: Path) -> bool:
        """Check if this is an existing directory."""
        return source.is_dir()

    def ingest(self, source: Path) -> Iterator[TextUpload]:
        """Yield text uploads from a folder recursively, in sorted path order.

        Args:
            source: Path to the folder

        Yields:
            TextUpload objects titled by their path relative to the folder,
            without extension. Binary and blank files are skipped.
        """
        for root, dirs, files in os.walk(source):
            dirs[:] = sorted(d for d in dirs if not self._should_skip(d))
            for filename in sorted(files):
                if self._should_skip(filename) or not is_text_extension(filename):
                    continue

                full_path = Path(root) / filename
                try:
                    raw_content = full_path.read_bytes()
                except OSError:
                    continue

                content = decode_text(raw_content)
                if content is None:
                    logger.warning(f"Skipping binary file: {full_path}")
                    continue
                if not content.strip():
                    logger.warning(f"Skipping empty file: {full_path}")
                    continue

                rel_path = full_path.relative_to(source)
                yield TextUpload(
                    title=rel_path.with_suffix("").as_posix(),
                    content=content,
                    path=str(full_path),
                )

    @staticmethod
    def _should_skip(name: str) -> bool:
        """Skip hidden entries and common build artifacts."""
        return name.startswith(".") or name in SKIP_DIRS or name.endswith(".egg-info")
