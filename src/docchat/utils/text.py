"""Plain-text detection and decoding for uploads."""

from pathlib import Path
from typing import Optional

# Accepted upload types. Content is treated as opaque text, never parsed.
TEXT_EXTENSIONS = {".txt", ".md", ".json"}

# Printable ASCII plus tab, LF, CR
_TEXT_BYTES = set(range(32, 127)) | {9, 10, 13}


def is_text_extension(path: str | Path) -> bool:
    """Check if the file extension is an accepted upload type."""
    return Path(path).suffix.lower() in TEXT_EXTENSIONS


def looks_binary(content: bytes, sample_size: int = 8192) -> bool:
    """Detect binary content by null bytes and the share of control bytes.

    Bytes >= 0x80 are not counted against the sample so UTF-8 text passes.
    """
    if not content:
        return False

    sample = content[:sample_size]
    if b"\x00" in sample:
        return True

    control = sum(1 for byte in sample if byte < 128 and byte not in _TEXT_BYTES)
    return (control / len(sample)) > 0.30


def decode_text(content: bytes) -> Optional[str]:
    """Decode uploaded bytes as UTF-8, or return None for binary content."""
    if looks_binary(content):
        return None
    return content.decode("utf-8", errors="replace")
