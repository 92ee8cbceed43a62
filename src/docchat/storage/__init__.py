"""Document storage for DocChat."""

from docchat.storage.store import DocumentStore

__all__ = ["DocumentStore"]
