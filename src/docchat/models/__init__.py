"""Data models for DocChat."""

from docchat.models.document import (
    ChatMessage,
    Document,
    Sender,
    Source,
    TextUpload,
    utc_now,
)

__all__ = ["Document", "Source", "ChatMessage", "Sender", "TextUpload", "utc_now"]
