"""Utility functions for DocChat."""

from docchat.utils.text import TEXT_EXTENSIONS, decode_text, is_text_extension, looks_binary

__all__ = ["TEXT_EXTENSIONS", "decode_text", "is_text_extension", "looks_binary"]
