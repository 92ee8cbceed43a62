"""Exceptions raised by DocChat."""


class DocChatError(Exception):
    """Base class for DocChat errors."""


class GenerationError(DocChatError):
    """The response composer failed to produce an answer.

    Distinct from finding no relevant sources, which is a normal empty result.
    """


class UnsupportedSourceError(DocChatError):
    """An intake path is neither a supported text file nor a folder."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Cannot process: {path}")
