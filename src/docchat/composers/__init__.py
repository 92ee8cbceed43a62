"""Answer composers consuming ranked sources."""

from docchat.composers.template import NO_CONTEXT_ANSWER, TEMPLATES, TemplateComposer

__all__ = ["TemplateComposer", "NO_CONTEXT_ANSWER", "TEMPLATES"]
