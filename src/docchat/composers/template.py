"""Template-based answer composer standing in for a language model."""

import logging
import random
import time
from typing import Optional, Sequence

from docchat.models import Source

logger = logging.getLogger(__name__)

NO_CONTEXT_ANSWER = (
    "I don't have enough information in the uploaded documents to answer your "
    "question. Please try uploading relevant documents or asking about topics "
    "covered in your knowledge base."
)


def _plural(count: int, word: str) -> str:
    return f"{count} {word}{'s' if count != 1 else ''}"


def _percent(relevance: float) -> int:
    return round(relevance * 100)


def _based_on(context: str, sources: Sequence[Source]) -> str:
    return (
        "Based on the documents you've uploaded, I can provide the following "
        f"information: {context[:200]}...\n\n"
        f"This information comes from {_plural(len(sources), 'relevant source')} in "
        f'your knowledge base. The most relevant match was from "{sources[0].title}" '
        f"with {_percent(sources[0].relevance)}% relevance."
    )


def _according_to(context: str, sources: Sequence[Source]) -> str:
    return (
        f"According to your uploaded documents, here's what I found: {context[:150]}...\n\n"
        f"The answer is derived from {_plural(len(sources), 'document chunk')}, with "
        f"the highest relevance score being {_percent(sources[0].relevance)}%."
    )


def _found_in(context: str, sources: Sequence[Source]) -> str:
    return (
        f"I found relevant information in your knowledge base: {context[:180]}...\n\n"
        f"This response is based on {_plural(len(sources), 'matching section')} from "
        f'your documents, particularly from "{sources[0].title}".'
    )


TEMPLATES = (_based_on, _according_to, _found_in)


class TemplateComposer:
    """Answers by quoting the retrieved context into a canned sentence.

    Args:
        rng: Random source used to pick a template. Seed it for repeatable output.
        delay_range: (min, max) seconds of simulated generation latency.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        delay_range: tuple[float, float] = (0.0, 0.0),
    ):
        self.rng = rng or random.Random()
        self.delay_range = delay_range

    def compose(self, query: str, sources: Sequence[Source]) -> str:
        low, high = self.delay_range
        if high > 0:
            time.sleep(self.rng.uniform(low, high))

        if not sources:
            return NO_CONTEXT_ANSWER

        context = "\n\n".join(s.content for s in sources)
        template = self.rng.choice(TEMPLATES)
        logger.debug(f"Composing answer for {query!r} from {len(sources)} sources")
        return template(context, sources)
