import os

import pytest

from docchat.chunkers import SentenceChunker
from docchat.config import get_settings
from docchat.retrieval import Retriever
from docchat.storage import DocumentStore


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    for name in list(os.environ):
        if name.startswith("DOCCHAT_"):
            monkeypatch.delenv(name)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def store():
    return DocumentStore()


@pytest.fixture
def sentence_store():
    """Store whose chunks hold one short sentence each."""
    return DocumentStore(SentenceChunker(chunk_size=25, overlap=0))


@pytest.fixture
def retriever(sentence_store):
    return Retriever(sentence_store)
