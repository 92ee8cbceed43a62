import threading

import pytest

from docchat.assistant import ERROR_ANSWER, Assistant
from docchat.composers import NO_CONTEXT_ANSWER
from docchat.config import Settings
from docchat.errors import GenerationError
from docchat.models import Sender
from docchat.retrieval import DEFAULT_THRESHOLD, DEFAULT_TOP_K

CAT_AND_DOG = "The cat sat on the mat. The dog ran fast."


class FailingComposer:
    def compose(self, query, sources):
        raise GenerationError("model timed out")


class EchoComposer:
    def compose(self, query, sources):
        return f"{query} -> {len(sources)}"


def test_empty_store_reports_insufficient_context(store):
    assistant = Assistant(store)

    answer = assistant.ask("Where did the cat sit?")

    assert answer.text == NO_CONTEXT_ANSWER
    assert answer.sources == ()
    assert answer.insufficient_context
    assert not answer.failed


def test_answer_carries_sources_and_history(sentence_store):
    sentence_store.add_document("pets.txt", CAT_AND_DOG)
    assistant = Assistant(sentence_store, composer=EchoComposer())

    answer = assistant.ask("Where did the cat sit?")

    assert answer.text == "Where did the cat sit? -> 2"
    assert answer.sources[0].content == "The cat sat on the mat"
    assert not answer.insufficient_context

    user, reply = assistant.history
    assert user.sender is Sender.USER
    assert user.content == "Where did the cat sit?"
    assert reply.sender is Sender.ASSISTANT
    assert reply.sources == answer.sources


def test_generation_failure_is_reported_not_raised(sentence_store):
    doc = sentence_store.add_document("pets.txt", CAT_AND_DOG)
    assistant = Assistant(sentence_store, composer=FailingComposer())

    answer = assistant.ask("Where did the cat sit?")

    assert answer.failed
    assert answer.error == "model timed out"
    assert answer.text == ERROR_ANSWER
    assert not answer.insufficient_context
    assert sentence_store.list_documents() == [doc]
    assert assistant.history[-1].content == ERROR_ANSWER


def test_unexpected_errors_propagate(store):
    class BrokenComposer:
        def compose(self, query, sources):
            raise RuntimeError("bug")

    with pytest.raises(RuntimeError):
        Assistant(store, composer=BrokenComposer()).ask("anything")


def test_overrides_top_k_and_threshold(sentence_store):
    sentence_store.add_document("pets.txt", CAT_AND_DOG)
    assistant = Assistant(sentence_store, composer=EchoComposer())

    assert len(assistant.ask("Where did the cat sit?", top_k=1).sources) == 1
    assert len(assistant.ask("Where did the cat sit?", threshold=0.2).sources) == 1
    assert assistant.ask("Where did the cat sit?", threshold=0.9).sources == ()


def test_ingestion_waits_for_in_flight_answer(store):
    adder_alive_during_compose = []

    class WatchingComposer:
        def compose(self, query, sources):
            adder = threading.Thread(target=store.add_document, args=("late", "Late doc."))
            adder.start()
            adder.join(timeout=0.2)
            adder_alive_during_compose.append(adder.is_alive())
            self.adder = adder
            return "done"

    composer = WatchingComposer()
    Assistant(store, composer=composer).ask("anything")
    composer.adder.join(timeout=5)

    assert adder_alive_during_compose == [True]
    assert [d.title for d in store.list_documents()] == ["late"]


def test_clear_history(store):
    assistant = Assistant(store)
    assistant.ask("hello there")

    assistant.clear_history()

    assert assistant.history == []


def test_clear_history_waits_for_store_lock(store):
    assistant = Assistant(store)
    assistant.ask("hello there")

    with store.lock:
        clearer = threading.Thread(target=assistant.clear_history)
        clearer.start()
        clearer.join(timeout=0.2)
        assert clearer.is_alive()
        assert len(assistant.history) == 2

    clearer.join(timeout=5)
    assert assistant.history == []


def test_defaults_match_retriever_defaults(store):
    assistant = Assistant(store)

    assert assistant.top_k == DEFAULT_TOP_K == 3
    assert assistant.threshold == DEFAULT_THRESHOLD == 0.1


def test_from_settings():
    settings = Settings(chunk_size=25, chunk_overlap=0, top_k=1, relevance_threshold=0.05)
    assistant = Assistant.from_settings(settings)
    assistant.store.add_document("pets.txt", CAT_AND_DOG)

    answer = assistant.ask("Where did the cat sit?")

    assert assistant.store.chunker.chunk_size == 25
    assert assistant.threshold == 0.05
    assert [s.content for s in answer.sources] == ["The cat sat on the mat"]
