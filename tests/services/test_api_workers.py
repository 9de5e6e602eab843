"""Unit tests for the background translation workers (run synchronously)."""

import json
from unittest.mock import MagicMock

from authors_linguist.core import TranslationRequest, TranslationResult
from authors_linguist.services import (
    GenerationTransport,
    StreamingTranslationWorker,
    StructuredTranslationWorker,
    TranslationFailure,
    TranslationService,
)


class ScriptedTransport(GenerationTransport):
    """Streams fragments, optionally running a callback before a given fragment."""

    def __init__(self, fragments, before=None, error=None, payload=None):
        self.fragments = fragments
        self.before = before or {}
        self.error = error
        self.payload = payload
        self.closed = False

    def stream_generate(self, prompt, system_instruction):
        try:
            for index, fragment in enumerate(self.fragments):
                if index in self.before:
                    self.before[index]()
                yield fragment
            if self.error is not None:
                raise self.error
        finally:
            self.closed = True

    def generate_structured(self, prompt, system_instruction, schema):
        if self.error is not None:
            raise self.error
        return self.payload


def connect_spies(worker):
    spies = {
        "fragment": MagicMock(),
        "error": MagicMock(),
        "result": MagicMock(),
        "finished": MagicMock(),
    }
    worker.signals.fragment_received.connect(spies["fragment"])
    worker.signals.error.connect(spies["error"])
    worker.signals.translation_result.connect(spies["result"])
    worker.signals.finished.connect(spies["finished"])
    return spies


REQUEST = TranslationRequest(source_text="Hello there", target_language="French")


class TestStreamingTranslationWorker:
    def test_emits_non_empty_fragments_in_order(self):
        service = TranslationService(ScriptedTransport(["Bon", "", "jour"]))
        worker = StreamingTranslationWorker(service, REQUEST)
        spies = connect_spies(worker)

        worker.run()

        assert [c.args[0] for c in spies["fragment"].call_args_list] == ["Bon", "jour"]
        spies["error"].assert_not_called()
        spies["finished"].assert_called_once()

    def test_error_is_emitted_then_finished(self):
        error = ConnectionError("reset")
        service = TranslationService(ScriptedTransport(["Bon"], error=error))
        worker = StreamingTranslationWorker(service, REQUEST)
        spies = connect_spies(worker)

        worker.run()

        spies["error"].assert_called_once_with(error)
        spies["finished"].assert_called_once()

    def test_cancel_stops_consumption_without_error(self):
        transport = ScriptedTransport(["a", "b", "c"], error=RuntimeError("late failure"))
        worker = StreamingTranslationWorker(TranslationService(transport), REQUEST)
        transport.before = {1: worker.cancel}
        spies = connect_spies(worker)

        worker.run()

        assert [c.args[0] for c in spies["fragment"].call_args_list] == ["a"]
        spies["error"].assert_not_called()
        spies["finished"].assert_called_once()
        assert transport.closed

    def test_cancel_before_run_emits_nothing(self):
        worker = StreamingTranslationWorker(TranslationService(ScriptedTransport(["a"])), REQUEST)
        spies = connect_spies(worker)

        worker.cancel()
        worker.run()

        spies["fragment"].assert_not_called()
        spies["finished"].assert_called_once()


class TestStructuredTranslationWorker:
    def test_emits_result(self):
        payload = json.dumps({"translatedText": "Bonjour", "detectedLanguage": "English"})
        worker = StructuredTranslationWorker(TranslationService(ScriptedTransport([], payload=payload)), REQUEST)
        spies = connect_spies(worker)

        worker.run()

        spies["result"].assert_called_once_with(TranslationResult("Bonjour", "English", None))
        spies["finished"].assert_called_once()

    def test_emits_parse_failure(self):
        worker = StructuredTranslationWorker(TranslationService(ScriptedTransport([], payload="")), REQUEST)
        spies = connect_spies(worker)

        worker.run()

        spies["result"].assert_not_called()
        assert isinstance(spies["error"].call_args.args[0], TranslationFailure)
