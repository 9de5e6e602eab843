"""Unit tests for TranslationResult and StreamAccumulator."""

from authors_linguist.core import DETECTING_PLACEHOLDER, StreamAccumulator, TranslationResult


def test_notes_default_to_none():
    result = TranslationResult(translated_text="Hola", detected_language="English")
    assert result.translator_notes is None


class TestStreamAccumulator:
    """Tests for append-only accumulation of streamed fragments."""

    def test_concatenates_in_arrival_order(self):
        accumulator = StreamAccumulator()
        for fragment in ["La ", "noche ", "era ", "oscura."]:
            accumulator.append(fragment)
        assert accumulator.text == "La noche era oscura."
        assert accumulator.fragment_count == 4

    def test_each_snapshot_extends_the_previous(self):
        accumulator = StreamAccumulator()
        snapshots = [accumulator.append(f).translated_text for f in ["a", "bc", "def"]]
        assert snapshots == ["a", "abc", "abcdef"]

    def test_empty_fragment_is_ignored(self):
        accumulator = StreamAccumulator()
        accumulator.append("x")
        result = accumulator.append("")
        assert result.translated_text == "x"
        assert accumulator.fragment_count == 1

    def test_detected_language_placeholder_without_previous(self):
        result = StreamAccumulator().append("Hola")
        assert result.detected_language == DETECTING_PLACEHOLDER
        assert result.translator_notes is None

    def test_previous_language_and_notes_are_preserved(self):
        previous = TranslationResult("old", "English", "Kept the pun")
        result = StreamAccumulator(previous).append("nuevo")
        assert result.translated_text == "nuevo"
        assert result.detected_language == "English"
        assert result.translator_notes == "Kept the pun"

    def test_result_before_any_fragment_is_empty(self):
        assert StreamAccumulator().result().translated_text == ""
