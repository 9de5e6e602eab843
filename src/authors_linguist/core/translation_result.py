"""Translation result entity and the stream accumulator that builds it."""

from dataclasses import dataclass
from typing import List, Optional


DETECTING_PLACEHOLDER = "Detecting..."


@dataclass(frozen=True)
class TranslationResult:
    """A completed (or partially streamed) translation.

    Attributes:
        translated_text: The translation itself.
        detected_language: Name of the detected source language.
        translator_notes: Optional notes on word choice or cultural nuance.
    """

    translated_text: str
    detected_language: str
    translator_notes: Optional[str] = None


class StreamAccumulator:
    """
    Folds an ordered sequence of text fragments into a TranslationResult.

    Updates are append-only: text only ever grows, in arrival order.
    Detected language and notes are carried over from a previously known
    result, since the streaming path never populates them.
    """

    def __init__(self, previous: Optional[TranslationResult] = None):
        self._fragments: List[str] = []
        self._detected_language = (
            previous.detected_language if previous and previous.detected_language else DETECTING_PLACEHOLDER
        )
        self._translator_notes = previous.translator_notes if previous else None

    @property
    def text(self) -> str:
        return "".join(self._fragments)

    @property
    def fragment_count(self) -> int:
        return len(self._fragments)

    def append(self, fragment: str) -> TranslationResult:
        """Append one fragment and return the current result snapshot."""
        if fragment:
            self._fragments.append(fragment)
        return self.result()

    def result(self) -> TranslationResult:
        return TranslationResult(
            translated_text=self.text,
            detected_language=self._detected_language,
            translator_notes=self._translator_notes,
        )
