"""Generation Transport - minimal interface over a hosted text-generation API."""

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterator, Optional


TRANSLATION_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "translatedText": {
            "type": "string",
            "description": "The translated version of the input text, optimized for the requested tone.",
        },
        "detectedLanguage": {
            "type": "string",
            "description": "The name of the detected source language.",
        },
        "translatorNotes": {
            "type": "string",
            "description": "Brief notes about specific word choices or cultural nuances for the author.",
        },
    },
    "required": ["translatedText", "detectedLanguage"],
}


class GenerationTransport(ABC):
    """
    Abstract capability consumed by the translation client.

    Implementations (e.g., GeminiTransport) own the vendor SDK client.
    Tests substitute a deterministic fake.
    """

    @abstractmethod
    def stream_generate(self, prompt: str, system_instruction: str) -> Iterator[str]:
        """
        Submit a streaming generation request.

        Args:
            prompt: User instruction string.
            system_instruction: System-level instruction for the model.

        Returns:
            Lazy iterator of raw text pieces in arrival order. Pieces may be empty.
        """
        pass

    @abstractmethod
    def generate_structured(
        self, prompt: str, system_instruction: str, schema: Dict[str, Any]
    ) -> Optional[str]:
        """
        Submit a single generation request constrained to a JSON schema.

        Args:
            prompt: User instruction string.
            system_instruction: System-level instruction for the model.
            schema: JSON-schema style description of the expected object.

        Returns:
            Raw payload text as returned by the API (may be None or empty).
        """
        pass
