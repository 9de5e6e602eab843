"""Generation transports - abstract interface and Gemini implementation."""

from authors_linguist.services.transport.generation_transport import GenerationTransport, TRANSLATION_SCHEMA
from authors_linguist.services.transport.gemini_transport import DEFAULT_MODEL, GeminiTransport

__all__ = [
    "GenerationTransport",
    "TRANSLATION_SCHEMA",
    "GeminiTransport",
    "DEFAULT_MODEL",
]
