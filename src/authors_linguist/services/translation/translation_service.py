"""Translation Service - streams or fetches literary translations through a transport."""

import json
import logging
from typing import Any, Iterator, Mapping, Union

from authors_linguist.core import DEFAULT_TARGET_LANGUAGE, TranslationOptions, TranslationResult
from authors_linguist.services.transport import TRANSLATION_SCHEMA, GenerationTransport
from authors_linguist.services.translation.errors import TranslationFailure
from authors_linguist.services.translation.prompts import (
    STREAM_SYSTEM_INSTRUCTION,
    STRUCTURED_SYSTEM_INSTRUCTION,
    build_stream_prompt,
    build_structured_prompt,
)


logger = logging.getLogger(__name__)

OptionsLike = Union[TranslationOptions, Mapping[str, Any]]


def coerce_options(options: OptionsLike) -> TranslationOptions:
    """Accept TranslationOptions or a plain mapping with the same keys; omitted keys take defaults."""
    if isinstance(options, TranslationOptions):
        return options
    return TranslationOptions(
        target_language=options.get("target_language", DEFAULT_TARGET_LANGUAGE),
        tone=options.get("tone"),
        context=options.get("context"),
    )


def parse_translation_payload(payload: str) -> TranslationResult:
    """
    Parse a structured reply into a TranslationResult.

    An empty or missing payload is read as "{}" and then fails validation,
    so callers never receive a default object.

    Raises:
        TranslationFailure: If the payload is not a JSON object with string
            translatedText and detectedLanguage fields.
    """
    try:
        data = json.loads(payload or "{}")
    except json.JSONDecodeError as exc:
        logger.error("Failed to parse translation response: %s", exc)
        raise TranslationFailure("Translation failed") from exc

    if not isinstance(data, dict):
        raise TranslationFailure("Translation failed: expected a JSON object")

    for field in TRANSLATION_SCHEMA["required"]:
        if not isinstance(data.get(field), str):
            raise TranslationFailure(f"Translation failed: missing or invalid {field!r}")

    notes = data.get("translatorNotes")
    if notes is not None and not isinstance(notes, str):
        raise TranslationFailure("Translation failed: invalid 'translatorNotes'")

    return TranslationResult(
        translated_text=data["translatedText"],
        detected_language=data["detectedLanguage"],
        translator_notes=notes,
    )


class TranslationService:
    """
    Thin translation client over a GenerationTransport.

    Never retries and never masks transport errors; they reach the caller unchanged.
    """

    def __init__(self, transport: GenerationTransport):
        self.transport = transport

    def translate_stream(self, source_text: str, options: OptionsLike) -> Iterator[str]:
        """
        Stream a translation as ordered, non-empty text fragments.

        The caller is responsible for rejecting empty source text. The returned
        iterator is lazy and single-use; the transport is only called once
        iteration starts.

        Args:
            source_text: Prose to translate.
            options: Target language, tone and context.

        Yields:
            Non-empty fragments whose concatenation is the full translation.
        """
        options = coerce_options(options)
        prompt = build_stream_prompt(source_text, options)
        logger.debug(
            "Streaming translation to %s (tone=%s, %d chars)",
            options.target_language, options.tone, len(source_text),
        )
        pieces = self.transport.stream_generate(prompt, STREAM_SYSTEM_INSTRUCTION)
        try:
            for fragment in pieces:
                if fragment:
                    yield fragment
        finally:
            # Closing early (consumer stopped) must release the underlying stream
            close = getattr(pieces, "close", None)
            if close is not None:
                close()

    def translate(self, source_text: str, options: OptionsLike) -> TranslationResult:
        """
        Translate in one structured call.

        Args:
            source_text: Prose to translate.
            options: Target language, tone and context.

        Returns:
            TranslationResult with detected language and optional notes.

        Raises:
            TranslationFailure: If the reply does not match the expected shape.
        """
        options = coerce_options(options)
        prompt = build_structured_prompt(source_text, options)
        logger.debug(
            "Structured translation to %s (tone=%s, %d chars)",
            options.target_language, options.tone, len(source_text),
        )
        payload = self.transport.generate_structured(prompt, STRUCTURED_SYSTEM_INSTRUCTION, TRANSLATION_SCHEMA)
        return parse_translation_payload(payload)
