"""Translation services - client, prompts, and errors."""

from authors_linguist.services.translation.errors import TranslationFailure
from authors_linguist.services.translation.translation_service import (
    TranslationService,
    coerce_options,
    parse_translation_payload,
)

__all__ = [
    "TranslationService",
    "TranslationFailure",
    "coerce_options",
    "parse_translation_payload",
]
