"""
Author's Linguist - A literary translation studio for authors.

This package provides a desktop application for translating manuscripts with:
- Streamed translations from Google Gemini
- Target language, tone and contextual notes per request
- One-shot structured translations with detected language and translator's notes
"""

__version__ = "0.1.0"

# Make key components available at package level
from authors_linguist.core import TranslationOptions, TranslationRequest, TranslationResult
from authors_linguist.services import TranslationFailure, TranslationService

__all__ = [
    "TranslationOptions",
    "TranslationRequest",
    "TranslationResult",
    "TranslationFailure",
    "TranslationService",
]
