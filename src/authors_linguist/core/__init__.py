"""Domain layer - Pure entities for translation requests and results."""

from .manuscript_metrics import ManuscriptMetrics, measure
from .translation_options import (
    DEFAULT_TARGET_LANGUAGE,
    DEFAULT_TONE,
    SUPPORTED_LANGUAGES,
    TONE_IDS,
    TONES,
    ToneOption,
    TranslationOptions,
    TranslationRequest,
)
from .translation_result import DETECTING_PLACEHOLDER, StreamAccumulator, TranslationResult

__all__ = [
    "DEFAULT_TARGET_LANGUAGE",
    "DEFAULT_TONE",
    "DETECTING_PLACEHOLDER",
    "ManuscriptMetrics",
    "SUPPORTED_LANGUAGES",
    "StreamAccumulator",
    "TONE_IDS",
    "TONES",
    "ToneOption",
    "TranslationOptions",
    "TranslationRequest",
    "TranslationResult",
    "measure",
]
