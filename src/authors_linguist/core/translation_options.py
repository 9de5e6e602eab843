"""Translation options - target languages, tones, and per-request settings."""

from dataclasses import dataclass
from typing import Optional, Tuple


SUPPORTED_LANGUAGES: Tuple[str, ...] = (
    "English",
    "Spanish",
    "French",
    "German",
    "Italian",
    "Portuguese",
    "Chinese",
    "Japanese",
    "Korean",
    "Russian",
    "Arabic",
    "Hindi",
    "Dutch",
    "Turkish",
    "Vietnamese",
    "Thai",
    "Greek",
    "Swedish",
)

DEFAULT_TARGET_LANGUAGE = "Spanish"


@dataclass(frozen=True)
class ToneOption:
    """A selectable translation tone shown in the panel."""

    id: str
    label: str
    description: str

    @property
    def display_text(self) -> str:
        """Label and description as shown in the tone selector."""
        return f"{self.label} — {self.description}"


TONES: Tuple[ToneOption, ...] = (
    ToneOption("Neutral", "Neutral", "Balanced and clear"),
    ToneOption("Creative", "Creative", "Poetic and descriptive"),
    ToneOption("Formal", "Formal", "Professional and serious"),
    ToneOption("Academic", "Academic", "Technical and precise"),
    ToneOption("Casual", "Casual", "Friendly and conversational"),
)

TONE_IDS: Tuple[str, ...] = tuple(tone.id for tone in TONES)

DEFAULT_TONE = "Neutral"


def _validate(target_language: str, tone: str) -> None:
    if target_language not in SUPPORTED_LANGUAGES:
        raise ValueError(f"Unsupported target language: {target_language!r}")
    if tone not in TONE_IDS:
        raise ValueError(f"Unsupported tone: {tone!r}")


@dataclass(frozen=True)
class TranslationOptions:
    """
    Settings recognized by the translation client.

    Attributes:
        target_language: One of SUPPORTED_LANGUAGES.
        tone: One of TONE_IDS. None means "not specified" and falls back to Neutral.
        context: Free-form notes for the translator. None is treated as empty.
    """

    target_language: str
    tone: Optional[str] = DEFAULT_TONE
    context: Optional[str] = ""

    def __post_init__(self):
        # Frozen dataclass: normalize through object.__setattr__
        if self.tone is None:
            object.__setattr__(self, "tone", DEFAULT_TONE)
        if self.context is None:
            object.__setattr__(self, "context", "")
        _validate(self.target_language, self.tone)


@dataclass(frozen=True)
class TranslationRequest:
    """Snapshot of the panel state at submit time."""

    source_text: str
    target_language: str = DEFAULT_TARGET_LANGUAGE
    tone: str = DEFAULT_TONE
    context: str = ""

    def is_empty(self) -> bool:
        """True when there is nothing but whitespace to translate."""
        return not self.source_text.strip()

    def options(self) -> TranslationOptions:
        return TranslationOptions(
            target_language=self.target_language,
            tone=self.tone,
            context=self.context,
        )
