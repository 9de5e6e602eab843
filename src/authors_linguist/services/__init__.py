"""Services layer - translation client and external integrations."""

from authors_linguist.services.settings_manager import SettingsManager

# Generation transports
from authors_linguist.services.transport import DEFAULT_MODEL, GeminiTransport, GenerationTransport, TRANSLATION_SCHEMA

# Translation services
from authors_linguist.services.translation import TranslationFailure, TranslationService

# Background workers
from authors_linguist.services.api_workers import StreamingTranslationWorker, StructuredTranslationWorker, WorkerSignals

__all__ = [
	"SettingsManager",
	"DEFAULT_MODEL",
	"GeminiTransport",
	"GenerationTransport",
	"TRANSLATION_SCHEMA",
	"TranslationFailure",
	"TranslationService",
	"StreamingTranslationWorker",
	"StructuredTranslationWorker",
	"WorkerSignals",
]
