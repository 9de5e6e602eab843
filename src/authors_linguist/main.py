"""Main entry point for the Author's Linguist application."""

import logging
import sys
from typing import Optional

from PySide6.QtWidgets import QApplication

from authors_linguist.coordinators import TranslationCoordinator
from authors_linguist.coordinators.translation_coordinator import MISSING_KEY_MESSAGE
from authors_linguist.services import GeminiTransport, SettingsManager, TranslationService
from authors_linguist.ui import MainWindow, TranslationPanel


logger = logging.getLogger(__name__)


def connect_panel(panel: TranslationPanel, coordinator: TranslationCoordinator, main_window: MainWindow) -> None:
    """Wire panel signals to coordinator slots and coordinator signals back to the panel."""

    def on_source_text_changed(text: str) -> None:
        coordinator.set_source_text(text)
        panel.set_metrics(coordinator.metrics())
        panel.set_translate_enabled(coordinator.can_translate())

    panel.source_text_changed.connect(on_source_text_changed)
    panel.target_language_changed.connect(coordinator.set_target_language)
    panel.tone_changed.connect(coordinator.set_tone)
    panel.context_changed.connect(coordinator.set_context)
    panel.translate_clicked.connect(coordinator.request_translation)
    panel.clear_clicked.connect(coordinator.clear)
    panel.copy_clicked.connect(coordinator.copy_translation)
    main_window.clear_requested.connect(coordinator.clear)

    coordinator.translation_started.connect(panel.show_translation_loading)
    coordinator.translation_updated.connect(panel.show_translation_progress)
    coordinator.translation_completed.connect(panel.show_translation_success)
    coordinator.translation_failed.connect(panel.show_translation_error)
    coordinator.loading_changed.connect(lambda _loading: panel.set_translate_enabled(coordinator.can_translate()))
    coordinator.copied_changed.connect(panel.set_copied)
    coordinator.cleared.connect(panel.clear)


def build_translation_service(settings: SettingsManager) -> Optional[TranslationService]:
    """Create the Gemini-backed client, or None when no API key is configured."""
    api_key = settings.get_gemini_api_key()
    if not api_key:
        logger.warning("GEMINI_API_KEY is not set; translation is disabled")
        return None
    transport = GeminiTransport(api_key=api_key, model_name=settings.get_model_name())
    return TranslationService(transport)


def report_missing_configuration(main_window: MainWindow, translation_service: Optional[TranslationService]) -> None:
    """Tell the author at startup that translation needs an API key."""
    if translation_service is None:
        main_window.show_error("Configuration", MISSING_KEY_MESSAGE)


def main():
    """
    Bootstrap the application following the Composition Root pattern.
    This is the only place that knows how to instantiate and wire all components.
    """
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # 1. Initialize Application
    app = QApplication(sys.argv)
    app.setApplicationName("Author's Linguist")
    app.setOrganizationName("AuthorsLinguist")

    # 2. Initialize Infrastructure
    settings = SettingsManager()
    translation_service = build_translation_service(settings)

    # 3. Construct UI
    panel = TranslationPanel()
    main_window = MainWindow()
    main_window.set_panel(panel)

    # 4. Instantiate Coordinator (Dependency Injection)
    coordinator = TranslationCoordinator(
        main_window=main_window,
        translation_service=translation_service,
        clipboard=app.clipboard(),
    )

    # 5. Signal Wiring
    connect_panel(panel, coordinator, main_window)

    # 6. Show UI and start event loop
    main_window.show()
    report_missing_configuration(main_window, translation_service)

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
