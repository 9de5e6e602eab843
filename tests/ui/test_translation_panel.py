#!/usr/bin/env python3
"""
Tests for TranslationPanel and its wiring to the coordinator.
"""

import os
from unittest.mock import MagicMock

from PySide6.QtWidgets import QApplication

from authors_linguist.coordinators import TranslationCoordinator
from authors_linguist.core import ManuscriptMetrics, TranslationResult
from authors_linguist.main import build_translation_service, connect_panel, report_missing_configuration
from authors_linguist.services import GenerationTransport, TranslationService
from authors_linguist.ui import TranslationPanel


def ensure_qt_app():
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    if QApplication.instance() is None:
        QApplication([])


class ImmediateThreadPool:
    def start(self, worker):
        worker.run()


class EchoTransport(GenerationTransport):
    def stream_generate(self, prompt, system_instruction):
        yield "Hola"
        yield " mundo"

    def generate_structured(self, prompt, system_instruction, schema):
        return None


def test_panel_defaults():
    ensure_qt_app()

    panel = TranslationPanel()

    assert panel.language_combo.currentText() == "Spanish"
    assert panel.tone_combo.currentData() == "Neutral"
    assert panel.language_combo.count() == 18
    assert panel.tone_combo.count() == 5
    assert not panel.translate_button.isEnabled()
    assert panel.copy_button.isHidden()


def test_tone_selector_emits_tone_id():
    ensure_qt_app()
    panel = TranslationPanel()
    spy = MagicMock()
    panel.tone_changed.connect(spy)

    panel.tone_combo.setCurrentIndex(panel.tone_combo.findData("Academic"))

    spy.assert_called_once_with("Academic")


def test_metrics_label():
    ensure_qt_app()
    panel = TranslationPanel()

    panel.set_metrics(ManuscriptMetrics(words=450, reading_minutes=3))

    assert panel.metrics_label.text() == "450 Words  ~3 Min Read"


def test_success_shows_notes_only_when_present():
    ensure_qt_app()
    panel = TranslationPanel()

    panel.show_translation_success(TranslationResult("Hola", "English", None))
    assert panel.notes_text.isHidden()

    panel.show_translation_success(TranslationResult("Hola", "English", "A greeting."))
    assert not panel.notes_text.isHidden()
    assert panel.notes_text.toPlainText() == "A greeting."
    assert panel.detected_label.text() == "English"


def test_error_state():
    ensure_qt_app()
    panel = TranslationPanel()

    panel.show_translation_error("The manuscript could not be processed. Please try again.")

    assert "could not be processed" in panel.status_label.text()
    assert panel.copy_button.isHidden()


def test_copied_label_toggles():
    ensure_qt_app()
    panel = TranslationPanel()

    panel.set_copied(True)
    assert panel.copy_button.text() == "Copied"
    panel.set_copied(False)
    assert panel.copy_button.text() == "Copy Text"


def test_wired_panel_translates_and_clears():
    ensure_qt_app()
    panel = TranslationPanel()
    main_window = MagicMock()
    coordinator = TranslationCoordinator(
        main_window=main_window,
        translation_service=TranslationService(EchoTransport()),
        clipboard=MagicMock(),
        thread_pool=ImmediateThreadPool(),
    )
    connect_panel(panel, coordinator, main_window)

    panel.source_text.setPlainText("Hello world")
    assert coordinator.source_text == "Hello world"
    assert panel.translate_button.isEnabled()
    assert panel.metrics_label.text() == "2 Words  ~1 Min Read"

    panel.translate_button.click()
    assert panel.translation_text.toPlainText() == "Hola mundo"
    assert panel.status_label.text() == "Ready"

    panel.clear_button.click()
    assert coordinator.source_text == ""
    assert panel.source_text.toPlainText() == ""
    assert panel.translation_text.toPlainText() == ""
    assert not panel.translate_button.isEnabled()


def test_missing_api_key_disables_service_and_reports_at_startup():
    settings = MagicMock()
    settings.get_gemini_api_key.return_value = None
    main_window = MagicMock()

    service = build_translation_service(settings)
    report_missing_configuration(main_window, service)

    assert service is None
    main_window.show_error.assert_called_once()
    assert "GEMINI_API_KEY" in main_window.show_error.call_args.args[1]


def test_configured_api_key_builds_service_without_dialog():
    settings = MagicMock()
    settings.get_gemini_api_key.return_value = "test-key"
    settings.get_model_name.return_value = "gemini-test"
    main_window = MagicMock()

    service = build_translation_service(settings)
    report_missing_configuration(main_window, service)

    assert isinstance(service, TranslationService)
    assert service.transport.model_name == "gemini-test"
    main_window.show_error.assert_not_called()
