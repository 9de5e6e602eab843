"""Translation Panel - Editor for the source manuscript and the translated result."""

from typing import Optional

from PySide6.QtCore import Signal
from PySide6.QtWidgets import (
    QComboBox,
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QSizePolicy,
    QTextEdit,
    QVBoxLayout,
    QWidget,
)

from authors_linguist.core import (
    DEFAULT_TARGET_LANGUAGE,
    DEFAULT_TONE,
    SUPPORTED_LANGUAGES,
    TONES,
    ManuscriptMetrics,
    TranslationResult,
)


class TranslationPanel(QWidget):
    """Two-column studio: manuscript and options on the left, translation on the right."""

    source_text_changed = Signal(str)
    target_language_changed = Signal(str)
    tone_changed = Signal(str)
    context_changed = Signal(str)
    translate_clicked = Signal()
    clear_clicked = Signal()
    copy_clicked = Signal()

    def __init__(self):
        super().__init__()

        main_layout = QHBoxLayout(self)
        main_layout.setContentsMargins(12, 12, 12, 12)
        main_layout.setSpacing(16)

        main_layout.addLayout(self._build_source_column(), 7)
        main_layout.addLayout(self._build_result_column(), 5)

    def _build_source_column(self) -> QVBoxLayout:
        layout = QVBoxLayout()
        layout.setSpacing(8)

        header = QHBoxLayout()
        title = QLabel("Source Manuscript")
        title.setStyleSheet("font-style: italic;")
        header.addWidget(title)
        header.addStretch()
        self.metrics_label = QLabel("0 Words  ~0 Min Read")
        self.metrics_label.setStyleSheet("color: gray;")
        header.addWidget(self.metrics_label)
        self.clear_button = QPushButton("Clear")
        self.clear_button.setToolTip("Clear manuscript")
        self.clear_button.clicked.connect(self.clear_clicked.emit)
        header.addWidget(self.clear_button)
        layout.addLayout(header)

        self.source_text = QTextEdit()
        self.source_text.setPlaceholderText("Paste your chapter, poem, or prose here...")
        self.source_text.setMinimumHeight(240)
        self.source_text.textChanged.connect(
            lambda: self.source_text_changed.emit(self.source_text.toPlainText())
        )
        layout.addWidget(self.source_text, 1)

        form = QFormLayout()
        self.language_combo = QComboBox()
        self.language_combo.addItems(list(SUPPORTED_LANGUAGES))
        self.language_combo.setCurrentText(DEFAULT_TARGET_LANGUAGE)
        self.language_combo.currentTextChanged.connect(self.target_language_changed.emit)
        form.addRow("Target Language", self.language_combo)

        self.tone_combo = QComboBox()
        for tone in TONES:
            self.tone_combo.addItem(tone.display_text, tone.id)
        self.tone_combo.setCurrentIndex(self.tone_combo.findData(DEFAULT_TONE))
        self.tone_combo.currentIndexChanged.connect(
            lambda index: self.tone_changed.emit(self.tone_combo.itemData(index))
        )
        form.addRow("Tone", self.tone_combo)

        self.context_edit = QLineEdit()
        self.context_edit.setPlaceholderText(
            "e.g., 'Protagonist is a 19th-century detective', 'Maintain the rhyme scheme'"
        )
        self.context_edit.textChanged.connect(self.context_changed.emit)
        form.addRow("Contextual Notes", self.context_edit)
        layout.addLayout(form)

        self.translate_button = QPushButton("Translate")
        self.translate_button.setEnabled(False)
        self.translate_button.clicked.connect(self.translate_clicked.emit)
        layout.addWidget(self.translate_button)
        return layout

    def _build_result_column(self) -> QVBoxLayout:
        layout = QVBoxLayout()
        layout.setSpacing(8)

        header = QHBoxLayout()
        title = QLabel("Translation")
        title.setStyleSheet("font-weight: bold;")
        header.addWidget(title)
        header.addStretch()
        self.detected_label = QLabel("")
        self.detected_label.setStyleSheet("color: gray;")
        header.addWidget(self.detected_label)
        self.copy_button = QPushButton("Copy Text")
        self.copy_button.setVisible(False)
        self.copy_button.clicked.connect(self.copy_clicked.emit)
        header.addWidget(self.copy_button)
        layout.addLayout(header)

        self.translation_text = QTextEdit()
        self.translation_text.setReadOnly(True)
        self.translation_text.setPlaceholderText(
            "Your translated manuscript will appear here with literary precision."
        )
        self.translation_text.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        layout.addWidget(self.translation_text, 2)

        self.notes_label = QLabel("Translator's Notes")
        self.notes_label.setStyleSheet("font-weight: bold;")
        self.notes_label.setVisible(False)
        layout.addWidget(self.notes_label)

        self.notes_text = QTextEdit()
        self.notes_text.setReadOnly(True)
        self.notes_text.setVisible(False)
        layout.addWidget(self.notes_text, 1)

        self.status_label = QLabel("")
        self.status_label.setStyleSheet("color: gray;")
        self.status_label.setWordWrap(True)
        layout.addWidget(self.status_label)
        return layout

    def set_metrics(self, metrics: ManuscriptMetrics) -> None:
        self.metrics_label.setText(f"{metrics.words} Words  ~{metrics.reading_minutes} Min Read")

    def set_translate_enabled(self, enabled: bool) -> None:
        self.translate_button.setEnabled(enabled)

    def show_translation_loading(self) -> None:
        """Show loading state for translation."""
        self.translation_text.clear()
        self.translation_text.setPlaceholderText("Translating...")
        self.notes_text.clear()
        self.notes_label.setVisible(False)
        self.notes_text.setVisible(False)
        self.detected_label.clear()
        self.copy_button.setVisible(False)
        self.translate_button.setEnabled(False)
        self.status_label.setText("Loading...")
        self.status_label.setStyleSheet("color: gray;")

    def show_translation_progress(self, result: TranslationResult) -> None:
        """Render the running translation while fragments arrive."""
        self.translation_text.setPlainText(result.translated_text)
        self.detected_label.setText(result.detected_language)
        self.copy_button.setVisible(True)

    def show_translation_success(self, result: Optional[TranslationResult]) -> None:
        """Show success state with translated text and any notes."""
        if result is not None:
            self.translation_text.setPlainText(result.translated_text)
            self.detected_label.setText(result.detected_language)
            self.copy_button.setVisible(bool(result.translated_text))
            has_notes = bool(result.translator_notes)
            self.notes_text.setPlainText(result.translator_notes or "")
            self.notes_label.setVisible(has_notes)
            self.notes_text.setVisible(has_notes)
        self.status_label.setText("Ready")
        self.status_label.setStyleSheet("color: gray;")

    def show_translation_error(self, error: str) -> None:
        """Show error state for translation."""
        self.translation_text.clear()
        self.copy_button.setVisible(False)
        self.status_label.setText(error)
        self.status_label.setStyleSheet("color: red;")

    def set_copied(self, copied: bool) -> None:
        self.copy_button.setText("Copied" if copied else "Copy Text")

    def clear(self) -> None:
        self.source_text.clear()
        self.context_edit.clear()
        self.translation_text.clear()
        self.translation_text.setPlaceholderText(
            "Your translated manuscript will appear here with literary precision."
        )
        self.notes_text.clear()
        self.notes_label.setVisible(False)
        self.notes_text.setVisible(False)
        self.detected_label.clear()
        self.copy_button.setVisible(False)
        self.copy_button.setText("Copy Text")
        self.status_label.clear()
        self.status_label.setStyleSheet("color: gray;")
