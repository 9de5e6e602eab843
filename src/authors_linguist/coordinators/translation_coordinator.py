"""Translation Coordinator - Manages the translate/clear/copy workflow and panel state."""

import logging
from typing import Optional

from PySide6.QtCore import QObject, QThreadPool, QTimer, Signal, Slot
from PySide6.QtGui import QGuiApplication

from authors_linguist.core import (
    DEFAULT_TARGET_LANGUAGE,
    DEFAULT_TONE,
    SUPPORTED_LANGUAGES,
    TONE_IDS,
    ManuscriptMetrics,
    StreamAccumulator,
    TranslationRequest,
    TranslationResult,
    measure,
)
from authors_linguist.services import (
    StreamingTranslationWorker,
    StructuredTranslationWorker,
    TranslationService,
)


logger = logging.getLogger(__name__)

ERROR_MESSAGE = "The manuscript could not be processed. Please try again."
MISSING_KEY_MESSAGE = "API key not configured. Add GEMINI_API_KEY to .env file."
COPY_RESET_MS = 2000


class _StreamRequest(QObject):
    """Helper class to hold streaming request context and handle results safely."""

    def __init__(self, worker_id: int, accumulator: StreamAccumulator, parent: "TranslationCoordinator"):
        super().__init__()
        self.worker_id = worker_id
        self.accumulator = accumulator
        self.parent_ref = parent

    @Slot(str)
    def on_fragment(self, fragment: str):
        coordinator = self.parent_ref
        if coordinator:
            try:
                coordinator._handle_fragment(fragment, self.accumulator, self.worker_id)
            except RuntimeError:
                # Coordinator might be destroyed, ignore
                pass

    @Slot(object)
    def on_error(self, error):
        coordinator = self.parent_ref
        if coordinator:
            try:
                coordinator._handle_error(error, self.worker_id)
            except RuntimeError:
                pass

    @Slot()
    def on_finished(self):
        coordinator = self.parent_ref
        if coordinator:
            try:
                coordinator._handle_stream_finished(self.worker_id)
            except RuntimeError:
                pass


class _StructuredRequest(QObject):
    """Helper class to hold structured request context and handle results safely."""

    def __init__(self, worker_id: int, parent: "TranslationCoordinator"):
        super().__init__()
        self.worker_id = worker_id
        self.parent_ref = parent

    @Slot(object)
    def on_result(self, result):
        coordinator = self.parent_ref
        if coordinator:
            try:
                coordinator._handle_structured_result(result, self.worker_id)
            except RuntimeError:
                pass

    @Slot(object)
    def on_error(self, error):
        coordinator = self.parent_ref
        if coordinator:
            try:
                coordinator._handle_error(error, self.worker_id)
            except RuntimeError:
                pass


class TranslationCoordinator(QObject):
    """
    Orchestrates the manuscript translation workflow.

    Responsibilities:
    - Hold the author's input (text, target language, tone, context).
    - Start streaming translations and fold fragments into a running result.
    - Map any failure to one fixed user-facing message.
    - Clear all state, dropping late results of abandoned requests.
    - Copy the finished translation with a transient "copied" acknowledgment.
    """

    translation_started = Signal()
    translation_updated = Signal(object)  # TranslationResult
    translation_completed = Signal(object)  # TranslationResult or None
    translation_failed = Signal(str)
    loading_changed = Signal(bool)
    copied_changed = Signal(bool)
    cleared = Signal()

    def __init__(
        self,
        main_window,
        translation_service: Optional[TranslationService],
        clipboard=None,
        thread_pool: Optional[QThreadPool] = None,
    ):
        super().__init__()

        self.main_window = main_window
        self.translation_service = translation_service
        self._clipboard = clipboard
        self.thread_pool = thread_pool or QThreadPool.globalInstance()

        self.source_text = ""
        self.target_language = DEFAULT_TARGET_LANGUAGE
        self.tone = DEFAULT_TONE
        self.context = ""

        self.result: Optional[TranslationResult] = None
        self.error: Optional[str] = None
        self.is_loading = False
        self.copied = False

        # Results from any worker other than the active one are stale
        self._active_worker_id: Optional[int] = None
        self._active_worker = None
        self._worker_counter = 0

        # Keep helper objects alive while their workers run
        self._request_helper: Optional[QObject] = None

        self._copy_timer = QTimer(self)
        self._copy_timer.setSingleShot(True)
        self._copy_timer.timeout.connect(self._reset_copied)

    # ------------------------------------------------------------------ #
    # Input state
    # ------------------------------------------------------------------ #

    def set_source_text(self, text: str) -> None:
        self.source_text = text

    def set_target_language(self, language: str) -> None:
        if language not in SUPPORTED_LANGUAGES:
            raise ValueError(f"Unsupported target language: {language!r}")
        self.target_language = language

    def set_tone(self, tone: str) -> None:
        if tone not in TONE_IDS:
            raise ValueError(f"Unsupported tone: {tone!r}")
        self.tone = tone

    def set_context(self, context: str) -> None:
        self.context = context

    def metrics(self) -> ManuscriptMetrics:
        return measure(self.source_text)

    def can_translate(self) -> bool:
        """Return True if the translate action should be enabled."""
        return not self.is_loading and bool(self.source_text.strip())

    def build_request(self) -> TranslationRequest:
        return TranslationRequest(
            source_text=self.source_text,
            target_language=self.target_language,
            tone=self.tone,
            context=self.context,
        )

    # ------------------------------------------------------------------ #
    # Translate
    # ------------------------------------------------------------------ #

    def request_translation(self) -> None:
        """Stream a translation of the current source text."""
        worker_id = self._begin_request()
        if worker_id is None:
            return

        accumulator = StreamAccumulator()
        worker = StreamingTranslationWorker(
            translation_service=self.translation_service,
            request=self.build_request(),
        )

        request_helper = _StreamRequest(worker_id, accumulator, self)
        self._request_helper = request_helper
        self._active_worker = worker

        worker.signals.fragment_received.connect(request_helper.on_fragment)
        worker.signals.error.connect(request_helper.on_error)
        worker.signals.finished.connect(request_helper.on_finished)

        self.thread_pool.start(worker)

    def request_structured_translation(self) -> None:
        """Translate in one call, including detected language and translator's notes."""
        worker_id = self._begin_request()
        if worker_id is None:
            return

        worker = StructuredTranslationWorker(
            translation_service=self.translation_service,
            request=self.build_request(),
        )

        request_helper = _StructuredRequest(worker_id, self)
        self._request_helper = request_helper
        self._active_worker = None

        worker.signals.translation_result.connect(request_helper.on_result)
        worker.signals.error.connect(request_helper.on_error)

        self.thread_pool.start(worker)

    def _begin_request(self) -> Optional[int]:
        """Validate input, reset result state and allocate a worker id."""
        if not self.source_text.strip() or self.is_loading:
            return None

        if self.translation_service is None:
            self.main_window.show_error("Configuration", MISSING_KEY_MESSAGE)
            return None

        self.result = None
        self.error = None
        self._set_loading(True)
        self.translation_started.emit()

        self._worker_counter += 1
        self._active_worker_id = self._worker_counter
        return self._active_worker_id

    def _handle_fragment(self, fragment: str, accumulator: StreamAccumulator, worker_id: int) -> None:
        if worker_id != self._active_worker_id:
            logger.debug("Ignoring stale fragment (worker %s, current %s)", worker_id, self._active_worker_id)
            return

        self.result = accumulator.append(fragment)
        self.translation_updated.emit(self.result)

    def _handle_stream_finished(self, worker_id: int) -> None:
        if worker_id != self._active_worker_id:
            logger.debug("Ignoring stale completion (worker %s, current %s)", worker_id, self._active_worker_id)
            return

        self._finish_request()
        self.translation_completed.emit(self.result)

    def _handle_structured_result(self, result: TranslationResult, worker_id: int) -> None:
        if worker_id != self._active_worker_id:
            logger.debug("Ignoring stale result (worker %s, current %s)", worker_id, self._active_worker_id)
            return

        self.result = result
        self._finish_request()
        self.translation_completed.emit(result)

    def _handle_error(self, error: Exception, worker_id: int) -> None:
        if worker_id != self._active_worker_id:
            logger.debug("Ignoring stale error (worker %s, current %s)", worker_id, self._active_worker_id)
            return

        logger.error("Translation failed: %s", error, exc_info=error)
        self.error = ERROR_MESSAGE
        self._finish_request()
        self.translation_failed.emit(ERROR_MESSAGE)

    def _finish_request(self) -> None:
        self._active_worker_id = None
        self._active_worker = None
        self._set_loading(False)

    def _set_loading(self, loading: bool) -> None:
        if self.is_loading != loading:
            self.is_loading = loading
            self.loading_changed.emit(loading)

    # ------------------------------------------------------------------ #
    # Clear / copy
    # ------------------------------------------------------------------ #

    def clear(self) -> None:
        """Discard input, result, error and context; abandon any running stream."""
        if self._active_worker is not None:
            self._active_worker.cancel()

        self._active_worker_id = None
        self._active_worker = None

        self.source_text = ""
        self.context = ""
        self.result = None
        self.error = None
        self._set_loading(False)

        self._copy_timer.stop()
        if self.copied:
            self._reset_copied()

        self.cleared.emit()

    def copy_translation(self) -> None:
        """Copy the translated text and raise the transient copied flag."""
        if not self.result or not self.result.translated_text:
            return

        clipboard = self._clipboard or QGuiApplication.clipboard()
        clipboard.setText(self.result.translated_text)

        self.copied = True
        self.copied_changed.emit(True)
        self._copy_timer.start(COPY_RESET_MS)

    @Slot()
    def _reset_copied(self) -> None:
        self.copied = False
        self.copied_changed.emit(False)
