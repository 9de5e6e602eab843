"""Async workers for non-blocking API calls using Qt threading."""

import logging
import threading

from PySide6.QtCore import QObject, QRunnable, Signal, Slot

from authors_linguist.core import TranslationRequest
from authors_linguist.services.translation import TranslationService


logger = logging.getLogger(__name__)


class WorkerSignals(QObject):
    """
    Signals for communicating results from worker threads.

    QRunnable doesn't inherit from QObject, so we need a separate
    QObject to hold the signals.
    """
    finished = Signal()
    error = Signal(object)  # Exception
    fragment_received = Signal(str)
    translation_result = Signal(object)  # TranslationResult


class StreamingTranslationWorker(QRunnable):
    """
    Worker that consumes a streamed translation in a background thread.

    Emits one fragment_received per non-empty fragment, in arrival order.
    cancel() stops consumption at the next fragment boundary and closes the
    stream; a cancelled worker emits neither fragments nor errors afterwards.
    """

    def __init__(self, translation_service: TranslationService, request: TranslationRequest):
        super().__init__()
        self.translation_service = translation_service
        self.request = request
        self.signals = WorkerSignals()
        self._cancelled = threading.Event()
        self.setAutoDelete(True)

    def cancel(self) -> None:
        self._cancelled.set()

    @property
    def is_cancelled(self) -> bool:
        return self._cancelled.is_set()

    @Slot()
    def run(self):
        """Execute the streaming API call in background thread."""
        stream = None
        try:
            stream = self.translation_service.translate_stream(
                self.request.source_text,
                self.request.options(),
            )
            for fragment in stream:
                if self.is_cancelled:
                    break
                self.signals.fragment_received.emit(fragment)
        except Exception as e:
            if not self.is_cancelled:
                self.signals.error.emit(e)
            else:
                logger.debug("Discarding error from cancelled stream: %s", e)
        finally:
            if stream is not None:
                stream.close()
            self.signals.finished.emit()


class StructuredTranslationWorker(QRunnable):
    """Worker that runs the one-shot structured translation in a background thread."""

    def __init__(self, translation_service: TranslationService, request: TranslationRequest):
        super().__init__()
        self.translation_service = translation_service
        self.request = request
        self.signals = WorkerSignals()
        self.setAutoDelete(True)

    @Slot()
    def run(self):
        """Execute the structured API call in background thread."""
        try:
            result = self.translation_service.translate(
                self.request.source_text,
                self.request.options(),
            )
            self.signals.translation_result.emit(result)
        except Exception as e:
            self.signals.error.emit(e)
        finally:
            self.signals.finished.emit()
