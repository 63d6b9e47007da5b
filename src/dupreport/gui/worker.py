"""
Qt worker runnable — follows modern Qt pattern: QRunnable + QThreadPool.
Accepts DuplicateReportParams for unified configuration and forwards pipeline
progress as Qt signals so widgets are only touched from the UI thread.
"""
import time
from typing import Callable, Optional

from PySide6.QtCore import QRunnable, QObject, Signal, QMutex, QMutexLocker

from dupreport.commands import DuplicateReportCommand
from dupreport.core.interfaces import ProgressReporter
from dupreport.core.models import DuplicateReportParams, ReportConfig


class WorkerSignals(QObject):
    """Separate QObject to hold signals (QRunnable cannot emit signals directly)."""
    progress = Signal(str, int, object)  # stage, current, total
    finished = Signal(object)            # ReportResult
    error = Signal(str)


class QtProgressReporter(ProgressReporter):
    """
    ProgressReporter that turns pipeline callbacks into progress signals.
    Stages are "scanning" and "hashing"; intermediate updates are throttled.
    """

    def __init__(
            self,
            emit: Callable[[str, int, Optional[int]], None],
            interval: float = ReportConfig.PROGRESS_UPDATE_INTERVAL,
            clock: Callable[[], float] = time.monotonic
    ):
        self._emit = emit
        self.interval = interval
        self._clock = clock
        self._last_update: Optional[float] = None
        self._hash_total = 0

    def _throttled(self) -> bool:
        now = self._clock()
        if self._last_update is not None and now - self._last_update < self.interval:
            return True
        self._last_update = now
        return False

    def start_scanning(self) -> None:
        self._emit("scanning", 0, None)

    def update_scanning(self, files_found: int) -> None:
        if not self._throttled():
            self._emit("scanning", files_found, None)

    def end_scanning(self, total_files: int) -> None:
        self._emit("scanning", total_files, total_files)

    def start_hashing(self, total_files: int) -> None:
        self._hash_total = total_files
        self._emit("hashing", 0, total_files)

    def update_hashing(self, completed: int, total: int, current_file: Optional[str] = None) -> None:
        if not self._throttled():
            self._emit("hashing", completed, total)

    def end_hashing(self) -> None:
        self._emit("hashing", self._hash_total, self._hash_total)


class DuplicateReportWorker(QRunnable):
    """
    Worker runnable that builds a duplicate report in the thread pool.
    Automatically deleted after execution (setAutoDelete=True).
    """
    def __init__(self, params: DuplicateReportParams):
        super().__init__()
        self.params = params
        self.command = DuplicateReportCommand()
        self.signals = WorkerSignals()
        self.progress = QtProgressReporter(self.safe_progress_emit)
        self._stopped = False
        self._mutex = QMutex()
        self.setAutoDelete(True)  # Critical: auto-delete after run() completes

    def stop(self):
        """Sets the stopped flag; no further signals are emitted afterwards."""
        with QMutexLocker(self._mutex):
            self._stopped = True

    def is_stopped(self) -> bool:
        """Returns True if the worker has been requested to stop."""
        with QMutexLocker(self._mutex):
            return self._stopped

    def safe_progress_emit(self, stage: str, current: int, total=None):
        """Emits progress signal safely with mutex protection."""
        with QMutexLocker(self._mutex):
            if not self._stopped:
                try:
                    self.signals.progress.emit(stage, current, total)
                except RuntimeError:
                    pass

    def run(self):
        """Main execution method. Runs in thread pool thread."""
        try:
            if self.is_stopped():
                return

            result = self.command.execute(self.params, progress=self.progress)

            if not self.is_stopped():
                self.command.write_report(result, self.command.output_path)
                self.signals.finished.emit(result)
        except Exception as e:
            if not self.is_stopped():
                self.signals.error.emit(f"{type(e).__name__}: {str(e)}")
