"""
Terminal progress reporting for the CLI.

StderrProgressReporter rewrites a single status line with carriage returns and
throttles intermediate updates; NoOpProgressReporter is used when output must
stay clean (quiet mode, or report piped through stdout).
"""
import os
import sys
import time
from typing import Callable, Optional, TextIO

from dupreport.core.interfaces import ProgressReporter
from dupreport.core.models import ReportConfig


class StderrProgressReporter(ProgressReporter):
    """Progress reporter that writes throttled status lines to stderr."""

    def __init__(
            self,
            stream: Optional[TextIO] = None,
            interval: float = ReportConfig.PROGRESS_UPDATE_INTERVAL,
            clock: Callable[[], float] = time.monotonic
    ):
        self.stream = stream or sys.stderr
        self.interval = interval
        self._clock = clock
        self._last_update: Optional[float] = None

    def _throttled(self) -> bool:
        """True if an intermediate update should be dropped."""
        now = self._clock()
        if self._last_update is not None and now - self._last_update < self.interval:
            return True
        self._last_update = now
        return False

    def _write(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()

    def start_scanning(self) -> None:
        self._write("Scanning directory...\n")

    def update_scanning(self, files_found: int) -> None:
        if self._throttled():
            return
        self._write(f"\rFiles found: {files_found}")

    def end_scanning(self, total_files: int) -> None:
        self._write(f"\rFiles found: {total_files}\n")

    def start_hashing(self, total_files: int) -> None:
        self._write(f"Hashing {total_files} candidate files...\n")

    def update_hashing(self, completed: int, total: int, current_file: Optional[str] = None) -> None:
        if self._throttled():
            return

        percent = (completed / total) * 100 if total else 100.0
        line = f"\rHashing: {completed}/{total} ({percent:.1f}%)"
        if current_file:
            line += f" - {os.path.basename(current_file)}"
        # Pad to clear leftovers of a longer previous line
        self._write(line + " " * 20)

    def end_hashing(self) -> None:
        self._write("\rHashing complete." + " " * 50 + "\n")


class NoOpProgressReporter(ProgressReporter):
    """Progress reporter that produces no output."""

    def start_scanning(self) -> None:
        pass

    def update_scanning(self, files_found: int) -> None:
        pass

    def end_scanning(self, total_files: int) -> None:
        pass

    def start_hashing(self, total_files: int) -> None:
        pass

    def update_hashing(self, completed: int, total: int, current_file: Optional[str] = None) -> None:
        pass

    def end_hashing(self) -> None:
        pass


def create_progress_reporter(enabled: bool, stream: Optional[TextIO] = None) -> ProgressReporter:
    """Terminal reporter when enabled, silent reporter otherwise."""
    return StderrProgressReporter(stream=stream) if enabled else NoOpProgressReporter()
