"""
GUI integration built on PySide6 (optional dependency, install with [gui] extra).
"""

from .worker import DuplicateReportWorker, QtProgressReporter, WorkerSignals

__all__ = ["DuplicateReportWorker", "QtProgressReporter", "WorkerSignals"]
