"""
Unified command orchestrator for duplicate reports.
This is the SINGLE source of truth for business logic — used by both GUI and CLI.
No Qt/PySide6 dependencies — pure Python.
"""
import os
import stat
import sys
import logging
from typing import Optional, TextIO

from dupreport.core.interfaces import ProgressReporter
from dupreport.core.models import DuplicateReportParams, ReportConfig, ReportResult
from dupreport.core.report import build_duplicates_report

logger = logging.getLogger(__name__)


class DuplicateReportCommand:
    """
    Orchestrates the whole report workflow:
    1. Validate the root directory (reject missing paths, files and symlinks)
    2. Decide where the report goes, so the report file is never scanned itself
    3. Build the report with progress support

    Usage:
        # For GUI (with progress UI updates):
        params = DuplicateReportParams(root_dir=...)
        command = DuplicateReportCommand()
        result = command.execute(params, progress=qt_progress_reporter)

        # For CLI (with console progress):
        result = command.execute(params, progress=StderrProgressReporter())
        command.write_report(result, command.output_path)
    """

    def __init__(self):
        self._result: Optional[ReportResult] = None
        self._output_path: Optional[str] = None

    @staticmethod
    def validate_root(root_dir: str) -> str:
        """
        Resolve root_dir to an absolute path and make sure it is a real directory.

        Raises:
            ValueError: If the path is inaccessible, a symbolic link or not a directory
        """
        root = os.path.abspath(root_dir)
        try:
            st = os.lstat(root)
        except OSError as e:
            raise ValueError(f"Cannot access directory: {e}") from e

        if stat.S_ISLNK(st.st_mode):
            raise ValueError("Refusing to follow a symbolic link as the root directory.")
        if not stat.S_ISDIR(st.st_mode):
            raise ValueError("Provided path is not a directory.")
        return root

    @staticmethod
    def resolve_output_path(params: DuplicateReportParams) -> Optional[str]:
        """Absolute report file path, or None when the report goes to stdout."""
        if params.to_stdout:
            return None
        if params.output_path:
            return os.path.abspath(params.output_path)
        return os.path.join(os.path.abspath(params.root_dir), ReportConfig.OUTPUT_FILE_NAME)

    def execute(
            self,
            params: DuplicateReportParams,
            progress: Optional[ProgressReporter] = None
    ) -> ReportResult:
        """
        Execute the report build with given parameters.

        Args:
            params: Validated report parameters
            progress: Optional ProgressReporter for scan/hash updates

        Returns:
            ReportResult (report text, hash errors, statistics)

        Raises:
            ValueError: If the root directory is invalid
        """
        root = self.validate_root(params.root_dir)
        self._output_path = self.resolve_output_path(params)

        logger.debug(f"Building report for {root} (output: {self._output_path or 'stdout'})")
        self._result = build_duplicates_report(
            root,
            exclude_path=self._output_path,
            extensions=params.extensions or None,
            progress=progress,
        )
        return self._result

    @staticmethod
    def write_report(
            result: ReportResult,
            output_path: Optional[str] = None,
            stream: Optional[TextIO] = None
    ) -> None:
        """Write the report text to output_path, or to stream (stdout) when no path is given."""
        if output_path is None:
            stream = stream or sys.stdout
            stream.write(result.report)
            stream.flush()
            return

        with open(output_path, "w", encoding="utf-8") as f:
            f.write(result.report)
        logger.debug(f"Report written to {output_path}")

    @property
    def output_path(self) -> Optional[str]:
        return self._output_path

    def get_result(self) -> ReportResult:
        """Get the result of the last execution."""
        if self._result is None:
            raise RuntimeError("Execute command first before accessing the result")
        return self._result
