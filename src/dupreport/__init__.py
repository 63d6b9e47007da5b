"""
dupreport — duplicate file finder that reports, never deletes.

Core features:
- Size pre-filter: only files sharing a byte size are ever hashed
- Streaming SHA-256 hashing with a bounded worker pool
- Per-file error isolation: unreadable files are reported, never fatal
- Plain-text report plus statistics (duplicate groups, wasted space)
- CLI interface and an optional PySide6 worker (install with [gui] extra)
"""

from importlib.metadata import PackageNotFoundError, version as _version

try:
    __version__ = _version("dupreport")
except PackageNotFoundError:
    __version__ = "0.0.0"

# Public API: only what users should import directly
from dupreport.commands import DuplicateReportCommand
from dupreport.core import (
    DuplicateReportParams, ReportConfig, ReportResult, ScanStats, HashError,
    build_duplicates_report, collect_size_groups, hash_file, map_with_concurrency)
from dupreport.progress import NoOpProgressReporter, StderrProgressReporter, create_progress_reporter
from dupreport.services import ReportService
from dupreport.utils.convert_utils import ConvertUtils

__all__ = [
    "DuplicateReportCommand",
    "DuplicateReportParams",
    "ReportConfig",
    "ReportResult",
    "ScanStats",
    "HashError",
    "build_duplicates_report",
    "collect_size_groups",
    "hash_file",
    "map_with_concurrency",
    "NoOpProgressReporter",
    "StderrProgressReporter",
    "create_progress_reporter",
    "ReportService",
    "ConvertUtils",
    "__version__",
]
