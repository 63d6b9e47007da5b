"""
Core duplicate detection engine — scanner, hasher, executor, grouper and report builder.

This package contains the performance-critical foundation of dupreport:
- walk_directory / FileScannerImpl: symlink-safe traversal and the size index
- HasherImpl + Sha256AlgorithmImpl: streaming SHA-256 content hashing
- map_with_concurrency: bounded worker pool with per-item error isolation
- FileGrouperImpl: order-preserving candidate extraction and hash grouping
- build_duplicates_report: the pipeline entry point
- Models: ScanStats, ReportResult, HashError and configuration objects

All components are pure Python with no GUI dependencies — suitable for CLI and server usage.
"""

from .scanner import FileScannerImpl, walk_directory, collect_size_groups
from .hasher import HasherImpl, Sha256AlgorithmImpl, hash_file
from .executor import map_with_concurrency
from .grouper import FileGrouperImpl
from .report import build_duplicates_report, format_group
from .interfaces import ProgressReporter
from .models import (
    DuplicateReportParams, HashError, HashResult, MappedError, MappedResult,
    ReportConfig, ReportResult, ScanStats)

__all__ = [
    "FileScannerImpl",
    "walk_directory",
    "collect_size_groups",
    "HasherImpl",
    "Sha256AlgorithmImpl",
    "hash_file",
    "map_with_concurrency",
    "FileGrouperImpl",
    "build_duplicates_report",
    "format_group",
    "ProgressReporter",
    "DuplicateReportParams",
    "HashError",
    "HashResult",
    "MappedError",
    "MappedResult",
    "ReportConfig",
    "ReportResult",
    "ScanStats",
]
