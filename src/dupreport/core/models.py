"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models and configuration for the duplicate detection pipeline.
"""

import os
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Optional, TypeVar

R = TypeVar("R")


# =============================
# Configuration
# =============================

class ReportConfig:
    """Centralized constants for scanning, hashing and progress output."""
    OUTPUT_FILE_NAME = "duplicates.txt"

    # Bounded fan-out: at least 2 workers, never more than 8
    HASH_CONCURRENCY = max(2, min(8, os.cpu_count() or 2))

    HASH_CHUNK_SIZE = 64 * 1024  # bytes per read() while hashing

    PROGRESS_UPDATE_INTERVAL = 0.1  # seconds, ~10 updates/sec


# ======================
#  Core Data Models
# ======================

SizeGroups = Dict[int, List[str]]
HashGroups = Dict[str, List[str]]


@dataclass
class HashResult:
    """Digest of a single successfully hashed file."""
    file_path: str
    hash: str


@dataclass
class HashError:
    """A file that could not be hashed, with a readable reason."""
    file_path: str
    error: str

    def __repr__(self):
        return f"<HashError path={self.file_path}, error={self.error}>"


@dataclass
class ScanStats:
    """
    Statistics collected during a single duplicate scan.

    files_scanned:    every file that entered a size bucket
    files_hashed:     candidates submitted for hashing
    hash_errors:      candidates that failed to hash
    duplicate_groups: hash groups with 2+ members
    duplicate_files:  sum of members across duplicate groups
    wasted_bytes:     sum of size * (members - 1) across duplicate groups
    """
    files_scanned: int = 0
    files_hashed: int = 0
    hash_errors: int = 0
    duplicate_groups: int = 0
    duplicate_files: int = 0
    wasted_bytes: int = 0


@dataclass
class ReportResult:
    """Complete output of one report build. The report is "" when nothing is duplicated."""
    report: str
    errors: List[HashError] = field(default_factory=list)
    stats: ScanStats = field(default_factory=ScanStats)

    @property
    def has_duplicates(self) -> bool:
        return bool(self.report)


@dataclass
class MappedError:
    """Failure of one item inside map_with_concurrency()."""
    index: int
    item: Any
    error: BaseException


@dataclass
class MappedResult(Generic[R]):
    """
    Output of map_with_concurrency(): one slot per input item
    (None for failures and skipped items) plus the collected failures.
    """
    results: List[Optional[R]] = field(default_factory=list)
    errors: List[MappedError] = field(default_factory=list)


"""
DTO for report parameters with built-in validation.
Interface-agnostic — used by both GUI and CLI.
"""

def normalize_extensions(extensions: List[str]) -> List[str]:
    """
    Normalize extensions: strip, lowercase, ensure a leading dot.
    Empty entries are dropped and duplicates removed (first occurrence wins).
    """
    normalized = []
    for ext in extensions:
        ext = ext.strip().lower()
        if ext and not ext.startswith('.'):
            ext = f".{ext}"
        if ext and ext not in normalized:
            normalized.append(ext)
    return normalized


@dataclass
class DuplicateReportParams:
    """Parameters for a report run with validation."""
    root_dir: str
    output_path: Optional[str] = None
    to_stdout: bool = False
    extensions: List[str] = field(default_factory=list)

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        if not self.root_dir:
            raise ValueError("Root directory cannot be empty")

        if self.to_stdout and self.output_path:
            raise ValueError("Output path cannot be combined with stdout output")

        self.extensions = normalize_extensions(self.extensions)

    @staticmethod
    def from_extensions_string(
            root_dir: str,
            extensions_str: str = "",
            output_path: Optional[str] = None,
            to_stdout: bool = False,
    ) -> 'DuplicateReportParams':
        """
        Factory method to create params from a comma-separated extension list.
        Useful for GUI text fields ("jpg, .PNG").
        """
        ext_list = [
            ext.strip() for ext in extensions_str.split(",") if ext.strip()
        ] if extensions_str else []

        return DuplicateReportParams(
            root_dir=root_dir,
            output_path=output_path,
            to_stdout=to_stdout,
            extensions=ext_list,
        )
