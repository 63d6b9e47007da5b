"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/report.py
Implements the duplicate report pipeline:
    size index → candidate extraction → bounded hashing → hash grouping → stats → text

The builder never writes to files or streams. All output goes back to the caller
as a ReportResult; the CLI or GUI decides where the report text ends up.
"""
import os
import time
import logging
from typing import List, Optional

from dupreport.core.executor import map_with_concurrency
from dupreport.core.grouper import FileGrouperImpl
from dupreport.core.hasher import hash_file
from dupreport.core.interfaces import ProgressReporter
from dupreport.core.models import (
    HashError, HashGroups, HashResult, ReportConfig, ReportResult, ScanStats)
from dupreport.core.scanner import collect_size_groups

logger = logging.getLogger(__name__)


def format_group(digest: str, files: List[str]) -> str:
    """Formats one duplicate group as a report block, trailing blank line included."""
    lines = [f"Hash: {digest}"]
    lines.extend(f"- {file_path}" for file_path in files)
    return "\n".join(lines) + "\n\n"


def _hash_candidate(file_path: str) -> HashResult:
    return HashResult(file_path=file_path, hash=hash_file(file_path))


def _group_wasted_bytes(files: List[str]) -> int:
    """
    Bytes held by redundant copies in one group. Members share a size, so only
    the first one is re-stated; if that fails the group contributes 0.
    """
    try:
        size = os.stat(files[0]).st_size
    except OSError as e:
        logger.warning(f"Could not stat {files[0]} for wasted space accounting: {e}")
        return 0
    return size * (len(files) - 1)


def build_duplicates_report(
        root_dir: str,
        exclude_path: Optional[str] = None,
        extensions: Optional[List[str]] = None,
        progress: Optional[ProgressReporter] = None,
        concurrency: int = ReportConfig.HASH_CONCURRENCY
) -> ReportResult:
    """
    Find files with identical content under root_dir.

    Args:
        root_dir: Validated root directory (callers reject symlinks and non-directories)
        exclude_path: File to leave out of the scan, typically the report file itself
        extensions: Optional allow-list of extensions (".txt", "jpg", ...)
        progress: Optional ProgressReporter notified at each pipeline stage
        concurrency: Maximum number of files hashed at the same time

    Returns:
        ReportResult with the report text ("" when no duplicates), the files that
        failed to hash and the scan statistics
    """
    start_time = time.time()
    stats = ScanStats()

    # Stage 1: size index
    size_groups = collect_size_groups(root_dir, exclude_path, extensions, progress)
    stats.files_scanned = sum(len(files) for files in size_groups.values())

    # Stage 2: only same-size files can be duplicates
    candidates = FileGrouperImpl.extract_candidates(size_groups)
    stats.files_hashed = len(candidates)
    del size_groups

    # Stage 3: bounded parallel hashing
    total = len(candidates)
    if progress:
        progress.start_hashing(total)

    def on_hashed(completed: int, file_path: str) -> None:
        if progress:
            progress.update_hashing(completed, total, file_path)

    mapped = map_with_concurrency(candidates, concurrency, _hash_candidate, on_hashed)

    if progress:
        progress.end_hashing()

    errors = []
    for failure in mapped.errors:
        logger.warning(f"Error hashing file: {failure.item}: {failure.error}")
        errors.append(HashError(file_path=failure.item, error=str(failure.error)))
    stats.hash_errors = len(errors)

    # Stage 4: group by digest, then account and format
    hash_groups: HashGroups = FileGrouperImpl.group_by_hash(mapped.results)

    blocks = []
    for digest, files in FileGrouperImpl.duplicate_groups(hash_groups).items():
        stats.duplicate_groups += 1
        stats.duplicate_files += len(files)
        stats.wasted_bytes += _group_wasted_bytes(files)
        blocks.append(format_group(digest, files))

    logger.debug(
        f"Report built in {time.time() - start_time:.2f}s: "
        f"{stats.duplicate_groups} groups, {stats.hash_errors} errors"
    )
    return ReportResult(report="".join(blocks), errors=errors, stats=stats)
