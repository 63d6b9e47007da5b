"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/scanner.py
Implements directory traversal and the size index that feeds hashing.
Features:
- Recursively walks a directory tree without following symbolic links
- Skips unreadable directories, special files and files that fail to stat
- Applies an optional excluded path and extension allow-list
- Buckets surviving files by exact byte size
"""

import os
import stat
import time
import logging
from typing import Callable, List, Optional

from dupreport.core.interfaces import ProgressReporter
from dupreport.core.models import SizeGroups, normalize_extensions

logger = logging.getLogger(__name__)


def walk_directory(root_dir: str, on_file: Callable[[str], None]) -> None:
    """
    Call on_file(path) for every regular file under root_dir.

    Each directory's files are reported before its subdirectories are entered.
    Symbolic links are never followed, neither to files nor to directories.
    Unreadable directories are logged and skipped; traversal continues in siblings.
    """
    def _on_walk_error(error: OSError) -> None:
        logger.warning(f"Error reading directory: {error.filename}: {error.strerror or error}")

    # os.walk never descends into symlinked directories with followlinks=False
    for root, dirs, files in os.walk(root_dir, onerror=_on_walk_error, followlinks=False):
        for filename in files:
            path = os.path.join(root, filename)
            try:
                mode = os.lstat(path).st_mode
            except OSError as e:
                logger.warning(f"Could not inspect {path}: {e}")
                continue

            if stat.S_ISLNK(mode):
                logger.debug(f"Skipping symbolic link: {path}")
                continue
            if not stat.S_ISREG(mode):
                logger.debug(f"Skipping non-regular file: {path}")
                continue

            on_file(path)


class FileScannerImpl:
    """
    Walks a directory tree and groups files by size.

    Attributes:
        root_dir: Root directory to scan (made absolute)
        exclude_path: Single file path to leave out, e.g. the report being written
        extensions: Allowed extensions (e.g., [".txt", ".jpg"]); empty means all
    """

    def __init__(
        self,
        root_dir: str,
        exclude_path: Optional[str] = None,
        extensions: Optional[List[str]] = None,
    ):
        self.root_dir = os.path.abspath(root_dir)
        self.exclude_path = os.path.abspath(exclude_path) if exclude_path else None
        self.extensions = set(normalize_extensions(extensions)) if extensions else set()

    def collect_size_groups(self, progress: Optional[ProgressReporter] = None) -> SizeGroups:
        """
        Single-pass scan returning {size: [paths]} in discovery order.
        """
        logger.debug(f"Root directory: {self.root_dir}")
        logger.debug(f"Filters: exclude_path={self.exclude_path}, extensions={sorted(self.extensions)}")

        size_groups: SizeGroups = {}
        file_count = 0
        start_time = time.time()

        if progress:
            progress.start_scanning()

        def on_file(path: str) -> None:
            nonlocal file_count
            size = self._process_file(path)
            if size is None:
                return

            file_count += 1
            if progress:
                progress.update_scanning(file_count)

            size_groups.setdefault(size, []).append(path)

        walk_directory(self.root_dir, on_file)

        if progress:
            progress.end_scanning(file_count)

        logger.debug(f"Total scan time: {time.time() - start_time:.2f} seconds")
        logger.debug(f"Scan completed. {file_count} files in {len(size_groups)} size groups.")
        return size_groups

    def _process_file(self, path: str) -> Optional[int]:
        """
        Apply filters to one walked file.
        Returns:
            File size in bytes if the file is accepted, else None
        """
        if self.exclude_path and path == self.exclude_path:
            logger.debug(f"Skipping excluded path: {path}")
            return None

        if not self._extension_passes(path):
            logger.debug(f"Skipping {path} (extension not allowed)")
            return None

        try:
            stat_result = os.stat(path)
        except OSError as e:
            logger.warning(f"Error stating file: {path}: {e}")
            return None

        # The entry may have been replaced between listing and stat
        if not stat.S_ISREG(stat_result.st_mode):
            logger.debug(f"Skipping {path} (no longer a regular file)")
            return None

        return stat_result.st_size

    def _extension_passes(self, path: str) -> bool:
        """
        Check if file matches any of the allowed extensions (case-insensitive).
        """
        if not self.extensions:
            return True
        return os.path.splitext(path)[1].lower() in self.extensions


def collect_size_groups(
        root_dir: str,
        exclude_path: Optional[str] = None,
        extensions: Optional[List[str]] = None,
        progress: Optional[ProgressReporter] = None
) -> SizeGroups:
    """Scan root_dir and bucket every accepted regular file by its byte size."""
    scanner = FileScannerImpl(root_dir, exclude_path=exclude_path, extensions=extensions)
    return scanner.collect_size_groups(progress)
