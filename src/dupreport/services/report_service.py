"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/report_service.py
Human-readable summaries of a finished report: statistics and hash errors.
"""
import os
from typing import List

from dupreport.core.models import HashError, ScanStats
from dupreport.utils.convert_utils import ConvertUtils


class ReportService:
    @staticmethod
    def format_stats(stats: ScanStats) -> str:
        """
        Multi-line statistics summary.

        Args:
            stats (ScanStats): Statistics returned with the report.

        Returns:
            str: Summary lines joined with newlines.
        """
        hashed_share = ConvertUtils.percent(stats.files_hashed, stats.files_scanned)
        lines = [
            "Scan Statistics:",
            f"Files scanned: {stats.files_scanned}",
            f"Files hashed: {stats.files_hashed} ({hashed_share} of scanned)",
            f"Hash errors: {stats.hash_errors}",
            f"Duplicate groups: {stats.duplicate_groups}",
            f"Duplicate files: {stats.duplicate_files}",
            f"Wasted space: {ConvertUtils.bytes_to_human(stats.wasted_bytes)}",
        ]
        return "\n".join(lines)

    @staticmethod
    def format_errors(errors: List[HashError], limit: int = 5) -> str:
        """
        Short listing of files that failed to hash, at most `limit` entries
        followed by a count of the rest. Empty string when there are no errors.
        """
        if not errors:
            return ""

        lines = [f"Failed to hash {len(errors)} file(s):"]
        for error in errors[:limit]:
            lines.append(f"  • {os.path.basename(error.file_path)}: {error.error}")
        if len(errors) > limit:
            lines.append(f"  ...and {len(errors) - limit} more files")
        return "\n".join(lines)
