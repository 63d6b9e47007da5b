"""Report presentation services."""

from .report_service import ReportService

__all__ = ["ReportService"]
