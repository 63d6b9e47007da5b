#!/usr/bin/env python3
"""
dupreport CLI — Command line interface for duplicate file detection.
Runs the same core pipeline as the GUI and writes the report to a file or stdout.
The scanned tree is never modified: no file is deleted, moved or linked.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import sys
import os
import time
from typing import NoReturn, Optional
import logging

from dupreport import __version__
from dupreport.core.models import DuplicateReportParams, ReportResult
from dupreport.commands import DuplicateReportCommand
from dupreport.progress import create_progress_reporter
from dupreport.services.report_service import ReportService
from dupreport.cli_texts import (
    DESCRIPTION_TEXT, EXTENSIONS_HELP_TEXT, OUTPUT_HELP_TEXT, EPILOG_TEXT
)

LOG_FORMAT = "%(levelname)-8s | %(name)-25s | %(message)s"


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = False
        self.quiet: bool = False
        self.to_stdout: bool = False

    @staticmethod
    def parse_args(args=None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(
            prog="dupreport",
            description=DESCRIPTION_TEXT,
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        # Required arguments
        parser.add_argument(
            "directory",
            type=str,
            help="Directory to scan for duplicates"
        )

        # Output options
        output_group = parser.add_mutually_exclusive_group()
        output_group.add_argument(
            "--output", "-o",
            default=None,
            type=str,
            metavar='FILE',
            help=OUTPUT_HELP_TEXT
        )
        output_group.add_argument(
            "--stdout",
            action="store_true",
            help="Print the report to stdout instead of writing a file"
        )

        # Filtering options
        parser.add_argument(
            "--extensions", "-x",
            nargs="+",
            default=[],
            type=str,
            metavar='EXT',
            help=EXTENSIONS_HELP_TEXT
        )

        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Suppress progress and non-essential output"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show scan statistics and warnings about skipped files"
        )
        parser.add_argument(
            "--debug",
            action="store_true",
            help="Show debug logging"
        )
        parser.add_argument(
            "--version",
            action="version",
            version=f"%(prog)s {__version__}"
        )

        return parser.parse_args(args)

    @staticmethod
    def configure_logging(args: argparse.Namespace) -> None:
        if args.debug:
            level = logging.DEBUG
        elif args.verbose:
            level = logging.WARNING
        else:
            level = logging.ERROR
        logging.basicConfig(level=level, format=LOG_FORMAT, force=True)

    def create_params(self, args: argparse.Namespace) -> DuplicateReportParams:
        """Create DuplicateReportParams from CLI arguments."""
        try:
            return DuplicateReportParams(
                root_dir=os.path.abspath(args.directory),
                output_path=args.output,
                to_stdout=args.stdout,
                extensions=args.extensions,
            )
        except ValueError as e:
            self.error_exit(f"Parameter error: {e}")

    def progress_enabled(self, params: DuplicateReportParams) -> bool:
        """Progress goes to stderr; hide it when quiet or when stdout is piped."""
        if self.quiet:
            return False
        if params.to_stdout and not sys.stdout.isatty():
            return False
        return True

    def run_report(self, params: DuplicateReportParams) -> ReportResult:
        """Execute the report workflow and write the report."""
        command = DuplicateReportCommand()
        progress = create_progress_reporter(self.progress_enabled(params))

        try:
            result = command.execute(params, progress=progress)
        except ValueError as e:
            self.error_exit(str(e))

        try:
            command.write_report(result, command.output_path)
        except OSError as e:
            self.error_exit(f"Failed to write report: {e}")

        if command.output_path and not self.quiet:
            print(f"Duplicate report written to: {command.output_path}")
        return result

    def output_summary(self, result: ReportResult) -> None:
        """Report status, statistics and hash errors after the run."""
        # With --stdout the report itself owns stdout
        info_stream = sys.stderr if self.to_stdout else sys.stdout

        if not result.has_duplicates and not self.quiet:
            print("No duplicate files found.", file=sys.stderr)

        if self.verbose and not self.quiet:
            print("\n" + ReportService.format_stats(result.stats), file=info_stream)

        if result.errors:
            print("\n⚠️  " + ReportService.format_errors(result.errors), file=sys.stderr)

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"❌ Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, argv: Optional[list] = None) -> None:
        """Main entry point with conditional output behavior."""
        args = self.parse_args(argv)
        self.verbose = args.verbose
        self.quiet = args.quiet
        self.configure_logging(args)

        params = self.create_params(args)
        self.to_stdout = params.to_stdout

        result = self.run_report(params)
        self.output_summary(result)

        elapsed = time.time() - self.start_time
        if self.verbose and not self.quiet:
            print(f"\n✅ Completed in {elapsed:.2f} seconds", file=sys.stderr)


def main() -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run()
    except KeyboardInterrupt:
        print("\n⚠️  Operation cancelled by user (Ctrl+C)", file=sys.stderr)
        sys.exit(130)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"❌ Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
