"""
Unit tests for DuplicateReportCommand — the orchestrator shared by CLI and GUI.
Verifies root validation, output path resolution and report writing.
"""
import io
import os
import pytest

from dupreport.commands import DuplicateReportCommand
from dupreport.core.models import DuplicateReportParams, ReportResult


class TestValidateRoot:
    """Test root directory checks."""

    def test_returns_absolute_path(self, temp_dir, monkeypatch):
        monkeypatch.chdir(temp_dir)

        assert DuplicateReportCommand.validate_root(".") == str(temp_dir)

    def test_missing_directory(self, temp_dir):
        with pytest.raises(ValueError, match="Cannot access directory"):
            DuplicateReportCommand.validate_root(str(temp_dir / "missing"))

    def test_regular_file(self, temp_dir):
        path = temp_dir / "file.txt"
        path.write_text("x")

        with pytest.raises(ValueError, match="not a directory"):
            DuplicateReportCommand.validate_root(str(path))

    def test_symlinked_root_is_refused(self, temp_dir):
        real = temp_dir / "real"
        real.mkdir()
        link = temp_dir / "link"
        try:
            link.symlink_to(real, target_is_directory=True)
        except (OSError, NotImplementedError):
            pytest.skip("Symlinks not supported on this platform")

        with pytest.raises(ValueError, match="symbolic link"):
            DuplicateReportCommand.validate_root(str(link))


class TestResolveOutputPath:
    def test_default_is_inside_root(self, temp_dir):
        params = DuplicateReportParams(root_dir=str(temp_dir))

        assert DuplicateReportCommand.resolve_output_path(params) == str(temp_dir / "duplicates.txt")

    def test_explicit_output_is_absolute(self, temp_dir, monkeypatch):
        monkeypatch.chdir(temp_dir)
        params = DuplicateReportParams(root_dir=str(temp_dir), output_path="out/report.txt")

        assert DuplicateReportCommand.resolve_output_path(params) == str(temp_dir / "out" / "report.txt")

    def test_stdout_has_no_path(self, temp_dir):
        params = DuplicateReportParams(root_dir=str(temp_dir), to_stdout=True)

        assert DuplicateReportCommand.resolve_output_path(params) is None


class TestExecute:
    """Test the full command workflow."""

    def test_existing_report_file_is_not_scanned(self, temp_dir):
        """A stale report from a previous run must not show up as a duplicate."""
        (temp_dir / "a.txt").write_text("Hash: x\n")
        (temp_dir / "duplicates.txt").write_text("Hash: x\n")

        command = DuplicateReportCommand()
        result = command.execute(DuplicateReportParams(root_dir=str(temp_dir)))

        assert result.report == ""
        assert result.stats.files_scanned == 1
        assert command.output_path == str(temp_dir / "duplicates.txt")

    def test_custom_output_file_is_excluded(self, temp_dir):
        (temp_dir / "a.txt").write_text("same")
        (temp_dir / "b.txt").write_text("same")
        custom = temp_dir / "custom.log"
        custom.write_text("same")

        command = DuplicateReportCommand()
        result = command.execute(DuplicateReportParams(root_dir=str(temp_dir), output_path=str(custom)))

        assert str(custom) not in result.report
        assert result.stats.duplicate_files == 2

    def test_stdout_mode_scans_everything(self, temp_dir):
        (temp_dir / "a.txt").write_text("same")
        (temp_dir / "duplicates.txt").write_text("same")

        command = DuplicateReportCommand()
        result = command.execute(DuplicateReportParams(root_dir=str(temp_dir), to_stdout=True))

        assert command.output_path is None
        assert result.stats.duplicate_files == 2

    def test_extension_filter_is_applied(self, test_files, temp_dir):
        command = DuplicateReportCommand()
        params = DuplicateReportParams.from_extensions_string(str(temp_dir), "tmp", to_stdout=True)

        result = command.execute(params)

        assert result.stats.files_scanned == 1
        assert result.report == ""

    def test_invalid_root_raises(self, temp_dir):
        command = DuplicateReportCommand()

        with pytest.raises(ValueError):
            command.execute(DuplicateReportParams(root_dir=str(temp_dir / "missing")))

    def test_forwards_progress(self, test_files, temp_dir, recording_progress):
        command = DuplicateReportCommand()
        command.execute(DuplicateReportParams(root_dir=str(temp_dir)), progress=recording_progress)

        assert recording_progress.names()[0] == "start_scanning"
        assert recording_progress.names()[-1] == "end_hashing"

    def test_get_result_before_execute(self):
        with pytest.raises(RuntimeError):
            DuplicateReportCommand().get_result()

    def test_get_result_after_execute(self, temp_dir):
        command = DuplicateReportCommand()
        result = command.execute(DuplicateReportParams(root_dir=str(temp_dir)))

        assert command.get_result() is result


class TestWriteReport:
    def test_writes_utf8_file(self, temp_dir):
        path = temp_dir / "report.txt"
        result = ReportResult(report="Hash: abc\n- /tmp/фото.jpg\n- /tmp/b\n\n")

        DuplicateReportCommand.write_report(result, str(path))

        assert path.read_text(encoding="utf-8") == result.report

    def test_empty_report_creates_empty_file(self, temp_dir):
        path = temp_dir / "report.txt"

        DuplicateReportCommand.write_report(ReportResult(report=""), str(path))

        assert path.exists()
        assert path.read_text() == ""

    def test_overwrites_existing_file(self, temp_dir):
        path = temp_dir / "report.txt"
        path.write_text("old content")

        DuplicateReportCommand.write_report(ReportResult(report="new"), str(path))

        assert path.read_text() == "new"

    def test_writes_to_stream_without_path(self):
        stream = io.StringIO()

        DuplicateReportCommand.write_report(ReportResult(report="Hash: x\n"), stream=stream)

        assert stream.getvalue() == "Hash: x\n"

    def test_unwritable_path_raises(self, temp_dir):
        with pytest.raises(OSError):
            DuplicateReportCommand.write_report(
                ReportResult(report="x"), os.path.join(str(temp_dir), "missing", "r.txt"))
