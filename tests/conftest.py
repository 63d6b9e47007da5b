"""
Shared fixtures for duplicate report tests.
Creates isolated temporary directories with controlled test files.
"""
import pytest
import tempfile
from pathlib import Path
from typing import Dict
import sys

# Add src/ to sys.path so 'dupreport' is importable without installation
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))


@pytest.fixture
def temp_dir():
    """Creates isolated temporary directory, auto-cleanup after test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        # resolve() so paths compare equal to what the scanner reports on macOS (/private/var)
        yield Path(tmpdir).resolve()


class RecordingProgress:
    """ProgressReporter that records every lifecycle call."""

    def __init__(self):
        self.events = []

    def start_scanning(self):
        self.events.append(("start_scanning",))

    def update_scanning(self, files_found):
        self.events.append(("update_scanning", files_found))

    def end_scanning(self, total_files):
        self.events.append(("end_scanning", total_files))

    def start_hashing(self, total_files):
        self.events.append(("start_hashing", total_files))

    def update_hashing(self, completed, total, current_file=None):
        self.events.append(("update_hashing", completed, total, current_file))

    def end_hashing(self):
        self.events.append(("end_hashing",))

    def names(self):
        return [event[0] for event in self.events]


@pytest.fixture
def recording_progress():
    return RecordingProgress()


@pytest.fixture
def test_files(temp_dir) -> Dict[str, Path]:
    """
    Creates controlled test files for duplicate detection scenarios:
    - 2 identical files + 1 identical copy in a subdirectory (1KB of 'A')
    - 2 identical files (2KB of 'B')
    - 2 unique files, one of them sharing a size with the 'A' group
    - 1 file with .tmp extension and 'A' content
    """
    files = {}

    # Duplicate set #1 (1KB of 'A')
    content_a = b"A" * 1024
    files["dup1_a"] = temp_dir / "dup1_a.txt"
    files["dup1_b"] = temp_dir / "dup1_b.txt"
    files["dup1_a"].write_bytes(content_a)
    files["dup1_b"].write_bytes(content_a)

    # Duplicate pair #2 (2KB of 'B')
    content_b = b"B" * 2048
    files["dup2_a"] = temp_dir / "dup2_a.txt"
    files["dup2_b"] = temp_dir / "dup2_b.txt"
    files["dup2_a"].write_bytes(content_b)
    files["dup2_b"].write_bytes(content_b)

    # Unique files: same size as the 'A' group but different content, and a unique size
    files["same_size"] = temp_dir / "same_size.txt"
    files["same_size"].write_bytes(b"C" * 1024)
    files["unique"] = temp_dir / "unique.txt"
    files["unique"].write_bytes(b"D" * 2500)

    # Other extension with duplicate content
    files["other_ext"] = temp_dir / "copy.tmp"
    files["other_ext"].write_bytes(content_a)

    # Subdirectory with a duplicate
    subdir = temp_dir / "subdir"
    subdir.mkdir()
    files["sub_dup"] = subdir / "dup_in_subdir.txt"
    files["sub_dup"].write_bytes(content_a)

    return files
