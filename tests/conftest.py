"""
Shared fixtures for hashing pipeline tests.
Creates isolated temporary trees and in-memory sinks with controlled contents.
"""
import io
import pytest
from pathlib import Path
from typing import Dict
import sys

# Add src/ to sys.path so 'dupehash' is importable without installation
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from dupehash.core.models import FileRecord


class RecordingSink(io.StringIO):
    """StringIO that counts flush() calls."""

    def __init__(self):
        super().__init__()
        self.flush_count = 0

    def flush(self):
        self.flush_count += 1
        super().flush()

    @property
    def lines(self):
        return self.getvalue().splitlines()


class FakeClock:
    """Deterministic clock returning queued values."""

    def __init__(self, *values: float):
        self._values = list(values)

    def __call__(self) -> float:
        return self._values.pop(0)


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def make_record():
    """Factory for FileRecord with sensible defaults."""
    def _make(name="file.txt", digest=b"\x01" * 32, size=1, directory="/data",
              attributes="-rw-r--r--", created=0.0, modified=0.0, accessed=0.0):
        return FileRecord(
            size=size,
            digest=digest,
            name=name,
            directory=directory,
            attributes=attributes,
            created=created,
            modified=modified,
            accessed=accessed,
        )
    return _make


@pytest.fixture
def test_files(tmp_path) -> Dict[str, Path]:
    """
    Creates a controlled tree:
    - 3 files with content "x" (one in a subdirectory)
    - 1 file with content "y"
    """
    files = {}

    files["x1"] = tmp_path / "a_x1.txt"
    files["x2"] = tmp_path / "b_x2.txt"
    files["y"] = tmp_path / "c_y.txt"
    subdir = tmp_path / "d_sub"
    subdir.mkdir()
    files["x3"] = subdir / "x3.txt"

    files["x1"].write_bytes(b"x")
    files["x2"].write_bytes(b"x")
    files["y"].write_bytes(b"y")
    files["x3"].write_bytes(b"x")

    return files
