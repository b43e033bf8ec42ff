"""
Tests for data models — parameter validation and record construction from stat data.
"""
import os
import stat
import pytest
from dupehash.core.models import (
    ALL_COLUMNS, Column, FileProperties, FileRecord, HashingAlgorithm, HashParams, ReportMode
)


class TestHashParams:
    """Invalid parameters must be rejected before any hashing starts."""

    def test_defaults(self, tmp_path):
        params = HashParams(input_path=str(tmp_path))

        assert params.output_path is None
        assert params.algorithm == HashingAlgorithm.SHA256
        assert params.report_mode == ReportMode.DUPLICATES
        assert params.columns == ALL_COLUMNS

    def test_empty_input_rejected(self):
        with pytest.raises(ValueError, match="cannot be empty"):
            HashParams(input_path="")

    def test_missing_input_rejected(self, tmp_path):
        with pytest.raises(ValueError, match="does not exist"):
            HashParams(input_path=str(tmp_path / "missing"))

    def test_existing_output_rejected(self, tmp_path):
        out = tmp_path / "out.txt"
        out.write_text("keep me")

        with pytest.raises(ValueError, match="already exists"):
            HashParams(input_path=str(tmp_path), output_path=str(out))

        assert out.read_text() == "keep me"

    def test_new_output_accepted(self, tmp_path):
        params = HashParams(input_path=str(tmp_path), output_path=str(tmp_path / "new.txt"))
        assert params.output_path.endswith("new.txt")

    def test_algorithm_must_be_enum(self, tmp_path):
        with pytest.raises(ValueError, match="algorithm"):
            HashParams(input_path=str(tmp_path), algorithm="sha256")

    def test_report_mode_must_be_enum(self, tmp_path):
        with pytest.raises(ValueError, match="report mode"):
            HashParams(input_path=str(tmp_path), report_mode="all")

    def test_empty_columns_rejected(self, tmp_path):
        with pytest.raises(ValueError, match="column"):
            HashParams(input_path=str(tmp_path), columns=set())

    def test_columns_normalized_to_frozenset(self, tmp_path):
        params = HashParams(input_path=str(tmp_path), columns=[Column.SIZE, Column.SIZE])
        assert params.columns == frozenset({Column.SIZE})
        hash(params)


class TestFileRecord:

    def test_from_properties_uses_stat_data(self, tmp_path):
        path = tmp_path / "doc.txt"
        path.write_bytes(b"hello")
        os.utime(path, (1_600_000_000, 1_500_000_000))
        st = path.lstat()

        record = FileRecord.from_properties(FileProperties(str(path), b"\xab" * 32), st)

        assert record.size == 5
        assert record.digest == b"\xab" * 32
        assert record.name == "doc.txt"
        assert record.directory == str(tmp_path)
        assert record.attributes == stat.filemode(st.st_mode)
        assert record.modified == 1_500_000_000
        assert record.accessed == 1_600_000_000

    def test_digest_must_be_bytes(self):
        with pytest.raises(ValueError):
            FileRecord(1, "abc", "n", "/d", "-", 0.0, 0.0, 0.0)

    def test_negative_size_rejected(self):
        with pytest.raises(ValueError):
            FileRecord(-1, b"\x00", "n", "/d", "-", 0.0, 0.0, 0.0)
