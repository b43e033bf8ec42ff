"""
Integration tests for HashCommand — the full walker → hasher → registry → statistics → formatter pipeline.
"""
import hashlib
import pytest
from conftest import FakeClock, RecordingSink
from dupehash import HashCommand, HashParams, HashingAlgorithm, ReportMode
from dupehash.core.models import Column, FileProperties


def run(params, clock=None):
    sink = RecordingSink()
    stats = HashCommand(clock=clock or FakeClock(0.0, 1.0)).execute(params, sink)
    return stats, sink


class TestHashCommand:
    """Test command orchestration over a real directory tree."""

    def test_duplicates_mode_reports_duplicate_groups(self, test_files, tmp_path):
        """
        Three files with "x" and one with "y":
        the first "x" is written with its first duplicate, the third alone, "y" never.
        """
        params = HashParams(input_path=str(tmp_path), columns={Column.FILE_NAME})

        stats, sink = run(params)

        assert sink.lines == ['"FileName",', '"a_x1.txt",', '"b_x2.txt",', '"x3.txt",']
        assert stats.hash_duplicates == 2
        assert stats.files_processed == 4
        assert stats.files_read == 4
        assert stats.files_failed == 0
        assert stats.directories_processed == 2
        assert stats.directories_read == 2

    def test_all_mode_writes_every_file(self, test_files, tmp_path):
        params = HashParams(
            input_path=str(tmp_path),
            report_mode=ReportMode.ALL,
            columns={Column.FILE_NAME},
        )

        stats, sink = run(params)

        assert sink.lines == [
            '"FileName",', '"a_x1.txt",', '"b_x2.txt",', '"c_y.txt",', '"x3.txt",'
        ]
        assert stats.hash_duplicates == 2

    def test_none_mode_writes_only_header(self, test_files, tmp_path):
        params = HashParams(input_path=str(tmp_path), report_mode=ReportMode.NONE)

        stats, sink = run(params)

        assert len(sink.lines) == 1
        assert sink.lines[0].startswith("Size,HashValue,")
        assert stats.hash_duplicates == 2

    def test_full_record_carries_digest_and_directory(self, test_files, tmp_path):
        params = HashParams(
            input_path=str(tmp_path),
            algorithm=HashingAlgorithm.MD5,
            columns={Column.SIZE, Column.HASH_VALUE, Column.DIRECTORY_NAME},
        )

        _, sink = run(params)

        expected_hash = hashlib.md5(b"x").hexdigest().upper()
        assert sink.lines[1] == f'1,{expected_hash},"{tmp_path}",'
        assert sink.lines[3] == f'1,{expected_hash},"{tmp_path / "d_sub"}",'

    def test_running_time_from_injected_clock(self, test_files, tmp_path):
        params = HashParams(input_path=str(tmp_path), report_mode=ReportMode.NONE)

        stats, _ = run(params, clock=FakeClock(50.0, 52.0))

        assert stats.running_time == pytest.approx(2.0)

    def test_single_file_input(self, test_files):
        params = HashParams(input_path=str(test_files["y"]), report_mode=ReportMode.ALL,
                            columns={Column.FILE_NAME})

        stats, sink = run(params)

        assert sink.lines == ['"FileName",', '"c_y.txt",']
        assert stats.directories_processed == 0
        assert stats.files_read == 1

    def test_registry_exposed_after_execute(self, test_files, tmp_path):
        command = HashCommand(clock=FakeClock(0.0, 0.0))
        command.execute(HashParams(input_path=str(tmp_path)), RecordingSink())

        assert len(command.registry) == 2

    def test_hash_failure_counted_and_run_continues(self, test_files, tmp_path):
        """An unreadable file is reported as failed; the others are still hashed."""

        class FlakyHasher:
            def process_file(self, path):
                if path.endswith("b_x2.txt"):
                    raise PermissionError(path)
                with open(path, "rb") as f:
                    return FileProperties(path, hashlib.sha256(f.read()).digest())

        params = HashParams(input_path=str(tmp_path), columns={Column.FILE_NAME})
        sink = RecordingSink()

        stats = HashCommand(hasher=FlakyHasher(), clock=FakeClock(0.0, 0.0)).execute(params, sink)

        assert stats.files_failed == 1
        assert stats.files_read == 3
        assert stats.hash_duplicates == 1
        assert sink.lines == ['"FileName",', '"a_x1.txt",', '"x3.txt",']
