"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/statistics.py
Run statistics and record output policy.

StatisticsManager listens to both the hash registry and the walker. It counts
traversal diagnostics, counts duplicates, measures the running time between the
start and completion diagnostics, and decides which records reach the formatter
according to the report mode.
"""

import logging
import sys
import time
from typing import Callable, Optional, TextIO

from dupehash.core.formatter import DataFormatter
from dupehash.core.interfaces import HashListener, DiagnosticListener
from dupehash.core.models import Diagnostic, DiagnosticEvent, FileRecord, ReportMode
from dupehash.utils.convert_utils import ConvertUtils

logger = logging.getLogger(__name__)

_COUNTED_DIAGNOSTICS = {
    Diagnostic.FILE_PROCESSING: "files_processed",
    Diagnostic.FILE_REPARSE_POINT: "file_reparse_points",
    Diagnostic.FILE_FAILED: "files_failed",
    Diagnostic.FILE_READ: "files_read",
    Diagnostic.DIRECTORY_PROCESSING: "directories_processed",
    Diagnostic.DIRECTORY_REPARSE_POINT: "directory_reparse_points",
    Diagnostic.DIRECTORY_FAILED: "directories_failed",
    Diagnostic.DIRECTORY_READ: "directories_read",
    Diagnostic.UNKNOWN_OBJECT: "unknown_objects",
}


class StatisticsManager(HashListener, DiagnosticListener):
    """
    Counters start at zero and only ever grow. Nothing is reset; build a new
    manager for a new run.
    """

    def __init__(
            self,
            report_mode: ReportMode,
            formatter: DataFormatter,
            clock: Callable[[], float] = time.monotonic
    ):
        self._report_mode = report_mode
        self._formatter = formatter
        self._clock = clock

        self._processing_started: Optional[float] = None
        self._running_time: float = 0.0

        self._counters = {name: 0 for name in _COUNTED_DIAGNOSTICS.values()}
        self._hash_duplicates = 0

    # ----- counters -----

    @property
    def report_mode(self) -> ReportMode:
        return self._report_mode

    @property
    def files_processed(self) -> int:
        return self._counters["files_processed"]

    @property
    def file_reparse_points(self) -> int:
        return self._counters["file_reparse_points"]

    @property
    def files_failed(self) -> int:
        return self._counters["files_failed"]

    @property
    def files_read(self) -> int:
        return self._counters["files_read"]

    @property
    def directories_processed(self) -> int:
        return self._counters["directories_processed"]

    @property
    def directory_reparse_points(self) -> int:
        return self._counters["directory_reparse_points"]

    @property
    def directories_failed(self) -> int:
        return self._counters["directories_failed"]

    @property
    def directories_read(self) -> int:
        return self._counters["directories_read"]

    @property
    def unknown_objects(self) -> int:
        return self._counters["unknown_objects"]

    @property
    def hash_duplicates(self) -> int:
        return self._hash_duplicates

    @property
    def running_time(self) -> float:
        """Seconds between the start and completion diagnostics."""
        return self._running_time

    # ----- hash registry notifications -----

    def hash_calculated(self, record: FileRecord) -> None:
        if self._report_mode == ReportMode.ALL:
            self._formatter.write_record(record)

    def hash_duplicate_detected(self, duplicate: FileRecord, original: Optional[FileRecord]) -> None:
        self._hash_duplicates += 1

        if self._report_mode == ReportMode.DUPLICATES:
            if original is not None:
                self._formatter.write_record(original)
            self._formatter.write_record(duplicate)

    # ----- traversal diagnostics -----

    def diagnostic_detected(self, event: DiagnosticEvent) -> None:
        kind = event.kind
        if kind == Diagnostic.PROCESSING_STARTED:
            self._processing_started = self._clock()
            self._formatter.write_header()
        elif kind == Diagnostic.PROCESSING_COMPLETED:
            started = self._processing_started
            if started is None:
                raise AssertionError("Processing completed before it was started")
            self._running_time = self._clock() - started
            logger.debug(f"Processing completed in {self._running_time:.3f}s")
        elif kind in _COUNTED_DIAGNOSTICS:
            self._counters[_COUNTED_DIAGNOSTICS[kind]] += 1
        else:
            raise AssertionError(f"Unexpected diagnostic: {kind!r}")

    # ----- reporting -----

    def dump_stats(self, stream: Optional[TextIO] = None) -> None:
        """Writes the human-readable run summary. Does not change any counter."""
        out = stream if stream is not None else sys.stdout
        lines = [
            f"Running time:          {ConvertUtils.seconds_to_timespan(self.running_time)}",
            f"Duplicate Hashes:      {self.hash_duplicates}",
            f"Unknown Objects:       {self.unknown_objects}",
            f"Directories Processed: {self.directories_processed}",
            f"    Read:         {self.directories_read}",
            f"    Failed:       {self.directories_failed}",
            f"    ReparsePoint: {self.directory_reparse_points}",
            f"Files Processed:       {self.files_processed}",
            f"    Read:         {self.files_read}",
            f"    Failed:       {self.files_failed}",
            f"    ReparsePoint: {self.file_reparse_points}",
        ]
        out.write("\n".join(lines) + "\n")
        out.flush()
