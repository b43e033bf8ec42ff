"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/walker.py
Implements file system traversal that reports what it visits instead of collecting it.
Features:
- Accepts a single file or a directory as the input path
- Walks directories depth-first with an explicit stack, entries sorted by name
- Never follows symbolic links (reported as reparse points, dangling ones as unknown objects)
- Emits one file_found callback per regular file and a diagnostic per visited object
"""

import logging
import os
import stat
from pathlib import Path
from typing import List

from dupehash.core.interfaces import DiagnosticListener, FileFoundListener
from dupehash.core.models import Diagnostic, DiagnosticEvent

logger = logging.getLogger(__name__)


class FileSystemWalker:
    """
    Walks the tree under an input path.

    Diagnostic order:
        PROCESSING_STARTED
        DIRECTORY_PROCESSING, then DIRECTORY_READ or DIRECTORY_FAILED, then the entries
        FILE_PROCESSING, file_found(...), then FILE_READ or FILE_FAILED
        *_REPARSE_POINT for symlinks, UNKNOWN_OBJECT for dangling links and anything else
        PROCESSING_COMPLETED

    Traversal is depth-first with an explicit stack, so tree depth is not bounded by
    the interpreter's recursion limit.

    An OSError raised by a file_found listener marks that file as failed and the walk
    continues. Any other exception aborts the walk.
    """

    def __init__(self):
        self._file_listeners: List[FileFoundListener] = []
        self._diagnostic_listeners: List[DiagnosticListener] = []

    def add_file_listener(self, listener: FileFoundListener) -> None:
        self._file_listeners.append(listener)

    def add_diagnostic_listener(self, listener: DiagnosticListener) -> None:
        self._diagnostic_listeners.append(listener)

    def run(self, input_path: str) -> None:
        root_path = Path(input_path)
        logger.debug(f"Starting walk: {root_path}")

        self._emit(Diagnostic.PROCESSING_STARTED, str(root_path))

        pending: List[Path] = [root_path]
        while pending:
            path = pending.pop()
            children = self._visit(path)
            # Reversed so the smallest name is popped first
            pending.extend(reversed(children))

        self._emit(Diagnostic.PROCESSING_COMPLETED, str(root_path))

        logger.debug(f"Walk completed: {root_path}")

    def _visit(self, path: Path) -> List[Path]:
        """Reports one entry and returns the children still to visit."""
        try:
            st = path.lstat()
        except OSError as e:
            # Entry vanished between listing and stat
            logger.warning(f"Could not stat {path}: {e}")
            self._emit(Diagnostic.UNKNOWN_OBJECT, str(path))
            return []

        mode = st.st_mode
        if stat.S_ISLNK(mode):
            self._visit_symlink(path)
        elif stat.S_ISDIR(mode):
            return self._visit_directory(path)
        elif stat.S_ISREG(mode):
            self._visit_file(path, st)
        else:
            logger.debug(f"Skipping unknown object: {path}")
            self._emit(Diagnostic.UNKNOWN_OBJECT, str(path))
        return []

    def _visit_symlink(self, path: Path) -> None:
        if not path.exists():
            logger.debug(f"Skipping dangling symbolic link: {path}")
            self._emit(Diagnostic.UNKNOWN_OBJECT, str(path))
            return

        if path.is_dir():
            self._emit(Diagnostic.DIRECTORY_PROCESSING, str(path))
            self._emit(Diagnostic.DIRECTORY_REPARSE_POINT, str(path))
        else:
            self._emit(Diagnostic.FILE_PROCESSING, str(path))
            self._emit(Diagnostic.FILE_REPARSE_POINT, str(path))
        logger.debug(f"Skipping symbolic link: {path}")

    def _visit_directory(self, path: Path) -> List[Path]:
        self._emit(Diagnostic.DIRECTORY_PROCESSING, str(path))
        try:
            with os.scandir(path) as it:
                names = sorted(entry.name for entry in it)
        except OSError as e:
            logger.warning(f"Could not read directory {path}: {e}")
            self._emit(Diagnostic.DIRECTORY_FAILED, str(path))
            return []
        self._emit(Diagnostic.DIRECTORY_READ, str(path))

        return [path / name for name in names]

    def _visit_file(self, path: Path, st: os.stat_result) -> None:
        self._emit(Diagnostic.FILE_PROCESSING, str(path))
        try:
            for listener in self._file_listeners:
                listener.file_found(str(path), st)
        except OSError as e:
            logger.warning(f"Failed to process {path}: {e}")
            self._emit(Diagnostic.FILE_FAILED, str(path))
            return
        self._emit(Diagnostic.FILE_READ, str(path))

    def _emit(self, kind: Diagnostic, path: str) -> None:
        event = DiagnosticEvent(kind, path)
        for listener in self._diagnostic_listeners:
            listener.diagnostic_detected(event)
