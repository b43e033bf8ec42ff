"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the hashing pipeline.
These protocols enforce structural typing using Python's `typing.Protocol` so that
components can be wired together (and replaced in tests) without inheritance.

Key Components:
---------------
- HashAlgorithm: Standardized interface for streaming hash functions (SHA-256, MD5, xxHash).
- Hasher: Interface for computing the full content digest of one file.
- HashListener: Receives hash registry notifications.
- DiagnosticListener: Receives traversal diagnostics.
- FileFoundListener: Receives one callback per regular file found by the walker.
- TextSink: Minimal writable text stream used by the formatter.
"""

import os
from typing import Protocol, Optional
from dupehash.core.models import FileRecord, FileProperties, DiagnosticEvent


# ===== Interfaces =====

class HashObject(Protocol):
    def update(self, data: bytes) -> None: ...
    def digest(self) -> bytes: ...


class HashAlgorithm(Protocol):
    """
    Interface for generic hash algorithms.

    Allows plugging in different hashing functions like SHA-256, MD5, or xxHash
    without affecting the rest of the pipeline.
    """
    name: str
    digest_size: int

    def new(self) -> HashObject:
        """Returns a fresh incremental hash object."""
        ...


class Hasher(Protocol):
    """Interface for hashing the full content of a file."""
    def process_file(self, path: str) -> FileProperties: ...


class HashListener(Protocol):
    """
    Receives notifications from the hash registry.
    Called synchronously, in order, before HashRegistry.add() returns.
    """
    def hash_calculated(self, record: FileRecord) -> None:
        ...

    def hash_duplicate_detected(self, duplicate: FileRecord, original: Optional[FileRecord]) -> None:
        ...


class DiagnosticListener(Protocol):
    def diagnostic_detected(self, event: DiagnosticEvent) -> None:
        ...


class FileFoundListener(Protocol):
    def file_found(self, path: str, st: os.stat_result) -> None:
        ...


class TextSink(Protocol):
    def write(self, text: str) -> int: ...
    def flush(self) -> None: ...
