"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models for content hashing, duplicate tracking and run configuration.
"""

import os
import stat
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import FrozenSet, Optional


# =============================
# Enums
# =============================

class HashingAlgorithm(Enum):
    """Digest algorithm used for the whole run."""
    MD5 = "md5"
    SHA256 = "sha256"
    XXH128 = "xxh128"

    @property
    def display_name(self) -> str:
        """Human-readable name for help text and logs."""
        mapping = {
            HashingAlgorithm.MD5: "MD5",
            HashingAlgorithm.SHA256: "SHA-256",
            HashingAlgorithm.XXH128: "xxHash128",
        }
        return mapping.get(self, self.value)

    def __repr__(self) -> str:
        return self.value


class ReportMode(Enum):
    """
    Selects which hashed files are written as records.
    """
    NONE = "none"
    DUPLICATES = "dupes"
    ALL = "all"

    @property
    def description(self) -> str:
        mapping = {
            ReportMode.NONE: "Statistics only, no records",
            ReportMode.DUPLICATES: "Records for duplicate files only",
            ReportMode.ALL: "Records for every hashed file",
        }
        return mapping.get(self, self.value)

    def __repr__(self) -> str:
        return self.value


class Column(Enum):
    """Output columns, declared in the order they are written."""
    SIZE = "Size"
    HASH_VALUE = "HashValue"
    FILE_NAME = "FileName"
    DIRECTORY_NAME = "DirectoryName"
    ATTRIBUTES = "Attributes"
    CREATED = "Created"
    MODIFIED = "Modified"
    ACCESSED = "Accessed"

    @classmethod
    def get_all(cls):
        return [cls.SIZE, cls.HASH_VALUE, cls.FILE_NAME, cls.DIRECTORY_NAME,
                cls.ATTRIBUTES, cls.CREATED, cls.MODIFIED, cls.ACCESSED]


ALL_COLUMNS: FrozenSet[Column] = frozenset(Column)


class Diagnostic(Enum):
    """Traversal notifications consumed by the statistics manager."""
    PROCESSING_STARTED = "processing-started"
    FILE_PROCESSING = "file-processing"
    FILE_REPARSE_POINT = "file-reparse-point"
    FILE_FAILED = "file-failed"
    FILE_READ = "file-read"
    DIRECTORY_PROCESSING = "directory-processing"
    DIRECTORY_REPARSE_POINT = "directory-reparse-point"
    DIRECTORY_FAILED = "directory-failed"
    DIRECTORY_READ = "directory-read"
    UNKNOWN_OBJECT = "unknown-object"
    PROCESSING_COMPLETED = "processing-completed"


# ======================
#  Core Data Models
# ======================

@dataclass(frozen=True)
class DiagnosticEvent:
    kind: Diagnostic
    path: Optional[str] = None


@dataclass(frozen=True)
class FileProperties:
    """
    Result of hashing one file: the path that was passed in, unchanged,
    and the digest of its full content.
    """
    path: str
    digest: bytes


@dataclass(frozen=True)
class FileRecord:
    """
    Immutable per-file data passed from the registry to the formatter.
    Timestamps are POSIX seconds.
    """
    size: int
    digest: bytes
    name: str
    directory: str
    attributes: str
    created: float
    modified: float
    accessed: float

    def __post_init__(self):
        if not isinstance(self.digest, bytes):
            raise ValueError("Field 'digest' must be bytes")
        if self.size < 0:
            raise ValueError("Size cannot be negative")

    @classmethod
    def from_properties(cls, properties: FileProperties, st: os.stat_result) -> 'FileRecord':
        """Builds a record from digest engine output plus the file's stat data."""
        path = Path(properties.path)
        created = getattr(st, "st_birthtime", None)
        if created is None:
            created = st.st_ctime
        return cls(
            size=st.st_size,
            digest=properties.digest,
            name=path.name,
            directory=str(path.parent),
            attributes=stat.filemode(st.st_mode),
            created=created,
            modified=st.st_mtime,
            accessed=st.st_atime,
        )

    def __repr__(self):
        return f"<FileRecord name={self.name}, size={self.size}, digest={self.digest.hex()}>"


"""
DTO for hashing run parameters with built-in validation.
Immutable: built once from CLI input and shared by every component.
"""

@dataclass(frozen=True)
class HashParams:
    """Parameters for a hashing run, validated on creation."""
    input_path: str
    output_path: Optional[str] = None
    algorithm: HashingAlgorithm = HashingAlgorithm.SHA256
    report_mode: ReportMode = ReportMode.DUPLICATES
    columns: FrozenSet[Column] = field(default=ALL_COLUMNS)

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        if not self.input_path:
            raise ValueError("Input path cannot be empty")

        if not os.path.lexists(self.input_path):
            raise ValueError(f"Input path does not exist: '{self.input_path}'")

        if self.output_path is not None and os.path.lexists(self.output_path):
            raise ValueError(f"Output file already exists: '{self.output_path}'")

        if not isinstance(self.algorithm, HashingAlgorithm):
            raise ValueError(f"Unsupported hashing algorithm: {self.algorithm!r}")

        if not isinstance(self.report_mode, ReportMode):
            raise ValueError(f"Unsupported report mode: {self.report_mode!r}")

        # Normalize columns to a frozenset so the params stay hashable
        columns = frozenset(self.columns)
        if not columns:
            raise ValueError("At least one output column is required")
        if not all(isinstance(c, Column) for c in columns):
            raise ValueError("Columns must be Column values")
        object.__setattr__(self, "columns", columns)
