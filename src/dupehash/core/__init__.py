"""
Core hashing engine — hasher, registry, statistics, formatter and walker.

This package contains the whole duplicate detection pipeline:
- HasherImpl + algorithm implementations: streaming full-content digests
- HashRegistry: first-seen tracking and duplicate notifications
- StatisticsManager: diagnostic counters, running time and record output policy
- DataFormatter: comma-delimited record lines with control character escaping
- FileSystemWalker: tree traversal emitting file and diagnostic notifications
- Models: FileRecord, HashParams and the enums they use

All components are pure Python and synchronous.
"""

from .hasher import (
    HasherImpl, Sha256AlgorithmImpl, Md5AlgorithmImpl, XXHash128AlgorithmImpl, create_algorithm)
from .registry import HashRegistry, FirstSeen, AlreadyDuplicated, ALREADY_DUPLICATED
from .statistics import StatisticsManager
from .formatter import DataFormatter, encode_control_characters
from .walker import FileSystemWalker
from .models import (
    FileRecord, FileProperties, HashParams, HashingAlgorithm, ReportMode, Column, ALL_COLUMNS,
    Diagnostic, DiagnosticEvent)

__all__ = [
    "HasherImpl",
    "Sha256AlgorithmImpl",
    "Md5AlgorithmImpl",
    "XXHash128AlgorithmImpl",
    "create_algorithm",
    "HashRegistry",
    "FirstSeen",
    "AlreadyDuplicated",
    "ALREADY_DUPLICATED",
    "StatisticsManager",
    "DataFormatter",
    "encode_control_characters",
    "FileSystemWalker",
    "FileRecord",
    "FileProperties",
    "HashParams",
    "HashingAlgorithm",
    "ReportMode",
    "Column",
    "ALL_COLUMNS",
    "Diagnostic",
    "DiagnosticEvent",
]
