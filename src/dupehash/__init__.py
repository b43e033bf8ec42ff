"""
dupehash — find files with identical content by hash value.

Core features:
- Full-content digests with SHA-256 (default), MD5 or xxHash128
- Duplicate detection with synchronous notifications (original, then duplicate)
- Comma-delimited record output with control character escaping
- Run statistics for every traversed file and directory
"""

# Get version
try:
    from importlib.metadata import version as _version
    __version__ = _version("dupehash")
except Exception:
    from pathlib import Path

    try:
        import tomllib  # Python 3.11+
    except ImportError:
        import tomli as tomllib  # Python < 3.11: pip install tomli

    with open(Path(__file__).resolve().parents[2] / "pyproject.toml", "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

# Public API — only what users should import directly
from dupehash.commands import HashCommand
from dupehash.core import (
    DataFormatter, FileRecord, HashingAlgorithm, HashParams, HashRegistry,
    ReportMode, StatisticsManager, Column
)
from dupehash.utils.convert_utils import ConvertUtils

__all__ = [
    "HashCommand",
    "DataFormatter",
    "FileRecord",
    "HashingAlgorithm",
    "HashParams",
    "HashRegistry",
    "ReportMode",
    "StatisticsManager",
    "Column",
    "ConvertUtils",
    "__version__",
]
