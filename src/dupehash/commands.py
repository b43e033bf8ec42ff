"""
Command orchestrator for a hashing run.
Wires walker → hasher → registry → statistics → formatter for one set of parameters.
"""
import logging
import os
import time
from typing import Callable, Optional

from dupehash.core.formatter import DataFormatter
from dupehash.core.hasher import HasherImpl, create_algorithm
from dupehash.core.interfaces import Hasher, TextSink
from dupehash.core.models import FileRecord, HashParams
from dupehash.core.registry import HashRegistry
from dupehash.core.statistics import StatisticsManager
from dupehash.core.walker import FileSystemWalker

logger = logging.getLogger(__name__)


class HashCommand:
    """
    Orchestrates one hashing run:
    1. Build the hasher for the configured algorithm
    2. Subscribe the statistics manager to the registry and the walker
    3. Walk the input path, hashing and registering every regular file

    Usage:
        params = HashParams(input_path="/data", report_mode=ReportMode.DUPLICATES)
        stats = HashCommand().execute(params, output=sys.stdout)
        stats.dump_stats()
    """

    def __init__(self, hasher: Optional[Hasher] = None, clock: Optional[Callable[[], float]] = None):
        self._hasher = hasher
        self._clock = clock or time.monotonic
        self._registry: Optional[HashRegistry] = None

    @property
    def registry(self) -> Optional[HashRegistry]:
        """Registry of the last execute() call."""
        return self._registry

    def execute(self, params: HashParams, output: TextSink) -> StatisticsManager:
        """
        Run the pipeline over params.input_path, writing records to output.

        Returns:
            The statistics manager holding the run's counters.

        Raises:
            Any non-OSError raised while processing a file aborts the run.
        """
        hasher = self._hasher or HasherImpl(create_algorithm(params.algorithm))
        logger.debug(
            f"Hashing {params.input_path} "
            f"(algorithm={params.algorithm.display_name}, report={params.report_mode.description})"
        )

        formatter = DataFormatter(output, params.columns)
        stats = StatisticsManager(params.report_mode, formatter, clock=self._clock)

        registry = HashRegistry()
        registry.add_listener(stats)
        self._registry = registry

        walker = FileSystemWalker()
        walker.add_diagnostic_listener(stats)
        walker.add_file_listener(_FileHandler(hasher, registry))
        walker.run(params.input_path)

        return stats


class _FileHandler:
    """Hashes a found file and registers the resulting record."""

    def __init__(self, hasher: Hasher, registry: HashRegistry):
        self._hasher = hasher
        self._registry = registry

    def file_found(self, path: str, st: os.stat_result) -> None:
        properties = self._hasher.process_file(path)
        self._registry.add(FileRecord.from_properties(properties, st))
