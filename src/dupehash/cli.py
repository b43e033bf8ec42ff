#!/usr/bin/env python3
"""
dupehash CLI — content hashing and duplicate file reporting.
Walks a file or directory, hashes every regular file and writes one
comma-delimited line per reported file, followed by run statistics.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import logging
import os
import sys
from contextlib import nullcontext
from typing import List, NoReturn, Optional

logging.basicConfig(
    level=logging.ERROR,
    format="%(levelname)-8s | %(name)-25s | %(message)s"
)

from dupehash.commands import HashCommand
from dupehash.core.models import ALL_COLUMNS, Column, HashingAlgorithm, HashParams, ReportMode
from dupehash.aliases import (
    ALGORITHM_FLAGS, COLUMN_ALIASES, COLUMN_CHOICES, COLUMNS_HELP_TEXT, EPILOG_TEXT, REPORT_FLAGS
)

EXIT_ERROR = 1
EXIT_INVALID_ARGUMENT = 2
EXIT_INTERRUPTED = 130


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.verbose: bool = False
        self.quiet: bool = False

        # Undecodable file names round-trip through surrogate escapes
        for stream in (sys.stdout, sys.stderr):
            if hasattr(stream, "reconfigure"):
                stream.reconfigure(encoding="utf-8", errors="surrogateescape")

    @staticmethod
    def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
        """Parse command-line arguments. Conflicting flags are rejected by argparse."""
        parser = argparse.ArgumentParser(
            prog="dupehash",
            description="dupehash — find files with identical content by hash value",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        parser.add_argument(
            "input",
            metavar="PATH",
            help="File or directory to hash"
        )
        parser.add_argument(
            "output",
            metavar="OUTPUT",
            nargs="?",
            default=None,
            help="File that receives the hash records (must not exist).\n"
                 "If omitted, records are written to the console."
        )

        report = parser.add_mutually_exclusive_group()
        report.add_argument(
            "--dupes",
            dest="report",
            action="store_const",
            const="dupes",
            help="Show the hash values for duplicate files only (default)"
        )
        report.add_argument(
            "--all",
            dest="report",
            action="store_const",
            const="all",
            help="Show the hash values for all files"
        )
        report.add_argument(
            "--stats-only",
            dest="report",
            action="store_const",
            const="stats_only",
            help="Do not write records, only the run statistics"
        )

        algorithm = parser.add_mutually_exclusive_group()
        algorithm.add_argument(
            "--sha256",
            dest="algorithm",
            action="store_const",
            const="sha256",
            help="Calculate the hash value using SHA-256 (default)"
        )
        algorithm.add_argument(
            "--md5",
            dest="algorithm",
            action="store_const",
            const="md5",
            help="Calculate the hash value using MD5"
        )
        algorithm.add_argument(
            "--xxh128",
            dest="algorithm",
            action="store_const",
            const="xxh128",
            help="Calculate the hash value using xxHash128 (fast, non-cryptographic)"
        )

        parser.add_argument(
            "--columns", "-c",
            default=None,
            type=str,
            metavar='',
            help=COLUMNS_HELP_TEXT
        )
        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Do not print the run statistics"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Enable debug logging"
        )

        return parser.parse_args(args)

    def parse_columns(self, columns_str: Optional[str]) -> frozenset[Column]:
        """Map a comma separated alias list to Column values."""
        if columns_str is None:
            return ALL_COLUMNS

        columns = set()
        for alias in columns_str.split(","):
            alias = alias.strip().lower()
            if not alias:
                continue
            if alias not in COLUMN_ALIASES:
                self.error_exit(
                    f"Unknown column: '{alias}'.\n"
                    f"Valid options: {', '.join(COLUMN_CHOICES)}",
                    EXIT_INVALID_ARGUMENT
                )
            columns.add(COLUMN_ALIASES[alias])
        return frozenset(columns)

    def create_params(self, args: argparse.Namespace) -> HashParams:
        """Create HashParams from CLI arguments."""
        report_mode = REPORT_FLAGS.get(args.report, ReportMode.DUPLICATES)
        algorithm = ALGORITHM_FLAGS.get(args.algorithm, HashingAlgorithm.SHA256)
        columns = self.parse_columns(args.columns)

        try:
            return HashParams(
                input_path=args.input,
                output_path=args.output,
                algorithm=algorithm,
                report_mode=report_mode,
                columns=columns,
            )
        except ValueError as e:
            self.error_exit(f"Invalid argument: {e}", EXIT_INVALID_ARGUMENT)

    def open_output(self, params: HashParams):
        """Output stream for records; the console unless an output file was given."""
        if params.output_path is None:
            return nullcontext(sys.stdout)
        try:
            return open(params.output_path, "x", encoding="utf-8", errors="surrogateescape")
        except FileExistsError:
            self.error_exit(f"Output file already exists: '{params.output_path}'", EXIT_INVALID_ARGUMENT)

    @staticmethod
    def error_exit(message: str, code: int = EXIT_ERROR) -> NoReturn:
        """Print error and exit."""
        print(f"Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, argv: Optional[List[str]] = None) -> None:
        """Main entry point."""
        args = self.parse_args(argv)
        self.verbose = args.verbose
        self.quiet = args.quiet

        if self.verbose:
            logging.getLogger().setLevel(logging.DEBUG)

        params = self.create_params(args)

        with self.open_output(params) as output:
            stats = HashCommand().execute(params, output)

        if not self.quiet:
            stats.dump_stats(sys.stdout)


def main() -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run()
    except KeyboardInterrupt:
        print("\nOperation cancelled by user (Ctrl+C)", file=sys.stderr)
        sys.exit(EXIT_INTERRUPTED)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"Unexpected error: {e}", file=sys.stderr)
        sys.exit(EXIT_ERROR)


if __name__ == "__main__":
    main()
