"""
CLI workflow orchestration for pixelprint.

Provides the CLIOrchestrator class that coordinates each subcommand from
argument parsing through final reporting.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..hashing import (
    find_image_files,
    hash_image_file,
    hash_images_parallel,
    hamming_distance,
    similarity,
    is_similar,
    rank_by_distance,
    resolve_resample,
)
from ..models import HashAlgorithm, HashResult
from ..user_config import get_user_config
from ..utils.exporters import export_results
from ..utils.validators import (
    validate_hash_params,
    validate_threshold,
)
from .arg_parser import parse_arguments
from .reporting import print_hash_report, print_comparison, print_ranking

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def setup_logging(verbose: bool = False) -> logging.Logger:
    """
    Configure logging for the CLI.

    Args:
        verbose: Enable verbose (DEBUG level) logging

    Returns:
        Configured logger instance
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    return logging.getLogger(__name__)


class CLIOrchestrator:
    """
    Orchestrates the CLI workflow.

    Parses arguments, validates them, expands directories into image files,
    then dispatches to the hash, compare or rank handler.
    """

    def __init__(self, argv=None):
        """
        Initialize the orchestrator.

        Args:
            argv: Argument list to parse instead of sys.argv
        """
        self.argv = argv
        self.logger = None
        self.args = None
        self.algorithm = None

    def run(self) -> int:
        """
        Execute the CLI workflow.

        Returns:
            Exit code: 0 on success, 1 when hashing fails or images are not
            similar, 2 on invalid arguments
        """
        self.args = parse_arguments(self.argv)
        self.logger = setup_logging(self.args.verbose)

        exit_code = self._validate_phase()
        if exit_code != EXIT_OK:
            return exit_code

        handlers = {
            'hash': self._hash_command,
            'compare': self._compare_command,
            'rank': self._rank_command,
        }
        return handlers[self.args.command]()

    def _validate_phase(self) -> int:
        workers = getattr(self.args, 'workers', None)
        is_valid, error = validate_hash_params(self.args.algorithm, self.args.precision, workers)
        if not is_valid:
            self.logger.error(error)
            return EXIT_USAGE

        try:
            resolve_resample(self.args.resample)
        except ValueError as e:
            self.logger.error(str(e))
            return EXIT_USAGE

        self.algorithm = HashAlgorithm.parse(self.args.algorithm)
        return EXIT_OK

    def _collect_files(self, paths: list[Path], recursive: bool) -> list[str]:
        """Expand directories into image files, keeping explicit file paths as given."""
        files: list[str] = []
        for path in paths:
            if path.is_dir():
                found = find_image_files(path, recursive=recursive)
                self.logger.info(f"Found {len(found):,} images in {path}")
                files.extend(found)
            else:
                files.append(str(path))
        return files

    def _hash_many(self, files: list[str]) -> list[HashResult]:
        return hash_images_parallel(
            files,
            algorithm=self.algorithm,
            precision=self.args.precision,
            max_workers=self.args.workers,
            show_progress=not self.args.no_progress,
            logger=self.logger,
            resample=self.args.resample,
        )

    def _hash_command(self) -> int:
        files = self._collect_files(self.args.paths, recursive=not self.args.no_recursive)
        if not files:
            self.logger.error("No image files found")
            return EXIT_FAILURE

        results = self._hash_many(files)
        print_hash_report(results, self.args.output_format)

        if self.args.export:
            try:
                export_results(results, self.args.export, self.args.export_format)
                self.logger.info(f"Results exported to {self.args.export}")
            except (OSError, ValueError) as e:
                self.logger.error(f"Export failed: {e}")
                return EXIT_FAILURE

        return EXIT_OK if all(r.ok for r in results) else EXIT_FAILURE

    def _compare_command(self) -> int:
        first = hash_image_file(self.args.first, self.algorithm, self.args.precision, self.args.resample)
        second = hash_image_file(self.args.second, self.algorithm, self.args.precision, self.args.resample)

        for result in (first, second):
            if not result.ok:
                self.logger.error(f"{result.path}: {result.error}")
        if not (first.ok and second.ok):
            return EXIT_USAGE

        threshold = self.args.threshold
        if threshold is None:
            threshold = int(first.bit_length * get_user_config().similarity_ratio)
        is_valid, error = validate_threshold(threshold, first.bit_length)
        if not is_valid:
            self.logger.error(error)
            return EXIT_USAGE

        similar = is_similar(first.hash_value, second.hash_value, threshold)
        print_comparison(
            first,
            second,
            hamming_distance(first.hash_value, second.hash_value),
            similarity(first.hash_value, second.hash_value),
            threshold,
            similar,
        )
        return EXIT_OK if similar else EXIT_FAILURE

    def _rank_command(self) -> int:
        query = hash_image_file(self.args.query, self.algorithm, self.args.precision, self.args.resample)
        if not query.ok:
            self.logger.error(f"{query.path}: {query.error}")
            return EXIT_USAGE

        files = self._collect_files(self.args.paths, recursive=not self.args.no_recursive)
        query_path = str(Path(query.path).resolve())
        files = [f for f in files if str(Path(f).resolve()) != query_path]
        if not files:
            self.logger.error("No candidate images found")
            return EXIT_FAILURE

        results = self._hash_many(files)
        for result in results:
            if not result.ok:
                self.logger.warning(f"Skipping {result.path}: {result.error}")

        ranking = rank_by_distance(query.hash_value, [(r.path, r.hash_value) for r in results])
        if self.args.top is not None:
            ranking = ranking[:max(0, self.args.top)]

        print_ranking(query, ranking)
        return EXIT_OK


__all__ = ['CLIOrchestrator', 'setup_logging']
