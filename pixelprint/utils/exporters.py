"""
Export functionality for pixelprint.

Provides functions to export hash results to TXT, CSV and JSON files.
"""

from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import TextIO

from ..models import HashResult

EXPORT_FORMATS = ('txt', 'csv', 'json')


def _export_txt(results: list[HashResult], file_handle: TextIO) -> None:
    """
    Export hash results to TXT format, one line per file.

    Failed files are listed with their error after the hashes.
    """
    file_handle.write("IMAGE HASH REPORT\n")
    file_handle.write("=" * 70 + "\n\n")

    for result in results:
        if result.ok:
            file_handle.write(
                f"{result.hex_value}  {result.algorithm.value}/{result.precision}  {result.path}\n"
            )

    failed = [r for r in results if not r.ok]
    if failed:
        file_handle.write("\n\nFAILED\n")
        file_handle.write("-" * 70 + "\n")
        for result in failed:
            file_handle.write(f"  {result.path}: {result.error}\n")


def _export_csv(results: list[HashResult], file_handle: TextIO) -> None:
    """
    Export hash results to CSV format.

    Notes:
        CSV includes: path, algorithm, precision, bits, hash, hex, error
    """
    writer = csv.writer(file_handle, lineterminator='\n')
    writer.writerow(['path', 'algorithm', 'precision', 'bits', 'hash', 'hex', 'error'])
    for result in results:
        writer.writerow([
            result.path,
            result.algorithm.value,
            result.precision,
            result.bit_length,
            result.hash_value or '',
            result.hex_value,
            result.error or '',
        ])


def _export_json(results: list[HashResult], file_handle: TextIO) -> None:
    json.dump([r.to_dict() for r in results], file_handle, indent=2)
    file_handle.write("\n")


def export_results(
    results: list[HashResult],
    output_path: Path,
    export_format: str = 'txt'
) -> None:
    """
    Export hash results to a file.

    Args:
        results: Hash results to write
        output_path: Path to output file
        export_format: 'txt', 'csv' or 'json'. Default: 'txt'

    Raises:
        ValueError: If export_format is not supported
        OSError: If file cannot be written
    """
    if export_format not in EXPORT_FORMATS:
        raise ValueError(
            f"Unsupported export format: {export_format}. Use one of: {', '.join(EXPORT_FORMATS)}."
        )

    with open(output_path, 'w', encoding='utf-8', newline='') as f:
        if export_format == 'txt':
            _export_txt(results, f)
        elif export_format == 'csv':
            _export_csv(results, f)
        else:
            _export_json(results, f)


__all__ = ['EXPORT_FORMATS', 'export_results']
