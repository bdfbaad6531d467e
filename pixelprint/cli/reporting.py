"""
Report formatting and display for the CLI interface.

Provides functions to print hash, comparison and ranking results in a
human-readable format.
"""

from __future__ import annotations

import json

from ..models import HashResult


def _print_section_header(title: str) -> None:
    """Print a section header with divider lines."""
    print("\n" + "-" * 70)
    print(title)
    print("-" * 70)


def _format_hash(result: HashResult, output_format: str) -> str:
    if output_format == 'hex':
        return result.hex_value
    return result.hash_value or ''


def print_hash_report(results: list[HashResult], output_format: str = 'bits') -> None:
    """
    Print hashes, one line per file, followed by any failures.

    Args:
        results: Hash results in display order
        output_format: 'bits', 'hex' or 'json'

    Notes:
        - 'json' prints a single JSON array and nothing else, for piping
        - Failures are listed after the hashes with their error message
    """
    if output_format == 'json':
        print(json.dumps([r.to_dict() for r in results], indent=2))
        return

    for result in results:
        if result.ok:
            print(f"{_format_hash(result, output_format)}  {result.path}")

    failed = [r for r in results if not r.ok]
    if failed:
        _print_section_header(f"FAILED ({len(failed)} files)")
        for result in failed:
            print(f"  {result.path}: {result.error}")


def print_comparison(
    first: HashResult,
    second: HashResult,
    distance: int,
    similarity_score: float,
    threshold: int,
    similar: bool,
) -> None:
    """
    Print a two-image comparison.

    Args:
        first: Result for the first image
        second: Result for the second image
        distance: Hamming distance between the two hashes
        similarity_score: Fraction of matching bits
        threshold: Maximum distance reported as similar
        similar: Whether the pair is within the threshold
    """
    verdict = "SIMILAR" if similar else "DIFFERENT"

    print(f"{first.algorithm.label}, precision {first.precision} ({first.bit_length} bits)")
    print(f"  {first.hex_value}  {first.path}")
    print(f"  {second.hex_value}  {second.path}")
    print(f"Hamming distance: {distance} (threshold {threshold})")
    print(f"Similarity: {similarity_score:.1%}")
    print(f"Verdict: {verdict}")


def print_ranking(query: HashResult, ranking: list[tuple[str, int]]) -> None:
    """
    Print candidates ordered by distance to the query image.

    Args:
        query: Result for the query image
        ranking: (path, distance) pairs, closest first
    """
    _print_section_header(f"CLOSEST TO {query.path}")
    bits = query.bit_length
    for position, (path, distance) in enumerate(ranking, 1):
        print(f"{position:>4}. {distance:>5} / {bits}  {path}")


__all__ = [
    'print_hash_report',
    'print_comparison',
    'print_ranking',
]
