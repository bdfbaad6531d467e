"""
Input validation for pixelprint.

Provides validators for hashing parameters and file accessibility. Each
returns an (is_valid, error_message) tuple so callers can report problems
without exceptions.
"""

from __future__ import annotations

import os
from typing import Optional

from ..config import PHASH_SAMPLE_SIZE
from ..models import HashAlgorithm


def validate_file_accessible(filepath: str) -> tuple[bool, str]:
    """
    Validate that a file exists and is readable.

    Args:
        filepath: Path to validate

    Returns:
        Tuple of (is_valid, error_message)
        - (True, "") if file is accessible
        - (False, error_message) if file is not accessible

    Examples:
        >>> validate_file_accessible('/nonexistent/file.jpg')
        (False, 'File does not exist')
    """
    if not os.path.exists(filepath):
        return False, "File does not exist"

    if not os.path.isfile(filepath):
        return False, "Path is not a file"

    if not os.access(filepath, os.R_OK):
        return False, "File is not readable (permission denied)"

    return True, ""


def validate_algorithm(algorithm) -> tuple[bool, str]:
    """
    Validate an algorithm name.

    Examples:
        >>> validate_algorithm('phash')
        (True, '')
        >>> validate_algorithm('md5')[0]
        False
    """
    try:
        HashAlgorithm.parse(algorithm)
        return True, ""
    except ValueError as e:
        return False, str(e)


def validate_precision(precision) -> tuple[bool, str]:
    """
    Validate a hash precision N.

    Examples:
        >>> validate_precision(8)
        (True, '')
        >>> validate_precision(0)
        (False, 'Precision must be at least 1')
    """
    if isinstance(precision, bool):
        return False, "Precision must be an integer"
    try:
        precision = int(precision)
    except (ValueError, TypeError):
        return False, "Precision must be an integer"
    if precision < 1:
        return False, "Precision must be at least 1"
    return True, ""


def expected_bit_length(algorithm, precision: int) -> int:
    """
    Number of bits a hash has for an algorithm and precision.

    Examples:
        >>> expected_bit_length('dhash', 8)
        64
        >>> expected_bit_length('phash', 40)
        1024
    """
    algorithm = HashAlgorithm.parse(algorithm)
    if algorithm is HashAlgorithm.PERCEPTUAL:
        precision = min(precision, PHASH_SAMPLE_SIZE)
    return precision * precision


def validate_threshold(threshold, bit_length: int) -> tuple[bool, str]:
    """
    Validate a Hamming-distance threshold against the hash length.

    Args:
        threshold: Maximum number of differing bits (0..bit_length)
        bit_length: Length of the hashes being compared

    Examples:
        >>> validate_threshold(10, 64)
        (True, '')
        >>> validate_threshold(100, 64)
        (False, 'Threshold must be between 0 and 64')
    """
    try:
        threshold = int(threshold)
    except (ValueError, TypeError):
        return False, "Threshold must be an integer"
    if not 0 <= threshold <= bit_length:
        return False, f"Threshold must be between 0 and {bit_length}"
    return True, ""


def validate_hash_params(
    algorithm,
    precision,
    workers: Optional[int] = None,
) -> tuple[bool, str]:
    """
    Validate all hashing parameters.

    Args:
        algorithm: Algorithm name or HashAlgorithm
        precision: Hash precision N
        workers: Number of worker threads (optional)

    Returns:
        Tuple of (is_valid, error_message)
    """
    is_valid, error = validate_algorithm(algorithm)
    if not is_valid:
        return False, error

    is_valid, error = validate_precision(precision)
    if not is_valid:
        return False, error

    if workers is not None:
        try:
            workers = int(workers)
            if not 1 <= workers <= 32:
                return False, "Workers must be between 1 and 32"
        except (ValueError, TypeError):
            return False, "Workers must be an integer"

    return True, ""


__all__ = [
    'validate_file_accessible',
    'validate_algorithm',
    'validate_precision',
    'expected_bit_length',
    'validate_threshold',
    'validate_hash_params',
]
