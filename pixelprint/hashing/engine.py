"""
Hash computation entry points.

compute_hash() is the core operation: pick the preprocessing grid for the
algorithm, reduce the image to grayscale at that size, and run the algorithm.
Every failure (bad parameters, resize or conversion errors, transform
errors) is logged and reported as None rather than raised.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Union

from ..config import DEFAULT_PRECISION, HEIF_EXTENSIONS
from ..models import HashAlgorithm, HashResult
from ..utils.validators import validate_file_accessible
from .algorithms import average_hash, difference_hash, perceptual_hash
from .dependencies import Image, HAS_HEIF_SUPPORT, _logger
from .preprocess import preprocess_for_hashing, target_size


def _validate_precision(precision) -> bool:
    return isinstance(precision, int) and not isinstance(precision, bool) and precision >= 1


def compute_hash(
    img: Image.Image,
    algorithm: Union[HashAlgorithm, str] = HashAlgorithm.DIFFERENCE,
    precision: int = DEFAULT_PRECISION,
    resample: Optional[str] = None,
) -> Optional[str]:
    """
    Compute the perceptual fingerprint of a decoded image.

    Args:
        img: Decoded PIL image
        algorithm: HashAlgorithm or its name ('dhash', 'ahash', 'phash')
        precision: N; dHash/aHash emit N*N bits, pHash min(N, 32)**2 bits
        resample: Resampling filter name (default from user config)

    Returns:
        Bit string of '0'/'1' characters, or None if hashing failed

    Examples:
        >>> img = Image.new('RGB', (100, 100), color='red')
        >>> len(compute_hash(img, 'dhash', 8))
        64
    """
    try:
        algorithm = HashAlgorithm.parse(algorithm)
    except ValueError as e:
        _logger.warning(str(e))
        return None

    if not _validate_precision(precision):
        _logger.warning(f"Precision must be a positive integer, got {precision!r}")
        return None

    width, height = target_size(algorithm, precision)

    try:
        buffer = preprocess_for_hashing(img, width, height, resample=resample)
        if buffer is None:
            return None

        if algorithm is HashAlgorithm.DIFFERENCE:
            return difference_hash(buffer)
        if algorithm is HashAlgorithm.AVERAGE:
            return average_hash(buffer)
        return perceptual_hash(buffer, precision)
    except Exception as e:
        _logger.debug(f"{algorithm.label} computation failed: {e}")
        return None


def _open_and_hash(
    filepath: str,
    algorithm: HashAlgorithm,
    precision: int,
    resample: Optional[str],
) -> tuple[Optional[str], Optional[str]]:
    """Return (hash, error) for one file."""
    is_accessible, error = validate_file_accessible(filepath)
    if not is_accessible:
        return None, error

    ext = os.path.splitext(filepath)[1].lower()
    if ext in HEIF_EXTENSIONS and not HAS_HEIF_SUPPORT:
        return None, "HEIC/HEIF support not installed (pip install pillow-heif)"

    try:
        with Image.open(filepath) as img:
            # Force load to detect truncated/corrupt images early
            img.load()
            hash_value = compute_hash(img, algorithm, precision, resample=resample)
    except Exception as e:
        _logger.debug(f"Could not decode {filepath}: {e}")
        return None, f"Cannot decode image: {e}"

    if hash_value is None:
        return None, f"{algorithm.label} computation failed"
    return hash_value, None


def hash_image_file(
    filepath: str | Path,
    algorithm: Union[HashAlgorithm, str] = HashAlgorithm.DIFFERENCE,
    precision: int = DEFAULT_PRECISION,
    resample: Optional[str] = None,
) -> HashResult:
    """
    Hash an image file and record the outcome.

    Args:
        filepath: Path to the image
        algorithm: HashAlgorithm or its name
        precision: Hash precision N
        resample: Resampling filter name (default from user config)

    Returns:
        HashResult with hash_value set, or error describing the failure
    """
    filepath = str(filepath)
    try:
        algorithm = HashAlgorithm.parse(algorithm)
    except ValueError as e:
        return HashResult(path=filepath, precision=precision, error=str(e))

    result = HashResult(path=filepath, algorithm=algorithm, precision=precision)
    if not _validate_precision(precision):
        result.error = f"Precision must be a positive integer, got {precision!r}"
        return result

    result.hash_value, result.error = _open_and_hash(filepath, algorithm, precision, resample)
    if result.error:
        _logger.debug(f"Hashing {filepath} failed: {result.error}")
    return result


def compute_hash_from_file(
    filepath: str | Path,
    algorithm: Union[HashAlgorithm, str] = HashAlgorithm.DIFFERENCE,
    precision: int = DEFAULT_PRECISION,
    resample: Optional[str] = None,
) -> Optional[str]:
    """
    Open an image file with Pillow and compute its hash.

    Returns:
        Bit string, or None if the file cannot be read, decoded or hashed
    """
    return hash_image_file(filepath, algorithm, precision, resample=resample).hash_value


__all__ = [
    'compute_hash',
    'compute_hash_from_file',
    'hash_image_file',
]
