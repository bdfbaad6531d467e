"""
Hash algorithms for the hashing package.

Each algorithm consumes a preprocessed GrayscaleBuffer and returns a string
of '0'/'1' characters in row-major order:

- difference_hash: compares each pixel with its right-hand neighbour
- average_hash: compares each pixel with the integer mean intensity
- perceptual_hash: compares low-frequency DCT coefficients with their mean
"""

from __future__ import annotations

from typing import Optional

from ..config import PHASH_SAMPLE_SIZE
from ..models import GrayscaleBuffer
from .dct import dct_2d, get_dct_plan
from .dependencies import np, _logger


def _bits_to_string(bits: np.ndarray) -> str:
    """Render a boolean array as a row-major '0'/'1' string."""
    return ''.join('1' if bit else '0' for bit in bits.ravel())


def difference_hash(buffer: GrayscaleBuffer) -> Optional[str]:
    """
    Calculate the difference hash (dHash) of a grayscale buffer.

    For a buffer of (N+1) x N pixels, emits N*N bits: bit is 1 when a pixel
    is at least as bright as its right-hand neighbour.

    Args:
        buffer: Grayscale buffer, normally (precision + 1) x precision

    Returns:
        Bit string of length height * (width - 1), or None if the buffer is
        too small to compare neighbours
    """
    if buffer.width < 2 or buffer.height < 1:
        _logger.debug(f"dHash needs at least 2x1 pixels, got {buffer.width}x{buffer.height}")
        return None

    pixels = buffer.pixels
    return _bits_to_string(pixels[:, :-1] >= pixels[:, 1:])


def average_hash(buffer: GrayscaleBuffer) -> Optional[str]:
    """
    Calculate the average hash (aHash) of a grayscale buffer.

    The mean is the floor of sum / count in integer arithmetic; bit is 1 when
    a pixel is strictly brighter than that mean.

    Args:
        buffer: Grayscale buffer, normally precision x precision

    Returns:
        Bit string with one bit per pixel, or None for an empty buffer
    """
    pixel_count = buffer.pixel_count
    if pixel_count == 0:
        _logger.debug("aHash of an empty buffer is undefined")
        return None

    pixels = buffer.pixels.astype(np.int64)
    mean = int(pixels.sum()) // pixel_count
    return _bits_to_string(pixels > mean)


def perceptual_hash(buffer: GrayscaleBuffer, precision: int) -> Optional[str]:
    """
    Calculate the perceptual hash (pHash) of a 32x32 grayscale buffer.

    Steps:
    1. 2D DCT-II of the samples (rows, then columns)
    2. Take the top-left M x M block, M = min(precision, 32)
    3. Threshold = mean of that block without the DC term at (0, 0)
    4. Emit one bit per block position, DC included: 1 if coefficient > mean

    The DC term is left out of the mean only. It still gets a bit, which
    keeps hashes compatible with previously stored values.

    Args:
        buffer: Grayscale buffer of exactly 32x32 pixels
        precision: Requested precision N

    Returns:
        Bit string of length min(N, 32) ** 2, or None on invalid input or
        transform failure
    """
    if buffer.size != (PHASH_SAMPLE_SIZE, PHASH_SAMPLE_SIZE):
        _logger.debug(
            f"pHash needs a {PHASH_SAMPLE_SIZE}x{PHASH_SAMPLE_SIZE} buffer, "
            f"got {buffer.width}x{buffer.height}"
        )
        return None
    if precision < 1:
        _logger.debug(f"pHash precision must be positive, got {precision}")
        return None

    try:
        plan = get_dct_plan(PHASH_SAMPLE_SIZE)
        coefficients = dct_2d(buffer.pixels.astype(np.float32), plan=plan)
    except ValueError as e:
        _logger.debug(f"DCT failed: {e}")
        return None

    hash_size = min(precision, PHASH_SAMPLE_SIZE)
    block = coefficients[:hash_size, :hash_size]

    ac_terms = block.ravel()[1:].astype(np.float64)
    if ac_terms.size:
        mean = float(ac_terms.sum() / ac_terms.size)
    else:
        # 1x1 block: nothing left to average, the lone DC bit compares false
        mean = float('nan')

    return _bits_to_string(block > mean)


__all__ = [
    'difference_hash',
    'average_hash',
    'perceptual_hash',
]
