"""
Conversions between bit-string hashes and other representations.

Bit strings are the canonical form. Hex strings are the compact form used in
exports and match the encoding of imagehash.ImageHash, so hashes can be
handed to code that already works with the imagehash library.
"""

from __future__ import annotations

import math

from .dependencies import np, imagehash


def is_valid_hash(value) -> bool:
    """Check that value is a non-empty string of '0' and '1' characters."""
    return isinstance(value, str) and bool(value) and set(value) <= {'0', '1'}


def _require_bits(bits: str) -> None:
    if not is_valid_hash(bits):
        raise ValueError(f"Not a binary hash string: {bits!r}")


def bits_to_hex(bits: str) -> str:
    """
    Encode a bit string as big-endian hex.

    The result is zero-padded to ceil(len(bits) / 4) digits.

    Raises:
        ValueError: If bits is not a non-empty '0'/'1' string

    Examples:
        >>> bits_to_hex('11110000')
        'f0'
        >>> bits_to_hex('00001')
        '01'
    """
    _require_bits(bits)
    width = math.ceil(len(bits) / 4)
    return format(int(bits, 2), f'0{width}x')


def hex_to_bits(hex_str: str, bit_length: int) -> str:
    """
    Decode a hex string back to a bit string of bit_length characters.

    Raises:
        ValueError: If hex_str is not hex, bit_length is not positive, or the
            value needs more than bit_length bits
    """
    if bit_length < 1:
        raise ValueError(f"bit_length must be positive, got {bit_length}")
    try:
        value = int(hex_str, 16)
    except (TypeError, ValueError):
        raise ValueError(f"Not a hex string: {hex_str!r}")
    if value < 0 or value.bit_length() > bit_length:
        raise ValueError(f"Hex value {hex_str!r} does not fit in {bit_length} bits")
    return format(value, f'0{bit_length}b')


def to_image_hash(bits: str) -> imagehash.ImageHash:
    """
    Wrap a square bit string in an imagehash.ImageHash.

    Every hash this package emits is K x K bits, so it maps onto the square
    boolean grid ImageHash expects. Subtracting two ImageHash objects gives
    the same Hamming distance as hamming_distance().

    Raises:
        ValueError: If bits is not binary or its length is not a perfect square
    """
    _require_bits(bits)
    side = math.isqrt(len(bits))
    if side * side != len(bits):
        raise ValueError(f"Hash length {len(bits)} is not a perfect square")
    grid = np.array([c == '1' for c in bits], dtype=bool).reshape(side, side)
    return imagehash.ImageHash(grid)


def from_image_hash(image_hash: imagehash.ImageHash) -> str:
    """Flatten an imagehash.ImageHash to a row-major bit string."""
    return ''.join('1' if bit else '0' for bit in image_hash.hash.flatten())


__all__ = [
    'is_valid_hash',
    'bits_to_hex',
    'hex_to_bits',
    'to_image_hash',
    'from_image_hash',
]
