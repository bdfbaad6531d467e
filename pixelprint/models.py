"""
Data models for pixelprint.

Contains the algorithm enumeration, the grayscale sample buffer consumed by
the hash algorithms, and the per-file result record used by batch hashing.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union
import os

import numpy as np


class HashAlgorithm(Enum):
    """
    Supported perceptual hash algorithms.

    The value is the short name used on the command line and in exports.
    """
    DIFFERENCE = 'dhash'
    AVERAGE = 'ahash'
    PERCEPTUAL = 'phash'

    @classmethod
    def parse(cls, value: Union['HashAlgorithm', str]) -> 'HashAlgorithm':
        """
        Resolve an algorithm from a member, its value or its name.

        Args:
            value: HashAlgorithm, 'dhash'/'ahash'/'phash', or a member name

        Returns:
            The matching HashAlgorithm

        Raises:
            ValueError: If value does not name a known algorithm

        Examples:
            >>> HashAlgorithm.parse('pHash')
            <HashAlgorithm.PERCEPTUAL: 'phash'>
            >>> HashAlgorithm.parse('average')
            <HashAlgorithm.AVERAGE: 'ahash'>
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if key in (member.value, member.name.lower()):
                    return member
        raise ValueError(
            f"Unknown hash algorithm: {value!r}. "
            f"Use one of: {', '.join(m.value for m in cls)}"
        )

    @property
    def label(self) -> str:
        """Human-readable algorithm name."""
        return {
            HashAlgorithm.DIFFERENCE: 'Difference hash',
            HashAlgorithm.AVERAGE: 'Average hash',
            HashAlgorithm.PERCEPTUAL: 'Perceptual hash',
        }[self]


@dataclass(frozen=True, eq=False)
class GrayscaleBuffer:
    """
    Immutable row-major grid of 8-bit intensity samples.

    Attributes:
        width: Number of columns
        height: Number of rows
        pixels: uint8 array of shape (height, width), read-only
    """
    width: int
    height: int
    pixels: np.ndarray = field(repr=False)

    def __post_init__(self):
        pixels = np.array(self.pixels, dtype=np.uint8)
        if pixels.ndim != 2 or pixels.shape != (self.height, self.width):
            raise ValueError(
                f"Pixel array shape {pixels.shape} does not match "
                f"{self.width}x{self.height}"
            )
        pixels.setflags(write=False)
        object.__setattr__(self, 'pixels', pixels)

    @classmethod
    def from_array(cls, pixels) -> 'GrayscaleBuffer':
        """Build a buffer from any 2D array-like of intensities."""
        array = np.asarray(pixels, dtype=np.uint8)
        if array.ndim != 2:
            raise ValueError(f"Expected a 2D array, got {array.ndim} dimensions")
        return cls(width=array.shape[1], height=array.shape[0], pixels=array)

    @property
    def size(self) -> tuple[int, int]:
        """Return (width, height)."""
        return self.width, self.height

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    def __eq__(self, other):
        if not isinstance(other, GrayscaleBuffer):
            return False
        return self.size == other.size and np.array_equal(self.pixels, other.pixels)

    def __hash__(self):
        return hash((self.width, self.height, self.pixels.tobytes()))


@dataclass
class HashResult:
    """
    Outcome of hashing one image file.

    Attributes:
        path: Path of the hashed file
        algorithm: Algorithm used
        precision: Requested precision N
        hash_value: Bit string, or None if hashing failed
        error: Failure reason when hash_value is None
    """
    path: str
    algorithm: HashAlgorithm = HashAlgorithm.DIFFERENCE
    precision: int = 8
    hash_value: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        """True if a hash was produced."""
        return self.hash_value is not None and self.error is None

    @property
    def filename(self) -> str:
        """Return just the filename portion of the path."""
        return os.path.basename(self.path)

    @property
    def bit_length(self) -> int:
        return len(self.hash_value) if self.hash_value else 0

    @property
    def hex_value(self) -> str:
        """Hash as a hex string, empty if hashing failed."""
        if not self.hash_value:
            return ""
        # hashing imports models at load time
        from .hashing.codec import bits_to_hex

        return bits_to_hex(self.hash_value)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'path': self.path,
            'filename': self.filename,
            'algorithm': self.algorithm.value,
            'precision': self.precision,
            'bits': self.bit_length,
            'hash': self.hash_value,
            'hex': self.hex_value,
            'error': self.error,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'HashResult':
        """Create HashResult from dictionary."""
        return cls(
            path=data['path'],
            algorithm=HashAlgorithm.parse(data.get('algorithm', HashAlgorithm.DIFFERENCE)),
            precision=data.get('precision', 8),
            hash_value=data.get('hash'),
            error=data.get('error'),
        )
