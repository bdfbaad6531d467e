"""
pixelprint
==========
Perceptual image fingerprints for near-duplicate detection.

Features:
- Difference hash (dHash): adjacent-pixel gradients, fastest
- Average hash (aHash): pixels against the mean intensity
- Perceptual hash (pHash): low-frequency DCT coefficients, most robust
- Hamming distance and similarity ranking
- Hex / imagehash interop
- Parallel batch hashing and a CLI
"""

__version__ = "1.0.0"

from .models import HashAlgorithm, GrayscaleBuffer, HashResult
from .config import DEFAULT_ALGORITHM, DEFAULT_PRECISION, PHASH_SAMPLE_SIZE
from .hashing import (
    compute_hash,
    compute_hash_from_file,
    hash_image_file,
    hash_images_parallel,
    preprocess_for_hashing,
    difference_hash,
    average_hash,
    perceptual_hash,
    dct_2d,
    hamming_distance,
    similarity,
    is_similar,
    rank_by_distance,
    bits_to_hex,
    hex_to_bits,
    to_image_hash,
    from_image_hash,
    find_image_files,
)

__all__ = [
    "HashAlgorithm",
    "GrayscaleBuffer",
    "HashResult",
    "DEFAULT_ALGORITHM",
    "DEFAULT_PRECISION",
    "PHASH_SAMPLE_SIZE",
    "compute_hash",
    "compute_hash_from_file",
    "hash_image_file",
    "hash_images_parallel",
    "preprocess_for_hashing",
    "difference_hash",
    "average_hash",
    "perceptual_hash",
    "dct_2d",
    "hamming_distance",
    "similarity",
    "is_similar",
    "rank_by_distance",
    "bits_to_hex",
    "hex_to_bits",
    "to_image_hash",
    "from_image_hash",
    "find_image_files",
]
