"""
Hashing package for pixelprint.

Turns decoded images into short perceptual fingerprints and compares them.

Public API:
- compute_hash: Hash a PIL image with dHash, aHash or pHash
- compute_hash_from_file / hash_image_file: Open a file and hash it
- hash_images_parallel: Hash many files in parallel
- preprocess_for_hashing / target_size: Grayscale reduction
- difference_hash / average_hash / perceptual_hash: The algorithms
- dct_2d / DCTPlan / get_dct_plan: DCT-II used by pHash
- hamming_distance / similarity / is_similar / rank_by_distance: Comparison
- bits_to_hex / hex_to_bits / to_image_hash / from_image_hash: Conversions
- find_image_files: Discover image files in directories
- has_heif_support: Check if HEIC/HEIF support is available
"""

from __future__ import annotations

from .preprocess import preprocess_for_hashing, target_size, resolve_resample
from .dct import DCTPlan, get_dct_plan, dct_2d
from .algorithms import difference_hash, average_hash, perceptual_hash
from .distance import hamming_distance, similarity, is_similar, rank_by_distance
from .codec import is_valid_hash, bits_to_hex, hex_to_bits, to_image_hash, from_image_hash
from .engine import compute_hash, compute_hash_from_file, hash_image_file
from .parallel import hash_images_parallel
from .file_discovery import find_image_files

from .dependencies import HAS_HEIF_SUPPORT


def has_heif_support() -> bool:
    """Check if HEIC/HEIF support is available."""
    return HAS_HEIF_SUPPORT


__all__ = [
    # Preprocessing
    'preprocess_for_hashing',
    'target_size',
    'resolve_resample',
    # Transform
    'DCTPlan',
    'get_dct_plan',
    'dct_2d',
    # Algorithms
    'difference_hash',
    'average_hash',
    'perceptual_hash',
    # Comparison
    'hamming_distance',
    'similarity',
    'is_similar',
    'rank_by_distance',
    # Conversions
    'is_valid_hash',
    'bits_to_hex',
    'hex_to_bits',
    'to_image_hash',
    'from_image_hash',
    # Entry points
    'compute_hash',
    'compute_hash_from_file',
    'hash_image_file',
    'hash_images_parallel',
    'find_image_files',
    # Feature detection
    'has_heif_support',
]
