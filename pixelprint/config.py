"""
Configuration constants for pixelprint.

This module contains all configurable settings including:
- Default algorithm and precision for hashing
- Preprocessing parameters (pHash sample size, resampling filter)
- Supported image extensions for file discovery
"""

# Default hash algorithm when none is given ("dhash", "ahash" or "phash")
DEFAULT_ALGORITHM = 'dhash'

# Default precision N (dHash/aHash emit N*N bits)
DEFAULT_PRECISION = 8

# pHash always samples a fixed 32x32 grayscale grid, whatever the precision
PHASH_SAMPLE_SIZE = 32

# Resampling filter used when scaling images down for hashing
# Must be one of the keys of RESAMPLE_FILTERS
DEFAULT_RESAMPLE = 'lanczos'
RESAMPLE_FILTERS = ('nearest', 'box', 'bilinear', 'hamming', 'bicubic', 'lanczos')

# Fraction of the hash bits that may differ for two images to count as similar
# 0.3 at precision 8 allows up to 19 of 64 bits
DEFAULT_SIMILARITY_RATIO = 0.3

# Default number of parallel workers for batch hashing
DEFAULT_WORKERS = 4

# Upper bound on decoded image size (decompression bomb limit)
DEFAULT_MAX_IMAGE_PIXELS = 500_000_000

# Image extensions picked up when a directory is hashed
IMAGE_EXTENSIONS = {
    # Common formats
    '.jpg', '.jpeg', '.png', '.gif', '.bmp', '.webp', '.tiff', '.tif',
    # Other raster formats Pillow can decode
    '.ico', '.icns', '.psd',
    '.heic', '.heif', '.avif',
    '.pbm', '.pgm', '.ppm', '.pnm',
    '.tga', '.dds',
    '.jp2', '.j2k', '.jpf', '.jpx',
    '.pcx', '.sgi', '.rgb', '.rgba', '.bw',
}

# Formats that need the optional pillow-heif plugin
HEIF_EXTENSIONS = {'.heic', '.heif'}
