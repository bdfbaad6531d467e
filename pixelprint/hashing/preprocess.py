"""
Preprocessing module for the hashing package.

Scales an image down to the grid an algorithm compares and converts it to
8-bit grayscale.
"""

from __future__ import annotations

from typing import Optional

from ..config import PHASH_SAMPLE_SIZE, RESAMPLE_FILTERS
from ..models import GrayscaleBuffer, HashAlgorithm
from ..user_config import get_user_config
from .dependencies import Image, np, _logger


_RESAMPLE_LOOKUP = {
    'nearest': Image.Resampling.NEAREST,
    'box': Image.Resampling.BOX,
    'bilinear': Image.Resampling.BILINEAR,
    'hamming': Image.Resampling.HAMMING,
    'bicubic': Image.Resampling.BICUBIC,
    'lanczos': Image.Resampling.LANCZOS,
}


def target_size(algorithm: HashAlgorithm, precision: int) -> tuple[int, int]:
    """
    Return the (width, height) grid an algorithm hashes.

    Args:
        algorithm: Hash algorithm
        precision: Requested precision N

    Returns:
        (N+1, N) for dHash, (N, N) for aHash, (32, 32) for pHash

    Examples:
        >>> target_size(HashAlgorithm.DIFFERENCE, 8)
        (9, 8)
        >>> target_size(HashAlgorithm.PERCEPTUAL, 8)
        (32, 32)
    """
    if algorithm is HashAlgorithm.DIFFERENCE:
        return precision + 1, precision
    if algorithm is HashAlgorithm.AVERAGE:
        return precision, precision
    return PHASH_SAMPLE_SIZE, PHASH_SAMPLE_SIZE


def resolve_resample(name: Optional[str] = None) -> Image.Resampling:
    """
    Map a filter name to a Pillow resampling constant.

    Args:
        name: One of config.RESAMPLE_FILTERS, or None for the configured default

    Raises:
        ValueError: If the name is not a known filter
    """
    if name is None:
        name = get_user_config().resample
    key = str(name).lower()
    if key not in RESAMPLE_FILTERS:
        raise ValueError(
            f"Unknown resample filter: {name!r}. Use one of: {', '.join(RESAMPLE_FILTERS)}"
        )
    return _RESAMPLE_LOOKUP[key]


_DEEP_INTEGER_MODES = ('I', 'I;16', 'I;16L', 'I;16B', 'I;16N')


def _to_eight_bit(img: Image.Image) -> Image.Image:
    """
    Rescale 16-bit and float grayscale images to 8-bit 'L'.

    Integer modes are treated as 16-bit samples (0..65535). Float images in
    0..1 are stretched to 0..255, anything else is clipped to 0..255.
    """
    if img.mode in _DEEP_INTEGER_MODES:
        samples = np.asarray(img, dtype=np.float64) / 257.0
    elif img.mode == 'F':
        samples = np.asarray(img, dtype=np.float64)
        if samples.size and np.nanmax(samples) <= 1.0:
            samples = samples * 255.0
        samples = np.nan_to_num(samples)
    else:
        return img

    samples = np.clip(np.round(samples), 0, 255).astype(np.uint8)
    return Image.fromarray(samples)


def _flatten_alpha(img: Image.Image) -> Image.Image:
    """Composite transparent images over opaque black."""
    has_alpha = img.mode in ('RGBA', 'LA', 'PA') or (
        img.mode == 'P' and 'transparency' in img.info
    )
    if not has_alpha:
        return img

    rgba = img.convert('RGBA')
    background = Image.new('RGBA', rgba.size, (0, 0, 0, 255))
    return Image.alpha_composite(background, rgba)


def preprocess_for_hashing(
    img: Image.Image,
    width: int,
    height: int,
    resample: Optional[str] = None,
) -> Optional[GrayscaleBuffer]:
    """
    Scale an image to width x height and convert it to grayscale.

    Args:
        img: Decoded PIL image in any mode
        width: Target width in pixels
        height: Target height in pixels
        resample: Resampling filter name (default from user config)

    Returns:
        GrayscaleBuffer of exactly width x height, or None on failure
    """
    if width <= 0 or height <= 0:
        _logger.debug(f"Invalid preprocessing target {width}x{height}")
        return None

    try:
        if img.width <= 0 or img.height <= 0:
            _logger.debug(f"Cannot preprocess zero-area image ({img.width}x{img.height})")
            return None

        filter_ = resolve_resample(resample)
        flattened = _flatten_alpha(_to_eight_bit(img))

        # Scale first, then reduce to luminance
        if flattened.mode not in ('RGB', 'L'):
            flattened = flattened.convert('RGB')
        scaled = flattened.resize((width, height), filter_)
        gray = scaled.convert('L')

        pixels = np.asarray(gray, dtype=np.uint8)
        return GrayscaleBuffer(width=width, height=height, pixels=pixels)
    except Exception as e:
        _logger.debug(f"Preprocessing to {width}x{height} failed (mode={img.mode}): {e}")
        return None


__all__ = [
    'target_size',
    'resolve_resample',
    'preprocess_for_hashing',
]
