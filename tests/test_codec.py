"""
Unit tests for hash conversions and imagehash interop.
"""

import imagehash
import pytest
from PIL import Image

from pixelprint.hashing import compute_hash, hamming_distance
from pixelprint.hashing.codec import (
    is_valid_hash,
    bits_to_hex,
    hex_to_bits,
    to_image_hash,
    from_image_hash,
)


class TestIsValidHash:
    """Test is_valid_hash."""

    @pytest.mark.parametrize("value", ["0", "1", "0101", "1" * 64])
    def test_valid(self, value):
        assert is_valid_hash(value)

    @pytest.mark.parametrize("value", ["", "012", "abc", None, 101, " 01"])
    def test_invalid(self, value):
        assert not is_valid_hash(value)


class TestHexConversion:
    """Test bits_to_hex and hex_to_bits."""

    def test_bits_to_hex(self):
        assert bits_to_hex("11110000") == "f0"
        assert bits_to_hex("0000000011111111") == "00ff"

    def test_bits_to_hex_pads_partial_nibbles(self):
        assert bits_to_hex("00001") == "01"
        assert bits_to_hex("1") == "1"

    def test_hex_to_bits(self):
        assert hex_to_bits("f0", 8) == "11110000"
        assert hex_to_bits("01", 5) == "00001"

    def test_hex_to_bits_rejects_overflow(self):
        with pytest.raises(ValueError):
            hex_to_bits("ff", 4)

    @pytest.mark.parametrize("value", ["xyz", "", None])
    def test_hex_to_bits_rejects_non_hex(self, value):
        with pytest.raises(ValueError):
            hex_to_bits(value, 8)

    def test_hex_to_bits_rejects_bad_length(self):
        with pytest.raises(ValueError):
            hex_to_bits("0", 0)

    def test_bits_to_hex_rejects_non_binary(self):
        with pytest.raises(ValueError):
            bits_to_hex("10201")

    def test_real_hash_survives_hex(self, gradient_image):
        bits = compute_hash(gradient_image, 'phash', 8)
        assert hex_to_bits(bits_to_hex(bits), len(bits)) == bits


class TestImageHashInterop:
    """Test to_image_hash and from_image_hash."""

    def test_wraps_square_hash(self):
        image_hash = to_image_hash("1001")
        assert isinstance(image_hash, imagehash.ImageHash)
        assert image_hash.hash.shape == (2, 2)
        assert from_image_hash(image_hash) == "1001"

    def test_string_form_matches_hex(self, gradient_image):
        bits = compute_hash(gradient_image, 'ahash', 8)
        assert str(to_image_hash(bits)) == bits_to_hex(bits)

    def test_subtraction_matches_hamming(self, gradient_image, half_pattern_images):
        a = compute_hash(gradient_image, 'dhash', 8)
        b = compute_hash(half_pattern_images[0], 'dhash', 8)
        assert to_image_hash(a) - to_image_hash(b) == hamming_distance(a, b)

    def test_reads_imagehash_output(self):
        img = Image.new('RGB', (64, 64), color='white')
        img.paste(Image.new('RGB', (32, 64), color='black'), (0, 0))
        image_hash = imagehash.average_hash(img, hash_size=8)
        bits = from_image_hash(image_hash)
        assert len(bits) == 64
        assert bits_to_hex(bits) == str(image_hash)

    def test_rejects_non_square(self):
        with pytest.raises(ValueError):
            to_image_hash("101")

    def test_rejects_non_binary(self):
        with pytest.raises(ValueError):
            to_image_hash("12")
