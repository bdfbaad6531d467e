"""
Unit tests for input validators.
"""

import pytest

from pixelprint.models import HashAlgorithm
from pixelprint.utils.validators import (
    validate_file_accessible,
    validate_algorithm,
    validate_precision,
    expected_bit_length,
    validate_threshold,
    validate_hash_params,
)


class TestValidateFileAccessible:
    """Test validate_file_accessible."""

    def test_existing_file(self, sample_images):
        assert validate_file_accessible(sample_images['red']) == (True, "")

    def test_missing_file(self):
        assert validate_file_accessible('/nonexistent/file.jpg') == (False, "File does not exist")

    def test_directory(self, temp_dir):
        assert validate_file_accessible(str(temp_dir)) == (False, "Path is not a file")


class TestValidateParams:
    """Test algorithm, precision and worker validation."""

    def test_algorithm(self):
        assert validate_algorithm('phash') == (True, "")
        assert validate_algorithm(HashAlgorithm.AVERAGE) == (True, "")
        assert validate_algorithm('md5')[0] is False

    @pytest.mark.parametrize("precision", [1, 8, 64, "16"])
    def test_valid_precision(self, precision):
        assert validate_precision(precision) == (True, "")

    @pytest.mark.parametrize("precision", [0, -3, "abc", None, True])
    def test_invalid_precision(self, precision):
        assert validate_precision(precision)[0] is False

    def test_hash_params(self):
        assert validate_hash_params('dhash', 8) == (True, "")
        assert validate_hash_params('dhash', 8, workers=4) == (True, "")
        assert validate_hash_params('dhash', 8, workers=0) == (False, "Workers must be between 1 and 32")
        assert validate_hash_params('dhash', 8, workers="x") == (False, "Workers must be an integer")
        assert validate_hash_params('xhash', 8)[0] is False
        assert validate_hash_params('ahash', 0)[0] is False


class TestBitLength:
    """Test expected_bit_length and validate_threshold."""

    @pytest.mark.parametrize("algorithm,precision,bits", [
        ('dhash', 8, 64),
        ('ahash', 16, 256),
        ('phash', 8, 64),
        ('phash', 32, 1024),
        ('phash', 40, 1024),
        ('dhash', 40, 1600),
    ])
    def test_expected_bit_length(self, algorithm, precision, bits):
        assert expected_bit_length(algorithm, precision) == bits

    def test_threshold_bounds(self):
        assert validate_threshold(0, 64) == (True, "")
        assert validate_threshold(64, 64) == (True, "")
        assert validate_threshold(-1, 64)[0] is False
        assert validate_threshold(65, 64) == (False, "Threshold must be between 0 and 64")
        assert validate_threshold("many", 64) == (False, "Threshold must be an integer")
