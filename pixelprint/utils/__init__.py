"""
Utilities package for pixelprint.

Provides:
- validators: Input validation for hashing parameters and files
- exporters: Export hash results to files
"""

from __future__ import annotations

from . import validators
from . import exporters

from .validators import (
    validate_file_accessible,
    validate_algorithm,
    validate_precision,
    expected_bit_length,
    validate_threshold,
    validate_hash_params,
)
from .exporters import EXPORT_FORMATS, export_results

__all__ = [
    # Submodules
    'validators',
    'exporters',
    # Validators
    'validate_file_accessible',
    'validate_algorithm',
    'validate_precision',
    'expected_bit_length',
    'validate_threshold',
    'validate_hash_params',
    # Exporters
    'EXPORT_FORMATS',
    'export_results',
]
