"""
Argument parsing for the CLI interface.

Provides functions to create and configure the argument parser for the
pixelprint command-line interface.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from ..models import HashAlgorithm
from ..user_config import get_user_config
from ..utils.exporters import EXPORT_FORMATS

ALGORITHM_CHOICES = [a.value for a in HashAlgorithm]


def _add_hash_options(parser: argparse.ArgumentParser) -> None:
    """Options shared by every subcommand that computes hashes."""
    config = get_user_config()

    parser.add_argument(
        '-a', '--algorithm',
        choices=ALGORITHM_CHOICES,
        default=config.default_algorithm,
        help=f'Hash algorithm. Default: {config.default_algorithm}'
    )

    parser.add_argument(
        '-p', '--precision',
        type=int,
        default=config.default_precision,
        help=(
            'Hash precision N (dhash/ahash: N*N bits, phash: min(N,32)^2 bits). '
            f'Default: {config.default_precision}'
        )
    )

    parser.add_argument(
        '--resample',
        default=None,
        help=f'Resampling filter used to shrink images. Default: {config.resample}'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Verbose output'
    )


def create_parser() -> argparse.ArgumentParser:
    """
    Create and configure the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance with hash, compare and rank
        subcommands
    """
    config = get_user_config()

    parser = argparse.ArgumentParser(
        prog='pixelprint',
        description='Compute and compare perceptual image hashes',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s hash photo.jpg
      Print the 64-bit difference hash of one image

  %(prog)s hash /path/to/photos -a phash -p 16 --format hex
      Hash a whole directory with a 256-bit perceptual hash

  %(prog)s hash /path/to/photos -e hashes.csv --export-format csv
      Export hashes to CSV

  %(prog)s compare a.jpg b.jpg -a ahash
      Show the Hamming distance between two images

  %(prog)s rank query.jpg /path/to/photos --top 5
      List the five images closest to query.jpg
        """
    )

    subparsers = parser.add_subparsers(dest='command', metavar='COMMAND')
    subparsers.required = True

    # hash
    hash_parser = subparsers.add_parser('hash', help='Hash images or directories')
    hash_parser.add_argument(
        'paths',
        type=Path,
        nargs='+',
        help='Image files or directories to hash'
    )
    _add_hash_options(hash_parser)
    hash_parser.add_argument(
        '-r', '--no-recursive',
        action='store_true',
        help='Do not scan subdirectories'
    )
    hash_parser.add_argument(
        '-w', '--workers',
        type=int,
        default=config.default_workers,
        help=f'Number of parallel workers. Default: {config.default_workers}'
    )
    hash_parser.add_argument(
        '-f', '--format',
        choices=['bits', 'hex', 'json'],
        default='bits',
        dest='output_format',
        help='Output format. Default: bits'
    )
    hash_parser.add_argument(
        '-e', '--export',
        type=Path,
        help='Export results to file'
    )
    hash_parser.add_argument(
        '--export-format',
        choices=list(EXPORT_FORMATS),
        default='txt',
        help='Export format. Default: txt'
    )
    hash_parser.add_argument(
        '--no-progress',
        action='store_true',
        help='Disable progress bars (useful for piping output)'
    )

    # compare
    compare_parser = subparsers.add_parser('compare', help='Compare two images')
    compare_parser.add_argument('first', type=Path, help='First image')
    compare_parser.add_argument('second', type=Path, help='Second image')
    _add_hash_options(compare_parser)
    compare_parser.add_argument(
        '-t', '--threshold',
        type=int,
        default=None,
        help=(
            'Maximum differing bits to call the images similar. '
            f'Default: {config.similarity_ratio:.0%} of the hash length'
        )
    )

    # rank
    rank_parser = subparsers.add_parser('rank', help='Rank images by similarity to a query image')
    rank_parser.add_argument('query', type=Path, help='Query image')
    rank_parser.add_argument(
        'paths',
        type=Path,
        nargs='+',
        help='Candidate image files or directories'
    )
    _add_hash_options(rank_parser)
    rank_parser.add_argument(
        '-r', '--no-recursive',
        action='store_true',
        help='Do not scan subdirectories'
    )
    rank_parser.add_argument(
        '-w', '--workers',
        type=int,
        default=config.default_workers,
        help=f'Number of parallel workers. Default: {config.default_workers}'
    )
    rank_parser.add_argument(
        '-n', '--top',
        type=int,
        default=None,
        help='Only show the N closest images'
    )
    rank_parser.add_argument(
        '--no-progress',
        action='store_true',
        help='Disable progress bars (useful for piping output)'
    )

    return parser


def parse_arguments(argv=None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        argv: List of argument strings (default: sys.argv)

    Returns:
        Parsed arguments as Namespace object

    Examples:
        >>> args = parse_arguments(['hash', 'photo.jpg', '-p', '16'])
        >>> args.command, args.precision
        ('hash', 16)
    """
    parser = create_parser()
    return parser.parse_args(argv)


__all__ = [
    'ALGORITHM_CHOICES',
    'create_parser',
    'parse_arguments',
]
