"""
Parallel processing module for the hashing package.

Provides batch hashing of many files with progress tracking and callback
support.
"""

from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Optional, Callable, Any, Union

from ..config import DEFAULT_PRECISION, DEFAULT_WORKERS
from ..models import HashAlgorithm, HashResult
from .dependencies import HAS_TQDM, _tqdm_class
from .engine import hash_image_file


def hash_images_parallel(
    filepaths: list[str],
    algorithm: Union[HashAlgorithm, str] = HashAlgorithm.DIFFERENCE,
    precision: int = DEFAULT_PRECISION,
    max_workers: int = DEFAULT_WORKERS,
    progress_callback: Optional[Callable[[int, int], None]] = None,
    show_progress: bool = True,
    logger: Optional[logging.Logger] = None,
    resample: Optional[str] = None,
) -> list[HashResult]:
    """
    Hash multiple image files in parallel.

    Args:
        filepaths: List of image paths to hash
        algorithm: HashAlgorithm or its name
        precision: Hash precision N
        max_workers: Number of parallel workers
        progress_callback: Optional callback(current, total) for progress updates
        show_progress: Whether to show tqdm progress bar
        logger: Optional logger for status messages
        resample: Resampling filter name (default from user config)

    Returns:
        List of HashResult objects, in the same order as filepaths
    """
    if not filepaths:
        return []

    algorithm = HashAlgorithm.parse(algorithm)
    total = len(filepaths)
    results: list[Optional[HashResult]] = [None] * total

    pbar: Optional[Any] = None
    if HAS_TQDM and show_progress and _tqdm_class is not None:
        pbar = _tqdm_class(
            total=total,
            desc=f"Hashing images ({algorithm.value})",
            unit="img",
            ncols=80,
        )

    # Batch progress callbacks to reduce overhead (every 1000 files or 1 second)
    last_callback_time = time.time()
    callback_batch_size = 1000
    callback_interval = 1.0  # seconds

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = {
            executor.submit(hash_image_file, path, algorithm, precision, resample): index
            for index, path in enumerate(filepaths)
        }

        for i, future in enumerate(as_completed(futures)):
            index = futures[future]
            try:
                results[index] = future.result()
            except Exception as e:
                results[index] = HashResult(
                    path=str(filepaths[index]),
                    algorithm=algorithm,
                    precision=precision,
                    error=str(e),
                )

            if pbar is not None:
                pbar.update(1)

            if progress_callback:
                current_time = time.time()
                should_callback = (
                    (i + 1) % callback_batch_size == 0 or
                    current_time - last_callback_time >= callback_interval or
                    i == total - 1  # Always callback on last item
                )
                if should_callback:
                    progress_callback(i + 1, total)
                    last_callback_time = current_time

    if pbar is not None:
        pbar.close()

    if logger:
        failed = sum(1 for r in results if r is not None and not r.ok)
        logger.info(f"Hashed {total - failed:,} of {total:,} images ({failed:,} failed)")

    return results


__all__ = ['hash_images_parallel']
