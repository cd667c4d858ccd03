"""Histogram binning for boxes / histeps series.

Buckets have equal width and are left-closed, right-open, except the last
one which also holds the maximum value.
"""

from __future__ import annotations

import math
from typing import List, Optional, Sequence, Tuple

import numpy as np


def bin_values(
    values: Sequence[float],
    bins: Optional[int] = None,
    binwidth: Optional[float] = None,
) -> List[Tuple[float, int]]:
    """Bucket ``values`` and return ``(center, count)`` pairs ordered by center.

    Exactly one of ``bins`` / ``binwidth`` is normally given; when both are,
    ``bins`` wins. Empty input gives an empty list.
    """
    if bins is None and binwidth is None:
        raise ValueError("bin_values needs bins or binwidth")
    if bins is not None and int(bins) <= 0:
        raise ValueError(f"bins must be positive, got {bins!r}")
    if bins is None and not float(binwidth) > 0.0:
        raise ValueError(f"binwidth must be positive, got {binwidth!r}")

    arr = np.asarray(values, dtype=np.float64).ravel()
    if arr.size == 0:
        return []

    lo = float(arr.min())
    hi = float(arr.max())

    if hi == lo:
        return [(lo, int(arr.size))]

    if bins is not None:
        count = int(bins)
        width = (hi - lo) / count
    else:
        width = float(binwidth)
        count = max(1, math.ceil((hi - lo) / width))

    index = np.floor((arr - lo) / width).astype(np.int64)
    index = np.clip(index, 0, count - 1)
    counts = np.bincount(index, minlength=count)
    centers = lo + (np.arange(count) + 0.5) * width
    return [(float(c), int(n)) for c, n in zip(centers, counts)]


def maybe_bin(
    values: Sequence[float],
    bins: Optional[int] = None,
    binwidth: Optional[float] = None,
) -> Optional[List[Tuple[float, int]]]:
    """Bin when either option is set; None means "plot the raw values"."""
    if bins is None and binwidth is None:
        return None
    return bin_values(values, bins=bins, binwidth=binwidth)
