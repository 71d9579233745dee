"""
Codebook quantizers: scalar, vector and split-vector.

All searches are exhaustive nearest-neighbour searches over small, caller
supplied codebooks. Codebooks are flat arrays and are never modified.

Split-vector quantization cuts the input into consecutive segments and
quantizes each one against its own region of a concatenated codebook:

    x  = [ seg 0 (dims[0]) | seg 1 (dims[1]) | ... ]
    cb = [ dims[0]*sizes[0] values | dims[1]*sizes[1] values | ... ]
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np
from numba import jit


@dataclass(frozen=True)
class SplitSegment:
    """Location of one split: its slice of x and its codebook region."""
    x_offset: int
    dim: int
    cb_offset: int
    size: int


def split_segments(dims: Sequence[int], sizes: Sequence[int]) -> List[SplitSegment]:
    """Accumulate x and codebook offsets for each split."""
    segments = []
    x_pos = 0
    cb_pos = 0
    for dim, size in zip(dims, sizes):
        segments.append(SplitSegment(x_pos, int(dim), cb_pos, int(size)))
        x_pos += int(dim)
        cb_pos += int(dim) * int(size)
    return segments


def scalar_quantize(x: float, cb: Sequence[float]) -> Tuple[int, float]:
    """
    Quantize a scalar against an ascending codebook.

    Parameters
    ----------
    x : float
        Value to quantize
    cb : sequence of float
        Codebook, sorted ascending

    Returns
    -------
    index : int
        Index of the nearest codebook entry
    xq : float
        The codebook value cb[index]

    Notes
    -----
    Values at or below cb[0] map to index 0. Otherwise the first entry with
    x <= cb[i] is located by a linear scan (or the last entry if there is
    none), and the nearer of cb[i-1], cb[i] is picked. A value exactly at
    the midpoint goes to the higher entry.
    """
    cb_size = len(cb)

    if cb_size == 1 or x <= cb[0]:
        return 0, float(cb[0])

    i = 0
    while x > cb[i] and i < cb_size - 1:
        i += 1

    # Unordered input such as NaN never advances the scan
    if i == 0:
        return 0, float(cb[0])

    if x >= (cb[i] + cb[i - 1]) / 2:
        return i, float(cb[i])
    return i - 1, float(cb[i - 1])


@jit(nopython=True, cache=True)
def _vq_search_jit(x: np.ndarray, cb: np.ndarray, n_cb: int) -> int:
    """Index of the codebook entry with the smallest squared error."""
    dim = len(x)
    min_dist = np.inf
    min_index = 0
    pos = 0

    for j in range(n_cb):
        dist = 0.0
        for i in range(dim):
            tmp = x[i] - cb[pos + i]
            dist += tmp * tmp

        # Strict comparison: earliest entry wins ties
        if dist < min_dist:
            min_dist = dist
            min_index = j
        pos += dim

    return min_index


def vector_quantize(x: np.ndarray, cb: np.ndarray) -> Tuple[int, np.ndarray]:
    """
    Exhaustive nearest-neighbour vector quantization.

    Parameters
    ----------
    x : np.ndarray
        Vector to quantize, length dim
    cb : np.ndarray
        Flat codebook of n_cb * dim values (entry j is cb[j*dim:(j+1)*dim])

    Returns
    -------
    index : int
        Index of the nearest entry under squared Euclidean distance; the
        lowest index wins among equally near entries
    xq : np.ndarray
        Copy of the selected codebook entry
    """
    x = np.ascontiguousarray(x, dtype=np.float64)
    cb = np.ascontiguousarray(cb, dtype=np.float64)
    dim = len(x)
    n_cb = len(cb) // dim

    index = int(_vq_search_jit(x, cb, n_cb))
    xq = cb[index * dim:(index + 1) * dim].copy()
    return index, xq


def split_vector_quantize(
    x: np.ndarray,
    cb: np.ndarray,
    dims: Sequence[int],
    sizes: Sequence[int]
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Split vector quantization.

    Each segment of x is searched independently in its own codebook region;
    there is no joint optimization across segments.

    Parameters
    ----------
    x : np.ndarray
        Vector to quantize, length sum(dims)
    cb : np.ndarray
        Concatenated flat codebook of sum(dims[i] * sizes[i]) values
    dims : sequence of int
        Dimension of each split
    sizes : sequence of int
        Number of codebook entries for each split

    Returns
    -------
    indices : np.ndarray
        One index per split
    xq : np.ndarray
        Concatenation of the quantized segments
    """
    x = np.ascontiguousarray(x, dtype=np.float64)
    cb = np.ascontiguousarray(cb, dtype=np.float64)

    segments = split_segments(dims, sizes)
    indices = np.zeros(len(segments), dtype=np.int64)
    xq = np.empty_like(x)

    for n, seg in enumerate(segments):
        x_seg = x[seg.x_offset:seg.x_offset + seg.dim]
        cb_seg = cb[seg.cb_offset:seg.cb_offset + seg.dim * seg.size]
        indices[n], xq[seg.x_offset:seg.x_offset + seg.dim] = vector_quantize(x_seg, cb_seg)

    return indices, xq


def dequantize_split(
    indices: Sequence[int],
    cb: np.ndarray,
    dims: Sequence[int],
    sizes: Sequence[int]
) -> np.ndarray:
    """Rebuild a split-quantized vector from its indices (decoder side)."""
    cb = np.asarray(cb, dtype=np.float64)
    segments = split_segments(dims, sizes)
    parts = []
    for index, seg in zip(indices, segments):
        start = seg.cb_offset + int(index) * seg.dim
        parts.append(cb[start:start + seg.dim])
    if not parts:
        return np.zeros(0, dtype=np.float64)
    return np.concatenate(parts)
