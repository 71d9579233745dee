"""
LSF stability guard.

Line spectral frequencies (normalized radians, 8 kHz sampling) describe a
stable synthesis filter as long as they are strictly increasing. After
quantization or interpolation neighbouring values can collide or cross, so
the guard pushes close pairs apart and clamps every value into the valid
range, repairing the caller's table in place.

The repair runs a fixed number of passes (2 by default). It does not iterate
to convergence: a dense enough cluster can still violate the minimum gap
after the last pass. Use min_lsf_gap() to detect that case.
"""

import logging

import numpy as np
from numba import jit

logger = logging.getLogger(__name__)

LSF_N_PASSES = 2
LSF_MIN_GAP = 0.039     # 50 Hz
LSF_HALF_GAP = 0.0195
LSF_MIN = 0.01          # 0 Hz
LSF_MAX = 3.14          # 4000 Hz


@jit(nopython=True, cache=True)
def _clamp_jit(lsf: np.ndarray, m: int, k: int, lsf_min: float, lsf_max: float) -> bool:
    if lsf[m, k] < lsf_min:
        lsf[m, k] = lsf_min
        return True
    if lsf[m, k] > lsf_max:
        lsf[m, k] = lsf_max
        return True
    return False


@jit(nopython=True, cache=True)
def _lsf_check_jit(
    lsf: np.ndarray,
    n_passes: int,
    min_gap: float,
    half_gap: float,
    lsf_min: float,
    lsf_max: float
) -> bool:
    """In-place separation and range repair of a (NoAn, dim) table."""
    n_an, dim = lsf.shape
    change = False

    for _ in range(n_passes):
        for m in range(n_an):
            for k in range(dim - 1):
                if lsf[m, k + 1] - lsf[m, k] < min_gap:
                    if lsf[m, k + 1] < lsf[m, k]:
                        # Crossed pair: swap and separate
                        lo = lsf[m, k + 1]
                        lsf[m, k + 1] = lsf[m, k] + half_gap
                        lsf[m, k] = lo - half_gap
                    else:
                        lsf[m, k] -= half_gap
                        lsf[m, k + 1] += half_gap
                    change = True

                if _clamp_jit(lsf, m, k, lsf_min, lsf_max):
                    change = True

            if dim > 0 and _clamp_jit(lsf, m, dim - 1, lsf_min, lsf_max):
                change = True

    return change


def enforce_lsf_stability(
    table: np.ndarray,
    n_passes: int = LSF_N_PASSES,
    min_gap: float = LSF_MIN_GAP,
    half_gap: float = LSF_HALF_GAP,
    lsf_min: float = LSF_MIN,
    lsf_max: float = LSF_MAX
) -> bool:
    """
    Repair an LSF table in place so neighbouring values stay separated.

    Parameters
    ----------
    table : np.ndarray
        LSF vectors, shape (NoAn, dim). A 1-D array is a single vector.
        Modified in place.
    n_passes : int
        Number of repair passes over the whole table
    min_gap : float
        Minimum separation between adjacent LSFs
    half_gap : float
        Amount each member of a too-close pair is moved
    lsf_min, lsf_max : float
        Valid range for every LSF

    Returns
    -------
    bool
        True if any value was changed

    Notes
    -----
    Within a pass, each adjacent pair closer than min_gap is moved apart by
    half_gap on each side; a crossed pair is swapped and separated instead.
    Every value is then clamped to [lsf_min, lsf_max]. Residual violations
    after n_passes are not reported.
    """
    work = np.asarray(table, dtype=np.float64)
    shares_memory = work is table and work.flags.c_contiguous and work.flags.writeable
    if not shares_memory:
        work = np.array(work, dtype=np.float64, order='C')

    work_2d = work.reshape(1, -1) if work.ndim == 1 else work
    changed = bool(_lsf_check_jit(work_2d, int(n_passes), min_gap, half_gap, lsf_min, lsf_max))

    if not shares_memory:
        _write_back(table, work)

    if changed and logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"LSF table repaired ({n_passes} passes, min gap now {min_lsf_gap(work):.4f})")

    return changed


def _write_back(table, work: np.ndarray) -> None:
    """Copy repaired values into a table that could not be used directly."""
    if isinstance(table, np.ndarray):
        table[...] = work
    elif work.ndim == 1:
        table[:] = work.tolist()
    else:
        for row, values in zip(table, work):
            row[:] = values.tolist()


def min_lsf_gap(table: np.ndarray) -> float:
    """Smallest difference between adjacent LSFs over all vectors in a table."""
    table = np.atleast_2d(np.asarray(table, dtype=np.float64))
    if table.shape[1] < 2:
        return np.inf
    return float(np.diff(table, axis=1).min())
