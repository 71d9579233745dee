"""
Autocorrelation and windowing using Numba JIT.

The autocorrelation here is the raw (un-normalized, biased) sum used by
LPC analysis, r[l] = sum_n x[n] * x[n + l], for lags 0..order.
"""

import numpy as np
from numba import jit


@jit(nopython=True, cache=True)
def _autocorr_jit(x: np.ndarray, order: int) -> np.ndarray:
    """Direct-form autocorrelation for lags 0..order (JIT compiled)."""
    N = len(x)
    r = np.zeros(order + 1, dtype=np.float64)

    for lag in range(order + 1):
        s = 0.0
        for n in range(N - lag):
            s += x[n] * x[n + lag]
        r[lag] = s

    return r


def autocorrelation(x: np.ndarray, order: int) -> np.ndarray:
    """
    Compute the autocorrelation of a frame up to a maximum lag.

    Parameters
    ----------
    x : np.ndarray
        Input frame of N samples (usually already windowed)
    order : int
        Largest lag to compute

    Returns
    -------
    np.ndarray
        Autocorrelation vector r of length order + 1. r[0] is the frame
        energy. Lags not covered by the frame (lag >= N) are zero.

    Examples
    --------
    >>> r = autocorrelation(np.array([1.0, 2.0, 3.0]), order=2)
    >>> # r == [14.0, 8.0, 3.0]
    """
    x = np.ascontiguousarray(x, dtype=np.float64)
    return _autocorr_jit(x, int(order))


def window(x: np.ndarray, y: np.ndarray) -> np.ndarray:
    """
    Multiply a data vector by a window, sample by sample.

    Used for the analysis window on a frame and for the lag window on an
    autocorrelation vector. Both inputs must have the same length.
    """
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    return x * y
