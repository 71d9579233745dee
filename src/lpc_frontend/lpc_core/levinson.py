"""
Levinson-Durbin Recursion using Numba JIT

Solves the Toeplitz normal equations of linear prediction order by order,
producing the LPC polynomial a = [1, a1, ..., ap] together with the
reflection (PARCOR) coefficients k1..kp.

Near-silent frames (r[0] below EPS) are not an error: the solver returns a
flat filter, a = [1, 0, ..., 0] and k = 0, so the caller always gets output.
If the prediction error drops to zero before the full order is reached (a
perfectly predictable input), the higher orders are left at zero as well.
"""

import numpy as np
from numba import jit

# Smallest frame energy for which the recursion is attempted
EPS = 2.220446e-16


@jit(nopython=True, cache=True)
def _levinson_jit(r: np.ndarray, order: int, eps: float):
    """
    Levinson-Durbin recursion with in-place symmetric coefficient update.

    At order m the update pairs a[i+1] with a[m-i], so only the first half
    of the coefficients has to be visited.
    """
    a = np.zeros(order + 1, dtype=np.float64)
    k = np.zeros(order, dtype=np.float64)
    a[0] = 1.0

    if order == 0 or r[0] < eps:
        return a, k

    k[0] = -r[1] / r[0]
    a[1] = k[0]
    alpha = r[0] + r[1] * k[0]

    for m in range(1, order):
        # Zero prediction error: the remaining orders stay at zero
        if alpha <= 0.0:
            break

        s = r[m + 1]
        for i in range(m):
            s += a[i + 1] * r[m - i]
        k[m] = -s / alpha
        alpha += k[m] * s

        m_h = (m + 1) >> 1
        for i in range(m_h):
            tmp = a[i + 1] + k[m] * a[m - i]
            a[m - i] += k[m] * a[i + 1]
            a[i + 1] = tmp
        a[m + 1] = k[m]

    return a, k


def levinson_durbin(r: np.ndarray):
    """
    Compute LPC and reflection coefficients from an autocorrelation vector.

    Parameters
    ----------
    r : np.ndarray
        Autocorrelation vector r[0..order]

    Returns
    -------
    a : np.ndarray
        LPC coefficient vector of length order + 1 with a[0] == 1.0
    k : np.ndarray
        Reflection coefficients of length order

    Notes
    -----
    The prediction error filter is A(z) = sum_i a[i] z^-i. If r[0] < EPS
    the recursion is skipped and a flat filter is returned.
    """
    r = np.ascontiguousarray(r, dtype=np.float64)
    order = len(r) - 1
    return _levinson_jit(r, order, EPS)


def bandwidth_expansion(a: np.ndarray, coef: float) -> np.ndarray:
    """
    Apply LPC bandwidth expansion (chirp): out[i] = a[i] * coef**i.

    Pulls the filter poles towards the origin by the factor coef, which
    widens the formant bandwidths. out[0] is copied unchanged.
    """
    a = np.asarray(a, dtype=np.float64)
    out = a.copy()
    if len(a) > 1:
        # Running product, same rounding as chirp *= coef
        chirp = np.cumprod(np.full(len(a) - 1, coef, dtype=np.float64))
        out[1:] = a[1:] * chirp
    return out


def is_stable(k: np.ndarray) -> bool:
    """True if every reflection coefficient lies strictly inside (-1, 1)."""
    k = np.asarray(k, dtype=np.float64)
    return bool(np.all(np.abs(k) < 1.0))
