import numpy as np


def interpolate(a: np.ndarray, b: np.ndarray, coef: float) -> np.ndarray:
    """
    Convex combination of two coefficient vectors: coef*a + (1-coef)*b.

    coef is expected in [0, 1] but is not checked; values outside the range
    extrapolate linearly.
    """
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    invcoef = 1.0 - coef
    return coef * a + invcoef * b
