"""
LPC analysis pipeline.

Chains the core kernels in the order an encoder uses them:

    frame -> analysis window -> autocorrelation -> lag window
          -> Levinson-Durbin -> bandwidth expansion

and wraps the LSF side (stability guard, split VQ) behind a configured
LPCAnalyzer. LPC-to-LSF conversion is done by the caller.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from .config import LPCConfig
from .lpc_core import (
    autocorrelation,
    window,
    levinson_durbin,
    bandwidth_expansion,
    split_vector_quantize,
    enforce_lsf_stability,
    EPS,
)

logger = logging.getLogger(__name__)


@dataclass
class LPCAnalysis:
    """Result of analysing one frame."""
    autocorr: np.ndarray
    lpc: np.ndarray
    reflection: np.ndarray
    lpc_expanded: np.ndarray
    degenerate: bool = False


def analyze_frame(
    frame: np.ndarray,
    order: int,
    analysis_window: Optional[np.ndarray] = None,
    lag_window: Optional[np.ndarray] = None,
    chirp: float = 1.0
) -> LPCAnalysis:
    """
    Run LPC analysis on a single frame.

    Parameters
    ----------
    frame : np.ndarray
        Speech samples
    order : int
        LPC order
    analysis_window : np.ndarray, optional
        Window of the same length as frame; the frame is used as-is if None
    lag_window : np.ndarray, optional
        Window of length order + 1 applied to the autocorrelation
    chirp : float
        Bandwidth expansion factor (1.0 disables expansion)

    Returns
    -------
    LPCAnalysis
        Autocorrelation, LPC and reflection coefficients, and the
        bandwidth-expanded LPC vector
    """
    x = np.asarray(frame, dtype=np.float64)
    if analysis_window is not None:
        x = window(x, analysis_window)

    r = autocorrelation(x, order)
    if lag_window is not None:
        r = window(r, lag_window)

    degenerate = bool(r[0] < EPS)
    if degenerate:
        logger.debug(f"Frame energy {r[0]:.3e} below EPS, using flat LPC filter")

    a, k = levinson_durbin(r)
    return LPCAnalysis(
        autocorr=r,
        lpc=a,
        reflection=k,
        lpc_expanded=bandwidth_expansion(a, chirp),
        degenerate=degenerate,
    )


class LPCAnalyzer:
    """
    Configured front end: frame analysis, LSF repair and LSF quantization.

    Example:
        >>> analyzer = LPCAnalyzer(LPCConfig())
        >>> result = analyzer.analyze(frame, analysis_window=hann)
        >>> changed = analyzer.stabilize(lsf_table)
        >>> indices, lsf_q = analyzer.quantize_lsf(lsf, codebook)
    """

    def __init__(self, config: Optional[LPCConfig] = None):
        self.config = (config or LPCConfig()).validate()

    def analyze(
        self,
        frame: np.ndarray,
        analysis_window: Optional[np.ndarray] = None,
        lag_window: Optional[np.ndarray] = None
    ) -> LPCAnalysis:
        return analyze_frame(
            frame,
            self.config.order,
            analysis_window=analysis_window,
            lag_window=lag_window,
            chirp=self.config.chirp,
        )

    def stabilize(self, lsf_table: np.ndarray) -> bool:
        """Repair an LSF table in place with the configured guard settings."""
        cfg = self.config
        return enforce_lsf_stability(
            lsf_table,
            n_passes=cfg.lsf_n_passes,
            min_gap=cfg.lsf_min_gap,
            half_gap=cfg.lsf_half_gap,
            lsf_min=cfg.lsf_min,
            lsf_max=cfg.lsf_max,
        )

    def quantize_lsf(self, lsf: np.ndarray, codebook: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        """Split-VQ an LSF vector against the concatenated codebook."""
        codebook = np.asarray(codebook, dtype=np.float64)
        if len(codebook) != self.config.codebook_length:
            raise ValueError(
                f"Codebook has {len(codebook)} values, "
                f"split layout needs {self.config.codebook_length}"
            )
        return split_vector_quantize(lsf, codebook, self.config.split_dims, self.config.split_sizes)
