"""
LPC front end for a low bit rate speech encoder.

Turns windowed speech frames into LPC / reflection coefficients, keeps LSF
vectors stable and reduces parameter vectors to codebook indices.

Modules:
    - lpc_core: numerical kernels (Numba JIT)
    - analysis: frame analysis pipeline and configured analyzer
    - config: YAML-backed configuration
"""

from .lpc_core import (
    autocorrelation,
    window,
    levinson_durbin,
    bandwidth_expansion,
    interpolate,
    scalar_quantize,
    vector_quantize,
    split_vector_quantize,
    enforce_lsf_stability,
)
from .analysis import analyze_frame, LPCAnalysis, LPCAnalyzer
from .config import LPCConfig, load_config

__all__ = [
    'autocorrelation',
    'window',
    'levinson_durbin',
    'bandwidth_expansion',
    'interpolate',
    'scalar_quantize',
    'vector_quantize',
    'split_vector_quantize',
    'enforce_lsf_stability',
    'analyze_frame',
    'LPCAnalysis',
    'LPCAnalyzer',
    'LPCConfig',
    'load_config',
]

__version__ = '1.0.0'
