"""
LPC Core Module - Hand-written LPC analysis and quantization kernels

Numerical building blocks of a low bit rate speech encoder front end. Every
function is a stateless transform over numpy arrays; the inner loops are
compiled with Numba.

Modules:
    - correlation: autocorrelation and window multiplication
    - levinson: Levinson-Durbin recursion and bandwidth expansion
    - interpolate: convex combination of coefficient vectors
    - quantize: scalar, vector and split-vector quantization
    - lsf: LSF stability guard
"""

from .correlation import autocorrelation, window
from .levinson import levinson_durbin, bandwidth_expansion, is_stable, EPS
from .interpolate import interpolate
from .quantize import (
    scalar_quantize,
    vector_quantize,
    split_vector_quantize,
    dequantize_split,
    split_segments,
    SplitSegment,
)
from .lsf import enforce_lsf_stability, min_lsf_gap

__all__ = [
    # Correlation
    'autocorrelation',
    'window',
    # Linear prediction
    'levinson_durbin',
    'bandwidth_expansion',
    'is_stable',
    'EPS',
    # Interpolation
    'interpolate',
    # Quantization
    'scalar_quantize',
    'vector_quantize',
    'split_vector_quantize',
    'dequantize_split',
    'split_segments',
    'SplitSegment',
    # Stability guard
    'enforce_lsf_stability',
    'min_lsf_gap',
]
