"""
Configuration for the LPC front end.

Settings live in a YAML file (see configs/default.yaml) and are loaded into
an LPCConfig. The numeric kernels trust their buffer sizes; validate() is the
one place where orders, ranges and split descriptors are checked.
"""

from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Dict, List, Optional, Union

import yaml

from .lpc_core.lsf import LSF_N_PASSES, LSF_MIN_GAP, LSF_HALF_GAP, LSF_MIN, LSF_MAX
from .lpc_core.quantize import SplitSegment, split_segments


@dataclass
class LPCConfig:
    """Analysis and quantization settings."""
    order: int = 10
    frame_length: int = 240
    chirp: float = 0.9025
    # LSF stability guard
    lsf_n_passes: int = LSF_N_PASSES
    lsf_min_gap: float = LSF_MIN_GAP
    lsf_half_gap: float = LSF_HALF_GAP
    lsf_min: float = LSF_MIN
    lsf_max: float = LSF_MAX
    # Split VQ layout of the LSF vector
    split_dims: List[int] = field(default_factory=lambda: [3, 3, 4])
    split_sizes: List[int] = field(default_factory=lambda: [64, 128, 128])

    @classmethod
    def from_dict(cls, config: Optional[Dict]) -> 'LPCConfig':
        """Build a config from the nested YAML layout; missing keys keep defaults."""
        if not isinstance(config, dict):
            return cls()

        kwargs = {}
        for key in ('order', 'frame_length', 'chirp'):
            if config.get(key, None) is not None:
                kwargs[key] = config[key]

        lsf = config.get('lsf', {}) or {}
        for yaml_key, attr in (('n_passes', 'lsf_n_passes'), ('min_gap', 'lsf_min_gap'),
                               ('half_gap', 'lsf_half_gap'), ('min', 'lsf_min'),
                               ('max', 'lsf_max')):
            if lsf.get(yaml_key, None) is not None:
                kwargs[attr] = lsf[yaml_key]

        split_vq = config.get('split_vq', {}) or {}
        if split_vq.get('dims', None) is not None:
            kwargs['split_dims'] = [int(d) for d in split_vq['dims']]
        if split_vq.get('sizes', None) is not None:
            kwargs['split_sizes'] = [int(s) for s in split_vq['sizes']]

        return cls(**kwargs)

    def validate(self) -> 'LPCConfig':
        """Check parameter consistency; raises ValueError on the first problem."""
        if self.order < 1:
            raise ValueError(f"LPC order must be >= 1, got {self.order}")
        if self.frame_length <= self.order:
            raise ValueError(f"frame_length ({self.frame_length}) must exceed order ({self.order})")
        if not 0.0 < self.chirp <= 1.0:
            raise ValueError(f"Chirp factor must be in (0, 1], got {self.chirp}")
        if self.lsf_n_passes < 0:
            raise ValueError(f"lsf.n_passes must be >= 0, got {self.lsf_n_passes}")
        if self.lsf_min >= self.lsf_max:
            raise ValueError(f"lsf.min ({self.lsf_min}) must be below lsf.max ({self.lsf_max})")
        if self.lsf_min_gap <= 0 or self.lsf_half_gap <= 0:
            raise ValueError("lsf.min_gap and lsf.half_gap must be positive")
        if len(self.split_dims) != len(self.split_sizes):
            raise ValueError(
                f"split_vq.dims has {len(self.split_dims)} entries but "
                f"split_vq.sizes has {len(self.split_sizes)}"
            )
        if any(d < 1 for d in self.split_dims) or any(s < 1 for s in self.split_sizes):
            raise ValueError("split_vq dims and sizes must be positive")
        if sum(self.split_dims) != self.order:
            raise ValueError(
                f"split_vq.dims sum to {sum(self.split_dims)}, expected the LPC order {self.order}"
            )
        return self

    @property
    def segments(self) -> List[SplitSegment]:
        return split_segments(self.split_dims, self.split_sizes)

    @property
    def codebook_length(self) -> int:
        """Number of values in the concatenated split codebook."""
        return sum(d * s for d, s in zip(self.split_dims, self.split_sizes))

    def to_dict(self) -> Dict:
        return asdict(self)


def load_config(config_path: Union[str, Path]) -> LPCConfig:
    """Load and validate configuration from a YAML file."""
    with open(config_path, 'r') as f:
        return LPCConfig.from_dict(yaml.safe_load(f)).validate()
