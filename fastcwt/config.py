"""
Configuration for the fast continuous wavelet transform.

Parameters can be set directly on ``CWTConfig`` or read from a YAML file
with ``load_config``. The YAML layout mirrors the dataclass fields and may be
nested under a ``cwt:`` section:

    cwt:
      scale_type: linfreq
      sampling_rate: 48000
      fmin: 20.0
      fmax: 20000.0
      n_scales: 1000
"""

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

logger = logging.getLogger(__name__)

SCALE_TYPES = ("log", "linear", "linfreq")


@dataclass
class CWTConfig:
    """Configuration for the Morlet CWT.

    Defaults target audio-rate signals (20 Hz - 20 kHz at 48 kHz).
    """
    # Wavelet parameters
    bandwidth: float = 1.0  # Morlet bandwidth (fb)

    # Scale distribution
    scale_type: str = "log"  # 'log', 'linear' or 'linfreq'
    sampling_rate: int = 48000  # Hz
    fmin: float = 20.0
    fmax: float = 20000.0
    n_scales: int = 100
    log_base: float = 2.0  # only used by the 'log' law

    # Transform
    normalize: bool = True  # divide each row by the padded size
    max_workers: Optional[int] = None  # scale worker pool, None = executor default
    fft_workers: Optional[int] = None  # threads inside a single FFT call

    def __post_init__(self):
        self.scale_type = str(self.scale_type).lower()
        if self.scale_type not in SCALE_TYPES:
            raise ValueError(
                f"scale_type must be one of {SCALE_TYPES}, got '{self.scale_type}'"
            )
        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {self.max_workers}")


def config_from_dict(params: Dict[str, Any]) -> CWTConfig:
    """
    Build a CWTConfig from a plain dictionary.

    Parameters
    ----------
    params : Dict[str, Any]
        Either the config fields themselves or a mapping with a 'cwt' section

    Returns
    -------
    CWTConfig
        Validated configuration
    """
    params = params or {}
    if "cwt" in params:
        params = params["cwt"] or {}

    known = {f.name for f in fields(CWTConfig)}
    unknown = set(params) - known
    if unknown:
        raise ValueError(f"Unknown CWT config keys: {sorted(unknown)}")

    return CWTConfig(**params)


def load_config(path: Union[str, Path]) -> CWTConfig:
    """
    Load a CWTConfig from a YAML file.

    Parameters
    ----------
    path : str or Path
        YAML file path

    Returns
    -------
    CWTConfig
        Validated configuration
    """
    with open(path, 'r') as f:
        params = yaml.safe_load(f)

    config = config_from_dict(params)
    logger.info(f"Loaded CWT config from {path}: {config}")
    return config
