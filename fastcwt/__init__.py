"""
fastcwt: fast continuous wavelet transform with a Morlet wavelet.

Based on the fCWT algorithm of Arts & van den Broek (2022): one forward FFT
of the signal, then per scale a frequency-domain multiplication by the
daughter wavelet and another FFT pass.
"""

from fastcwt.config import CWTConfig, load_config
from fastcwt.exceptions import (
    CWTError,
    DimensionMismatchError,
    InvalidCountError,
    InvalidRangeError,
)
from fastcwt.scales import ScaleSet, ScaleType
from fastcwt.transform import TransformEngine, fcwt
from fastcwt.wavelets import MotherWavelet

__version__ = "0.1.0"

__all__ = [
    "CWTConfig",
    "load_config",
    "CWTError",
    "DimensionMismatchError",
    "InvalidCountError",
    "InvalidRangeError",
    "ScaleSet",
    "ScaleType",
    "TransformEngine",
    "fcwt",
    "MotherWavelet",
]
