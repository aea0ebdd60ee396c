"""
Transform engine for the fast CWT.

One forward FFT of the padded signal, then an independent daughter-wavelet
multiplication and FFT per scale, fanned out over a thread pool.
"""

from fastcwt.transform.engine import (
    TransformEngine,
    daughter_wavelet_multiplication,
    fcwt,
    mirror_spectrum,
)
from fastcwt.transform.fft import forward_fft, next_power_of_two

__all__ = [
    "TransformEngine",
    "daughter_wavelet_multiplication",
    "fcwt",
    "mirror_spectrum",
    "forward_fft",
    "next_power_of_two",
]
