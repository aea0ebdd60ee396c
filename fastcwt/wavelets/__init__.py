"""
Mother wavelets for the fast CWT.

Only the Morlet wavelet is provided; it is generated directly in the
frequency domain on the padded FFT grid.
"""

from fastcwt.wavelets.morlet import MotherWavelet, MORLET_NORM

__all__ = [
    "MotherWavelet",
    "MORLET_NORM",
]
