"""
FFT primitive used by the transform engine.

Thin wrapper around ``scipy.fft.fft``: complex-to-complex, any length,
``exp(-2j*pi*k*n/N)`` kernel, unnormalised. Power-of-two lengths are the
fast path; the engine always pads to one.
"""

from typing import Optional

import numpy as np
import scipy.fft


def next_power_of_two(n: int) -> int:
    """Smallest power of two >= n (1 for n <= 1)."""
    if n <= 1:
        return 1
    return 1 << (int(n) - 1).bit_length()


def forward_fft(buffer: np.ndarray, workers: Optional[int] = None) -> np.ndarray:
    """
    Forward complex FFT of a 1-D buffer.

    Parameters
    ----------
    buffer : np.ndarray
        Complex (or real) samples, shape (N,)
    workers : int, optional
        Threads scipy may use for this call, by default scipy's own default

    Returns
    -------
    spectrum : np.ndarray
        complex128 array of shape (N,); the input is left untouched
    """
    return scipy.fft.fft(np.asarray(buffer, dtype=np.complex128), workers=workers)
