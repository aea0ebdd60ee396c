"""
Morlet mother wavelet in the frequency domain.

The wavelet is never built in the time domain: the transform only needs its
spectral envelope, a Gaussian bump centred away from DC, sampled on the
padded FFT grid. Daughter wavelets are read from this array by index
scaling (see ``fastcwt.transform.engine.daughter_wavelet_multiplication``).
"""

import logging

import numpy as np

logger = logging.getLogger(__name__)

# sqrt(2*pi) * pi^(-1/4)
MORLET_NORM = np.sqrt(2.0 * np.pi) * (1.0 / np.pi) ** 0.25


class MotherWavelet:
    """
    Frequency-domain Morlet mother wavelet.

    Parameters
    ----------
    bandwidth : float, optional
        Morlet bandwidth parameter ``fb``, by default 1.0

    Attributes
    ----------
    width : int
        Size the envelope was last generated for (0 before ``generate``)
    mother : np.ndarray
        Real envelope of length ``width``
    imag_freq : bool
        Whether the daughter multiplication keeps the sign of the real part
        on the mirrored side (always False for Morlet)
    double_sided : bool
        Whether the daughter wavelet is applied to the upper end of the
        spectrum instead of the lower end (always False for Morlet)
    """

    def __init__(self, bandwidth: float = 1.0):
        if not np.isfinite(bandwidth) or bandwidth <= 0:
            raise ValueError(f"Wavelet bandwidth must be positive, got {bandwidth}")

        self.bandwidth = float(bandwidth)
        self.width = 0
        self.imag_freq = False
        self.double_sided = False
        self.mother = np.zeros(0, dtype=np.float64)

    @classmethod
    def create(cls, bandwidth: float) -> "MotherWavelet":
        """Create a Morlet wavelet with the given bandwidth."""
        return cls(bandwidth)

    def generate(self, size: int) -> np.ndarray:
        """
        (Re)compute the envelope for a working size.

        Any previously generated array is replaced.

        Parameters
        ----------
        size : int
            Number of frequency bins (the padded FFT length)

        Returns
        -------
        mother : np.ndarray
            Envelope of shape (size,)
        """
        if size < 0:
            raise ValueError(f"Wavelet size must be non-negative, got {size}")

        self.width = int(size)
        if self.width == 0:
            self.mother = np.zeros(0, dtype=np.float64)
            return self.mother

        angle_step = 2.0 * np.pi / self.width
        w = np.arange(self.width, dtype=np.float64)
        x = 2.0 * (w * angle_step) * self.bandwidth - 2.0 * np.pi * self.bandwidth
        self.mother = MORLET_NORM * np.exp(-(x ** 2) / 2.0)

        logger.debug(f"Morlet envelope generated: size={self.width}, fb={self.bandwidth}")
        return self.mother

    def __repr__(self) -> str:
        return f"MotherWavelet(bandwidth={self.bandwidth}, width={self.width})"
