"""
Scale arrays for the fast continuous wavelet transform.

A ScaleSet maps a requested frequency band onto wavelet scales
(``scale = sampling_rate / frequency``). Three distribution laws are
supported:

- 'log'     : scales evenly spaced in log(scale), highest frequency first
- 'linfreq' : scales evenly spaced from fs/fmax upwards, highest frequency first
- 'linear'  : fs/fmin plus a linear step in Hz, filled back to front

Example: a signal sampled at 100 Hz analysed over 0.1-50 Hz needs scales
from 2 to 1000.
"""

import logging
from typing import Literal, Optional

import numpy as np

from fastcwt.exceptions import InvalidCountError, InvalidRangeError

logger = logging.getLogger(__name__)


ScaleType = Literal["log", "linear", "linfreq"]


def _validate(sampling_rate, fmin: float, fmax: float, n_scales) -> None:
    """Reject frequency bands the sampling rate cannot represent."""
    if sampling_rate <= 0 or int(sampling_rate) != sampling_rate:
        raise InvalidRangeError(
            f"Sampling rate must be a positive integer, got {sampling_rate}"
        )
    if not (np.isfinite(fmin) and np.isfinite(fmax)) or fmin <= 0:
        raise InvalidRangeError(
            f"Frequencies must be positive and finite, got fmin={fmin}, fmax={fmax}"
        )
    if fmin >= fmax:
        raise InvalidRangeError(f"fmin ({fmin}) must be lower than fmax ({fmax})")
    if fmax > sampling_rate / 2:
        raise InvalidRangeError(
            f"Max frequency {fmax} Hz cannot be higher than the Nyquist "
            f"frequency ({sampling_rate / 2} Hz)"
        )
    if int(n_scales) != n_scales or n_scales < 1:
        raise InvalidCountError(f"Number of scales must be >= 1, got {n_scales}")


def log_scales(
    sampling_rate: int,
    fmin: float,
    fmax: float,
    n_scales: int,
    base: float = 2.0,
) -> np.ndarray:
    """
    Scales evenly spaced in log-space between fs/fmax and fs/fmin.

    Both ends are included. A single scale collapses onto fs/fmax.

    Returns
    -------
    scales : np.ndarray
        Ascending scales (descending frequencies), shape (n_scales,)
    """
    if base <= 0 or base == 1:
        raise ValueError(f"Logarithm base must be positive and != 1, got {base}")

    s0 = sampling_rate / fmax
    s1 = sampling_rate / fmin

    power0 = np.log(s0) / np.log(base)
    power1 = np.log(s1) / np.log(base)

    if n_scales == 1:
        powers = np.array([power0])
    else:
        powers = power0 + np.arange(n_scales) * (power1 - power0) / (n_scales - 1)

    return np.power(base, powers)


def linear_scales(sampling_rate: int, fmin: float, fmax: float, n_scales: int) -> np.ndarray:
    """
    Linear law: ``scales[n-1-i] = fs/fmin + i * (fmax - fmin) / n``.

    The step is taken in Hz but added to a scale value, so every scale is
    at least fs/fmin. Index 0 holds the largest scale.
    """
    df = fmax - fmin
    values = sampling_rate / fmin + (df / n_scales) * np.arange(n_scales)
    return values[::-1].copy()


def linfreq_scales(sampling_rate: int, fmin: float, fmax: float, n_scales: int) -> np.ndarray:
    """
    Scales stepping linearly from fs/fmax towards fs/fmin.

    The fs/fmin end itself is not reached (step is ``(s1 - s0) / n``).
    """
    s0 = sampling_rate / fmax
    s1 = sampling_rate / fmin
    return s0 + ((s1 - s0) / n_scales) * np.arange(n_scales)


SCALE_BUILDERS = {
    "log": log_scales,
    "linear": linear_scales,
    "linfreq": linfreq_scales,
}


class ScaleSet:
    """
    Ordered wavelet scales covering a frequency band.

    Scale ``i`` drives output row ``i`` of the transform.

    Parameters
    ----------
    scale_type : ScaleType
        Distribution law: 'log', 'linear' or 'linfreq'
    sampling_rate : int
        Sampling rate in Hz
    fmin : float
        Beginning of the frequency range in Hz
    fmax : float
        End of the frequency range in Hz (at most Nyquist)
    n_scales : int
        Number of wavelets to generate across the range
    log_base : float, optional
        Base for the 'log' law, by default 2.0

    Raises
    ------
    InvalidRangeError
        If the band is empty, non-positive, or exceeds Nyquist
    InvalidCountError
        If n_scales < 1

    Examples
    --------
    >>> scales = ScaleSet('linfreq', 48000, 20.0, 20000.0, 5)
    >>> float(scales.get_scales()[0])
    2.4
    """

    def __init__(
        self,
        scale_type: ScaleType,
        sampling_rate: int,
        fmin: float,
        fmax: float,
        n_scales: int,
        log_base: float = 2.0,
    ):
        scale_type = str(scale_type).lower()
        if scale_type not in SCALE_BUILDERS:
            raise ValueError(
                f"Unknown scale type '{scale_type}', expected 'log', 'linear' or 'linfreq'"
            )
        _validate(sampling_rate, fmin, fmax, n_scales)

        self.scale_type = scale_type
        self.sampling_rate = int(sampling_rate)
        self.fmin = float(fmin)
        self.fmax = float(fmax)
        self.num_scales = int(n_scales)

        builder = SCALE_BUILDERS[scale_type]
        if scale_type == "log":
            scales = builder(self.sampling_rate, self.fmin, self.fmax, self.num_scales, base=log_base)
        else:
            scales = builder(self.sampling_rate, self.fmin, self.fmax, self.num_scales)

        scales = np.asarray(scales, dtype=np.float64)
        scales.setflags(write=False)
        self._scales = scales

        logger.debug(
            f"ScaleSet[{scale_type}]: {self.num_scales} scales, "
            f"{scales.min():.4g}-{scales.max():.4g} ({self.fmin}-{self.fmax} Hz @ {self.sampling_rate} Hz)"
        )

    @classmethod
    def create(
        cls,
        scale_type: ScaleType,
        sampling_rate: int,
        fmin: float,
        fmax: float,
        n_scales: int,
    ) -> "ScaleSet":
        """Create a scale set (same as calling the constructor)."""
        return cls(scale_type, sampling_rate, fmin, fmax, n_scales)

    @classmethod
    def from_config(cls, config) -> "ScaleSet":
        """Build a scale set from a ``CWTConfig``."""
        return cls(
            config.scale_type,
            config.sampling_rate,
            config.fmin,
            config.fmax,
            config.n_scales,
            log_base=config.log_base,
        )

    @property
    def scales(self) -> np.ndarray:
        """Read-only view of the scales."""
        return self._scales

    def get_scales(self) -> np.ndarray:
        """Return a copy of the scales."""
        return self._scales.copy()

    def get_frequencies(self, count: Optional[int] = None) -> np.ndarray:
        """
        Convert scales back to frequencies (``fs / scale``).

        Parameters
        ----------
        count : int, optional
            Number of leading scales to convert, by default all of them

        Returns
        -------
        frequencies : np.ndarray
            Frequencies in Hz, in scale order
        """
        if count is None:
            count = self.num_scales
        if count < 0 or count > self.num_scales:
            raise InvalidCountError(
                f"Requested {count} frequencies from a set of {self.num_scales} scales"
            )
        return self.sampling_rate / self._scales[:count]

    def __len__(self) -> int:
        return self.num_scales

    def __repr__(self) -> str:
        return (
            f"ScaleSet(scale_type='{self.scale_type}', sampling_rate={self.sampling_rate}, "
            f"fmin={self.fmin}, fmax={self.fmax}, n_scales={self.num_scales})"
        )
