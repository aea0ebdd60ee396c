"""
Fast continuous wavelet transform engine.

FFT-based Morlet CWT after Arts & van den Broek, "The fast continuous wavelet
transformation (fCWT) for real-time, high-quality, noise-resistant
time-frequency analysis", Nat Comput Sci 2, 47-58 (2022).

Pipeline:
1. Zero-pad the signal to the next power of two and take one forward FFT
2. Generate the Morlet envelope on the padded grid
3. Mirror the lower half of the spectrum onto the upper half
4. Per scale, on a private copy of the spectrum:
   multiply by the daughter wavelet, FFT again, optionally normalise

Step 4 is independent across scales and runs on a thread pool. The shared
spectrum and envelope are frozen before the pool starts; every task owns
its copy and its output row.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Optional, Tuple

import numpy as np
from tqdm import tqdm

from fastcwt.exceptions import DimensionMismatchError
from fastcwt.scales.scale_set import ScaleSet, ScaleType
from fastcwt.transform.fft import forward_fft, next_power_of_two
from fastcwt.wavelets.morlet import MotherWavelet

logger = logging.getLogger(__name__)


def mirror_spectrum(spectrum: np.ndarray) -> np.ndarray:
    """
    Copy bins [1, N/2) onto bins (N/2, N-1] in reverse order, in place.

    ``spectrum[N - i] = spectrum[i]`` for ``1 <= i < N/2``. DC and the
    N/2 bin are left alone.
    """
    size = len(spectrum)
    half = size >> 1
    if half > 1:
        spectrum[size - half + 1:] = spectrum[1:half][::-1]
    return spectrum


def daughter_wavelet_multiplication(
    buffer: np.ndarray,
    mother: np.ndarray,
    scale: float,
    i_size: int,
    imaginary: bool = False,
    double_sided: bool = False,
) -> np.ndarray:
    """
    Multiply a spectrum by the daughter wavelet for one scale, in place.

    The daughter wavelet is the mother envelope read with stride
    ``scale / 2``. Only the first ``min(i_size/2, 2*i_size/scale)`` bins
    (or their mirror images at the top of ``[0, i_size)`` when
    ``double_sided``) are touched; all other bins keep the raw spectrum.

    Parameters
    ----------
    buffer : np.ndarray
        Complex spectrum, modified in place
    mother : np.ndarray
        Mother envelope, at least ``i_size`` long
    scale : float
        Wavelet scale (> 0)
    i_size : int
        Unpadded signal length
    imaginary : bool, optional
        Keep the sign of the real part on the mirrored side, by default False
    double_sided : bool, optional
        Apply to bins ``i_size-1-n`` instead of ``n``, by default False

    Returns
    -------
    buffer : np.ndarray
        The same buffer, for chaining
    """
    if not np.isfinite(scale) or scale <= 0:
        raise ValueError(f"Scale must be positive and finite, got {scale}")

    endpoint = min(int(i_size / 2), int(i_size * 2.0 / scale))
    if endpoint <= 0:
        return buffer

    step = scale / 2.0
    maximum = i_size - 1

    n = np.arange(endpoint)
    tmp = np.minimum(maximum, np.floor(step * n).astype(np.int64))
    weights = mother[tmp]

    if double_sided:
        idx = i_size - 1 - n
        if imaginary:
            buffer.real[idx] *= weights
        else:
            buffer.real[idx] *= -weights
        buffer.imag[idx] *= weights
    else:
        buffer[:endpoint] *= weights

    return buffer


class TransformEngine:
    """
    Morlet CWT over a set of scales.

    Parameters
    ----------
    wavelet : MotherWavelet
        Mother wavelet; the engine regenerates its envelope on every call
    normalize : bool, optional
        Divide every output row by the padded size, by default True
    max_workers : int, optional
        Threads used to process scales. 1 runs serially in the calling
        thread; None lets the executor pick, by default None
    fft_workers : int, optional
        Threads scipy may use inside one FFT, by default None

    Examples
    --------
    >>> wavelet = MotherWavelet(1.0)
    >>> scales = ScaleSet('linfreq', 48000, 20.0, 20000.0, 100)
    >>> engine = TransformEngine(wavelet, normalize=True)
    >>> coefficients = engine.cwt(4800, signal, scales)
    >>> coefficients.shape
    (100, 8192)
    """

    def __init__(
        self,
        wavelet: MotherWavelet,
        normalize: bool = True,
        max_workers: Optional[int] = None,
        fft_workers: Optional[int] = None,
    ):
        if max_workers is not None and max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {max_workers}")

        self.wavelet = wavelet
        self.normalize = normalize
        self.max_workers = max_workers
        self.fft_workers = fft_workers

        logger.info(
            f"TransformEngine initialized: fb={wavelet.bandwidth}, normalize={normalize}, "
            f"max_workers={max_workers}"
        )

    @classmethod
    def create(cls, wavelet: MotherWavelet, normalize: bool) -> "TransformEngine":
        """Create an engine with default threading."""
        return cls(wavelet, normalize=normalize)

    @classmethod
    def from_config(cls, config) -> "TransformEngine":
        """Build an engine (and its wavelet) from a ``CWTConfig``."""
        return cls(
            MotherWavelet(config.bandwidth),
            normalize=config.normalize,
            max_workers=config.max_workers,
            fft_workers=config.fft_workers,
        )

    def _transform_scale(
        self,
        spectrum: np.ndarray,
        mother: np.ndarray,
        scale: float,
        target_length: int,
        padded_size: int,
    ) -> np.ndarray:
        """Daughter multiplication + FFT (+ normalisation) for one scale."""
        row = spectrum.copy()
        daughter_wavelet_multiplication(
            row,
            mother,
            scale,
            target_length,
            self.wavelet.imag_freq,
            self.wavelet.double_sided,
        )
        row = forward_fft(row, workers=self.fft_workers)
        if self.normalize:
            row /= padded_size
        return row

    def cwt(
        self,
        target_length: int,
        signal: np.ndarray,
        scales: ScaleSet,
        progress: bool = False,
    ) -> np.ndarray:
        """
        Continuous wavelet transform of a real signal.

        Parameters
        ----------
        target_length : int
            Analysis length in samples; the output is padded to the next
            power of two
        signal : np.ndarray
            Real 1-D signal, at most ``target_length`` samples
        scales : ScaleSet
            Scales to analyse; row ``i`` of the result belongs to scale ``i``
        progress : bool, optional
            Show a tqdm progress bar over scales, by default False

        Returns
        -------
        coefficients : np.ndarray
            complex128 array of shape (num_scales, padded_size)

        Raises
        ------
        DimensionMismatchError
            If the signal is empty, not 1-D, or longer than target_length
        """
        signal = np.asarray(signal, dtype=np.float64)

        if target_length < 1:
            raise DimensionMismatchError(f"target_length must be >= 1, got {target_length}")
        if signal.ndim != 1:
            raise DimensionMismatchError(f"Input signal must be 1-D, got shape {signal.shape}")
        if len(signal) == 0:
            raise DimensionMismatchError("Input signal is empty")
        if len(signal) > target_length:
            raise DimensionMismatchError(
                f"Input signal has {len(signal)} samples, more than target_length={target_length}"
            )
        if len(signal) < target_length:
            logger.warning(
                f"Signal shorter than target_length ({len(signal)} < {target_length}), zero-padding"
            )
        if not np.any(signal):
            logger.warning("Input signal is all zeros, every CWT row will be zero")

        padded_size = next_power_of_two(target_length)
        num_scales = scales.num_scales
        logger.debug(f"CWT: {len(signal)} samples -> padded size {padded_size}, {num_scales} scales")

        buffer = np.zeros(padded_size, dtype=np.complex128)
        buffer[:len(signal)] = signal

        try:
            spectrum = forward_fft(buffer, workers=self.fft_workers)
        except Exception as e:
            logger.error(f"Forward FFT failed: {e}")
            raise

        mother = self.wavelet.generate(padded_size).view()
        mother.setflags(write=False)

        mirror_spectrum(spectrum)
        spectrum.setflags(write=False)

        scale_values = scales.scales
        coefficients = np.empty((num_scales, padded_size), dtype=np.complex128)

        if self.max_workers == 1 or num_scales == 1:
            indices = range(num_scales)
            if progress:
                indices = tqdm(indices, total=num_scales, desc="CWT scales")
            for i in indices:
                coefficients[i] = self._transform_scale(
                    spectrum, mother, float(scale_values[i]), target_length, padded_size
                )
        else:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                futures = {
                    executor.submit(
                        self._transform_scale,
                        spectrum,
                        mother,
                        float(scale_values[i]),
                        target_length,
                        padded_size,
                    ): i
                    for i in range(num_scales)
                }
                completed = as_completed(futures)
                if progress:
                    completed = tqdm(completed, total=num_scales, desc="CWT scales")
                for future in completed:
                    coefficients[futures[future]] = future.result()

        logger.info(f"CWT completed: shape={coefficients.shape}, normalize={self.normalize}")
        return coefficients


def fcwt(
    signal: np.ndarray,
    fs: int,
    fmin: float,
    fmax: float,
    n_scales: int,
    scale_type: ScaleType = "log",
    bandwidth: float = 1.0,
    normalize: bool = True,
    max_workers: Optional[int] = None,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    One-call Morlet CWT of a whole signal.

    Parameters
    ----------
    signal : np.ndarray
        Real 1-D input signal
    fs : int
        Sampling rate in Hz
    fmin, fmax : float
        Frequency range in Hz (fmax at most fs/2)
    n_scales : int
        Number of scales
    scale_type : ScaleType, optional
        'log', 'linear' or 'linfreq', by default 'log'
    bandwidth : float, optional
        Morlet bandwidth, by default 1.0
    normalize : bool, optional
        Divide rows by the padded size, by default True
    max_workers : int, optional
        Scale worker threads, by default None

    Returns
    -------
    Tuple[np.ndarray, np.ndarray, np.ndarray]
        Tuple containing:
        - coefficients: complex CWT, shape (n_scales, next_power_of_two(len(signal)))
        - frequencies: frequency of each row in Hz
        - scales: scale of each row
    """
    signal = np.asarray(signal, dtype=np.float64)
    scale_set = ScaleSet(scale_type, fs, fmin, fmax, n_scales)
    engine = TransformEngine(MotherWavelet(bandwidth), normalize=normalize, max_workers=max_workers)

    coefficients = engine.cwt(len(signal), signal, scale_set)
    return coefficients, scale_set.get_frequencies(), scale_set.get_scales()
