"""
Scalogram plotting.
"""

from typing import Optional

import numpy as np


def plot_scalogram(
    signal: np.ndarray,
    coefficients: np.ndarray,
    frequencies: np.ndarray,
    sampling_rate: float,
    save_path: Optional[str] = None,
    log_frequency: bool = True,
):
    """
    Plot a time series and the magnitude of its CWT.

    Parameters
    ----------
    signal : np.ndarray
        Time-domain signal
    coefficients : np.ndarray
        CWT coefficients (n_scales x padded_size); only the first
        len(signal) columns are shown
    frequencies : np.ndarray
        Frequency of each row in Hz
    sampling_rate : float
        Sampling rate in Hz
    save_path : str, optional
        Path to save figure
    log_frequency : bool, optional
        Use a logarithmic frequency axis, by default True

    Returns
    -------
    matplotlib.figure.Figure
    """
    import matplotlib.pyplot as plt

    times = np.arange(len(signal)) / sampling_rate
    magnitude = np.abs(coefficients[:, :len(signal)])

    # pcolormesh wants ascending y
    order = np.argsort(frequencies)

    fig, (ax1, ax2) = plt.subplots(2, 1, figsize=(14, 10))

    ax1.plot(times, signal, 'b-', linewidth=0.5)
    ax1.set_xlabel('Time [s]')
    ax1.set_ylabel('Amplitude')
    ax1.set_title('Input Signal')
    ax1.grid(True, alpha=0.3)

    im = ax2.pcolormesh(
        times,
        frequencies[order],
        magnitude[order],
        shading='auto',
        cmap='viridis'
    )
    if log_frequency:
        ax2.set_yscale('log')
    ax2.set_xlabel('Time [s]')
    ax2.set_ylabel('Frequency [Hz]')
    ax2.set_title('Morlet CWT Magnitude')
    plt.colorbar(im, ax=ax2, label='|CWT coefficient|')

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=150, bbox_inches='tight')

    return fig
