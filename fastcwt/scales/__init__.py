"""
Scale distributions for the fast CWT.

Turns a frequency band into an ordered array of wavelet scales using a
logarithmic, linear, or linear-in-frequency law.
"""

from fastcwt.scales.scale_set import (
    ScaleSet,
    ScaleType,
    log_scales,
    linear_scales,
    linfreq_scales,
)

__all__ = [
    "ScaleSet",
    "ScaleType",
    "log_scales",
    "linear_scales",
    "linfreq_scales",
]
