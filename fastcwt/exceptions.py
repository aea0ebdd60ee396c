"""
Exceptions raised by fastcwt.

All errors derive from ``CWTError``, which is itself a ``ValueError`` so that
callers validating input with ``except ValueError`` keep working.
"""


class CWTError(ValueError):
    """Base class for all fastcwt errors."""


class InvalidRangeError(CWTError):
    """Requested frequency range cannot be represented at the sampling rate."""


class InvalidCountError(CWTError):
    """Number of scales (or frequencies) requested is not usable."""


class DimensionMismatchError(CWTError):
    """Input signal is inconsistent with the requested target length."""
