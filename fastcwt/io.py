"""
HDF5 storage for CWT results.

File layout:
- coefficients : complex (n_scales, padded_size)
- frequencies  : float (n_scales,)
- scales       : float (n_scales,)
- attrs        : transform parameters (e.g. a CWTConfig), None values skipped
"""

import logging
from dataclasses import asdict, is_dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import h5py
import numpy as np

logger = logging.getLogger(__name__)


def save_result(
    path: Union[str, Path],
    coefficients: np.ndarray,
    frequencies: np.ndarray,
    scales: np.ndarray,
    attrs: Optional[Any] = None,
) -> Path:
    """
    Save a CWT result to an HDF5 file.

    Parameters
    ----------
    path : str or Path
        Output file, parent directories are created
    coefficients : np.ndarray
        CWT coefficients (n_scales x padded_size)
    frequencies : np.ndarray
        Frequency of each row in Hz
    scales : np.ndarray
        Scale of each row
    attrs : dict or dataclass, optional
        Parameters stored as file attributes

    Returns
    -------
    Path
        The written file
    """
    path = Path(path)
    if len(frequencies) != len(coefficients) or len(scales) != len(coefficients):
        raise ValueError(
            f"Row count mismatch: {len(coefficients)} rows, {len(frequencies)} frequencies, "
            f"{len(scales)} scales"
        )

    if is_dataclass(attrs):
        attrs = asdict(attrs)

    path.parent.mkdir(parents=True, exist_ok=True)
    with h5py.File(path, "w") as f:
        f.create_dataset("coefficients", data=coefficients, compression="gzip")
        f.create_dataset("frequencies", data=frequencies)
        f.create_dataset("scales", data=scales)
        for key, value in (attrs or {}).items():
            if value is not None:
                f.attrs[key] = value

    logger.info(f"Saved CWT result {coefficients.shape} to {path}")
    return path


def load_result(path: Union[str, Path]) -> Tuple[np.ndarray, np.ndarray, np.ndarray, Dict[str, Any]]:
    """
    Load a CWT result written by ``save_result``.

    Returns
    -------
    coefficients, frequencies, scales : np.ndarray
        Stored arrays
    attrs : Dict[str, Any]
        Stored parameters
    """
    with h5py.File(path, "r") as f:
        coefficients = f["coefficients"][:]
        frequencies = f["frequencies"][:]
        scales = f["scales"][:]
        attrs = dict(f.attrs)

    logger.debug(f"Loaded CWT result {coefficients.shape} from {path}")
    return coefficients, frequencies, scales, attrs
