#!/usr/bin/env python
"""
Demo: Morlet CWT of a synthetic chirp.

Usage:
    python scripts/demo_chirp.py
    python scripts/demo_chirp.py --config configs/audio.yaml --save results/chirp.h5
"""

import argparse
import logging
import sys
from pathlib import Path

import numpy as np

from fastcwt import CWTConfig, ScaleSet, TransformEngine, load_config
from fastcwt.io import save_result
from fastcwt.plotting import plot_scalogram

logger = logging.getLogger(__name__)


def make_chirp(duration: float, sampling_rate: int, f0: float, f1: float, seed: int = 42) -> np.ndarray:
    """Linear chirp from f0 to f1 with a little white noise."""
    rng = np.random.default_rng(seed)
    t = np.arange(int(duration * sampling_rate)) / sampling_rate
    phase = 2 * np.pi * (f0 * t + (f1 - f0) * t**2 / (2 * duration))
    return np.sin(phase) + 0.05 * rng.standard_normal(len(t))


def main():
    parser = argparse.ArgumentParser(description="Morlet CWT of a synthetic chirp")
    parser.add_argument("--config", type=str, help="YAML config file")
    parser.add_argument("--duration", type=float, default=1.0, help="Signal duration in seconds")
    parser.add_argument("--save", type=str, help="Write the result to this HDF5 file")
    parser.add_argument("--plot", type=str, default="results/chirp_cwt.png", help="Figure path")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    if args.config:
        config = load_config(args.config)
    else:
        config = CWTConfig(scale_type="log", sampling_rate=8000, fmin=20.0, fmax=4000.0, n_scales=200)

    signal = make_chirp(args.duration, config.sampling_rate, config.fmin * 5, config.fmax / 2)
    logger.info(f"Chirp: {len(signal)} samples at {config.sampling_rate} Hz")

    scales = ScaleSet.from_config(config)
    engine = TransformEngine.from_config(config)
    coefficients = engine.cwt(len(signal), signal, scales, progress=True)
    frequencies = scales.get_frequencies()

    if args.save:
        save_result(args.save, coefficients, frequencies, scales.get_scales(), attrs=config)

    Path(args.plot).parent.mkdir(parents=True, exist_ok=True)
    plot_scalogram(signal, coefficients, frequencies, config.sampling_rate, save_path=args.plot)
    logger.info(f"Plot saved to {args.plot}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
