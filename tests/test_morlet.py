"""
Tests for the frequency-domain Morlet mother wavelet.
"""

import math

import numpy as np
import pytest

from fastcwt.wavelets.morlet import MotherWavelet, MORLET_NORM


class TestMotherWavelet:
    """Test MotherWavelet construction and generation."""

    def test_initialization(self):
        """Test a fresh wavelet has no envelope yet."""
        wavelet = MotherWavelet(1.5)

        assert wavelet.bandwidth == 1.5
        assert wavelet.width == 0
        assert len(wavelet.mother) == 0
        assert wavelet.imag_freq is False
        assert wavelet.double_sided is False

    def test_create_alias(self):
        """Test create() builds the same wavelet as the constructor."""
        wavelet = MotherWavelet.create(2.0)
        assert isinstance(wavelet, MotherWavelet)
        assert wavelet.bandwidth == 2.0

    @pytest.mark.parametrize("bandwidth", [0.0, -1.0, float("nan"), float("inf")])
    def test_invalid_bandwidth(self, bandwidth):
        """Test non-positive or non-finite bandwidth is rejected."""
        with pytest.raises(ValueError):
            MotherWavelet(bandwidth)

    def test_generate_matches_closed_form(self):
        """Test size=8, fb=1 against the Gaussian formula evaluated by hand."""
        wavelet = MotherWavelet(1.0)
        mother = wavelet.generate(8)

        norm = math.sqrt(2 * math.pi) * (1 / math.pi) ** 0.25
        expected = []
        for w in range(8):
            x = 2 * (w * 2 * math.pi / 8) * 1.0 - 2 * math.pi * 1.0
            expected.append(norm * math.exp(-(x ** 2) / 2))

        assert mother.shape == (8,)
        np.testing.assert_allclose(mother, expected, rtol=1e-9)

    def test_peak_and_symmetry(self):
        """Test the envelope peaks at the centre bin and is symmetric around it."""
        wavelet = MotherWavelet(1.0)
        mother = wavelet.generate(8)

        assert np.isclose(mother[4], MORLET_NORM)
        assert np.argmax(mother) == 4
        for k in range(1, 4):
            assert np.isclose(mother[4 - k], mother[4 + k])

    def test_norm_constant(self):
        """Test the normalisation constant value."""
        assert np.isclose(MORLET_NORM, np.sqrt(2 * np.pi) * np.pi ** -0.25)

    def test_bandwidth_narrows_envelope(self):
        """Test a larger bandwidth gives a narrower bump."""
        wide = MotherWavelet(0.5).generate(256)
        narrow = MotherWavelet(2.0).generate(256)

        assert np.sum(narrow > 0.5 * MORLET_NORM) < np.sum(wide > 0.5 * MORLET_NORM)

    def test_generate_replaces_previous(self):
        """Test regeneration overwrites instead of appending."""
        wavelet = MotherWavelet(1.0)
        wavelet.generate(16)
        mother = wavelet.generate(8)

        assert wavelet.width == 8
        assert len(wavelet.mother) == 8
        assert mother is wavelet.mother

    def test_generate_zero_size(self):
        """Test size 0 gives an empty envelope without error."""
        wavelet = MotherWavelet(1.0)
        wavelet.generate(8)
        mother = wavelet.generate(0)

        assert wavelet.width == 0
        assert mother.shape == (0,)

    def test_generate_negative_size(self):
        """Test negative sizes are rejected."""
        with pytest.raises(ValueError):
            MotherWavelet(1.0).generate(-1)

    def test_envelope_positive(self):
        """Test the envelope is non-negative and finite."""
        mother = MotherWavelet(1.0).generate(64)
        assert np.all(mother >= 0)
        assert np.all(np.isfinite(mother))
