"""
Tests for the FFT primitive wrapper.
"""

import numpy as np
import pytest

from fastcwt.transform.fft import forward_fft, next_power_of_two


class TestNextPowerOfTwo:
    """Test power-of-two padding."""

    @pytest.mark.parametrize("n, expected", [
        (0, 1),
        (1, 1),
        (2, 2),
        (3, 4),
        (1000, 1024),
        (1024, 1024),
        (1025, 2048),
        (48000, 65536),
    ])
    def test_values(self, n, expected):
        assert next_power_of_two(n) == expected


class TestForwardFFT:
    """Test forward FFT results."""

    def test_matches_numpy(self):
        """Test results agree with numpy for a non power-of-two length."""
        rng = np.random.default_rng(0)
        x = rng.standard_normal(12) + 1j * rng.standard_normal(12)

        np.testing.assert_allclose(forward_fft(x), np.fft.fft(x), atol=1e-12)

    def test_kernel_sign(self):
        """Test the -i*2*pi/N kernel: a unit impulse at n=1 gives exp(-2j*pi*k/N)."""
        n = 8
        x = np.zeros(n, dtype=np.complex128)
        x[1] = 1.0

        expected = np.exp(-2j * np.pi * np.arange(n) / n)
        np.testing.assert_allclose(forward_fft(x), expected, atol=1e-12)

    def test_input_untouched(self):
        """Test the input buffer is not modified."""
        x = np.arange(8, dtype=np.complex128)
        original = x.copy()
        forward_fft(x)

        np.testing.assert_array_equal(x, original)

    def test_real_input_promoted(self):
        """Test real input returns a complex128 spectrum."""
        spectrum = forward_fft(np.ones(4))

        assert spectrum.dtype == np.complex128
        np.testing.assert_allclose(spectrum, [4, 0, 0, 0], atol=1e-12)

    def test_workers(self):
        """Test passing a worker count gives the same result."""
        x = np.random.default_rng(1).standard_normal(64)
        np.testing.assert_allclose(forward_fft(x, workers=2), forward_fft(x), atol=1e-12)
