"""
Tests for CWT configuration and YAML loading.
"""

import pytest
import yaml

from fastcwt.config import CWTConfig, config_from_dict, load_config


class TestCWTConfig:
    """Test CWT configuration."""

    def test_config_defaults(self):
        """Test default configuration values."""
        config = CWTConfig()

        assert config.bandwidth == 1.0
        assert config.scale_type == 'log'
        assert config.sampling_rate == 48000
        assert config.fmin == 20.0
        assert config.fmax == 20000.0
        assert config.n_scales == 100
        assert config.log_base == 2.0
        assert config.normalize is True
        assert config.max_workers is None
        assert config.fft_workers is None

    def test_config_custom(self):
        """Test custom configuration."""
        config = CWTConfig(
            bandwidth=2.0,
            scale_type='linfreq',
            sampling_rate=1000,
            fmin=1.0,
            fmax=400.0,
            n_scales=32,
            normalize=False,
        )

        assert config.bandwidth == 2.0
        assert config.scale_type == 'linfreq'
        assert config.sampling_rate == 1000
        assert config.n_scales == 32
        assert config.normalize is False

    def test_scale_type_normalized(self):
        assert CWTConfig(scale_type='LINEAR').scale_type == 'linear'

    def test_invalid_scale_type(self):
        with pytest.raises(ValueError):
            CWTConfig(scale_type='cubic')

    def test_invalid_max_workers(self):
        with pytest.raises(ValueError):
            CWTConfig(max_workers=0)


class TestLoadConfig:
    """Test building configs from dicts and YAML files."""

    def test_from_flat_dict(self):
        config = config_from_dict({'fmin': 5.0, 'n_scales': 8})

        assert config.fmin == 5.0
        assert config.n_scales == 8

    def test_from_cwt_section(self):
        config = config_from_dict({'cwt': {'scale_type': 'linear', 'sampling_rate': 1000}})

        assert config.scale_type == 'linear'
        assert config.sampling_rate == 1000

    def test_unknown_key(self):
        with pytest.raises(ValueError, match="Unknown"):
            config_from_dict({'wavelet': 'morl'})

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "cwt.yaml"
        with open(path, 'w') as f:
            yaml.safe_dump({'cwt': {'scale_type': 'linfreq', 'fmax': 10000.0, 'max_workers': 4}}, f)

        config = load_config(path)

        assert config.scale_type == 'linfreq'
        assert config.fmax == 10000.0
        assert config.max_workers == 4
        assert config.fmin == 20.0

    def test_load_empty_yaml(self, tmp_path):
        """Test an empty file gives the defaults."""
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert load_config(path) == CWTConfig()
