"""
Signal Lab - Configuration Tests
"""

import pytest
from pydantic import ValidationError

from signal_lab.config import (
    PRESETS,
    GeneratorConfig,
    NoiseConfig,
    SignalConfig,
    SignalLabConfig,
    SpectrumConfig,
)
from signal_lab.config import defaults


class TestSchema:
    """Tests for the pydantic configuration models."""

    def test_defaults(self):
        """Test root config defaults mirror the library defaults."""
        config = SignalLabConfig()

        assert config.signal.sampling_frequency_hz == defaults.DEFAULT_SAMPLING_FREQ_HZ
        assert config.signal.duration_s == defaults.DEFAULT_DURATION_SECONDS
        assert config.generator.waveform == "sine"
        assert config.generator.clamp_value == defaults.DEFAULT_CLAMP_VALUE
        assert config.noise.enabled is False
        assert config.analysis.inaccuracy == defaults.DEFAULT_INACCURACY
        assert config.analysis.integration_method == "trapezoidal"
        assert config.analysis.differentiation_method == "central_and_edges"
        assert config.spectrum.step_frequency_hz == 0.5
        assert config.output.output_path == "signal.txt"

    @pytest.mark.parametrize(
        "model,kwargs",
        [
            (SignalConfig, {"sampling_frequency_hz": 0.0}),
            (SignalConfig, {"duration_s": -1.0}),
            (GeneratorConfig, {"waveform": "square"}),
            (GeneratorConfig, {"clamp_value": 0.0}),
            (NoiseConfig, {"noise_amplitude": -0.1}),
            (NoiseConfig, {"noise_type": "blue"}),
            (SpectrumConfig, {"step_frequency_hz": 0.0}),
        ],
    )
    def test_field_constraints(self, model, kwargs):
        """Test invalid field values are rejected."""
        with pytest.raises(ValidationError):
            model(**kwargs)

    def test_spectrum_range(self):
        """Test spectrum start must be below its end."""
        with pytest.raises(ValidationError):
            SpectrumConfig(from_frequency_hz=10.0, to_frequency_hz=5.0)

        config = SpectrumConfig(from_frequency_hz=1.0, to_frequency_hz=2.0)
        assert config.to_frequency_hz == 2.0

    def test_yaml_round_trip(self, tmp_path):
        """Test config survives a YAML save/load."""
        path = tmp_path / "config.yaml"
        config = SignalLabConfig(
            signal=SignalConfig(oscillation_frequency_hz=12.0, amplitude=2.5),
            noise=NoiseConfig(enabled=True, seed=5),
        )

        config.to_yaml(str(path))
        loaded = SignalLabConfig.from_yaml(str(path))

        assert loaded == config

    def test_partial_yaml(self, tmp_path):
        """Test missing sections fall back to defaults."""
        path = tmp_path / "partial.yaml"
        path.write_text("generator:\n  waveform: cosine\n")

        config = SignalLabConfig.from_yaml(str(path))

        assert config.generator.waveform == "cosine"
        assert config.signal.sampling_frequency_hz == defaults.DEFAULT_SAMPLING_FREQ_HZ

    def test_empty_yaml(self, tmp_path):
        """Test an empty file yields the default configuration."""
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert SignalLabConfig.from_yaml(str(path)) == SignalLabConfig()

    def test_yaml_list_rejected(self, tmp_path):
        """Test a YAML list at the top level is a validation error."""
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n")

        with pytest.raises(ValidationError):
            SignalLabConfig.from_yaml(str(path))

    def test_negative_seed(self):
        """Test noise seeds must be non-negative."""
        with pytest.raises(ValidationError):
            NoiseConfig(seed=-1)

        assert NoiseConfig(seed=0).seed == 0

    def test_presets(self):
        """Test presets are valid named configurations."""
        assert set(PRESETS) == {"amplitude_60hz", "noisy_spectrum", "low_frequency_sweep"}
        assert PRESETS["amplitude_60hz"].signal.oscillation_frequency_hz == 60.0
        assert PRESETS["noisy_spectrum"].noise.enabled
        for preset in PRESETS.values():
            assert isinstance(preset, SignalLabConfig)
